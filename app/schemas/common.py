from typing import Annotated, Any, Literal, Optional
from datetime import datetime, timezone
from pydantic import BaseModel, Field, HttpUrl, StringConstraints, TypeAdapter

# Non-empty text used by every create schema
RequiredStr = Annotated[str, StringConstraints(min_length=1)]

_http_url = TypeAdapter(HttpUrl)


def check_http_url(value: Optional[str]) -> Optional[str]:
    """Validate a document URL; the value is stored exactly as sent."""
    if value:
        try:
            _http_url.validate_python(value)
        except ValueError:
            raise ValueError("Must be a valid URL")
    return value


def reject_null(value: Any) -> Any:
    """Optional flags may be omitted from an update but not sent as null."""
    if value is None:
        raise ValueError("must not be null")
    return value


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Timestamps are stored as naive UTC."""
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def date_part(value: Any) -> Any:
    """Accept full ISO datetimes for date fields and keep only the calendar date."""
    if isinstance(value, str) and "T" in value:
        return value.split("T", 1)[0]
    if isinstance(value, datetime):
        return value.date()
    return value


# --- Query params shared by every list endpoint ---
class SearchParams(BaseModel):
    query: Optional[str] = None
    limit: int = Field(10, gt=0)
    offset: int = Field(0, ge=0)
    sort_order: Literal["asc", "desc"] = "desc"


# --- Responses ---
class MessageResponse(BaseModel):
    message: str


class DeleteResponse(BaseModel):
    message: str
    id: str
