from typing import Literal, Optional
from pydantic import BaseModel, field_validator
from datetime import datetime

from app.schemas.common import RequiredStr, SearchParams, check_http_url


# --- Requests ---
class ClientDocumentFields(BaseModel):
    """Document fields without the owning client; reused by client onboarding."""
    document_name: RequiredStr
    document_url: RequiredStr
    document_type: RequiredStr

    @field_validator("document_url")
    @classmethod
    def validate_url(cls, value):
        return check_http_url(value)


class ClientDocumentCreate(ClientDocumentFields):
    client_id: RequiredStr


class ClientDocumentUpdate(BaseModel):
    client_id: Optional[str] = None
    document_name: Optional[str] = None
    document_url: Optional[str] = None
    document_type: Optional[str] = None

    @field_validator("document_url")
    @classmethod
    def validate_url(cls, value):
        return check_http_url(value)


class ClientDocumentSearchParams(SearchParams):
    sort_by: Literal["document_name", "uploaded_at"] = "uploaded_at"
    client_id: Optional[str] = None


# --- Response ---
class ClientDocumentRead(BaseModel):
    id: str
    client_id: str
    document_name: str
    document_url: str
    document_type: str
    uploaded_at: datetime

    model_config = {"from_attributes": True}
