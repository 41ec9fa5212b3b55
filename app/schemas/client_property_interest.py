from typing import Literal, Optional
from pydantic import BaseModel, model_validator
from datetime import datetime

from app.schemas.common import RequiredStr, SearchParams


def _check_price_range(price_min: Optional[float], price_max: Optional[float]) -> None:
    if price_min is not None and price_max is not None and price_min > price_max:
        raise ValueError("price_min must not exceed price_max")


# --- Requests ---
class PropertyInterestFields(BaseModel):
    """Interest fields without the owning client; reused by client onboarding."""
    property_type: RequiredStr
    preferred_location: RequiredStr
    price_min: Optional[float] = None
    price_max: Optional[float] = None
    additional_notes: Optional[str] = None

    @model_validator(mode="after")
    def check_range(self):
        _check_price_range(self.price_min, self.price_max)
        return self


class PropertyInterestCreate(PropertyInterestFields):
    client_id: RequiredStr


class PropertyInterestUpdate(BaseModel):
    client_id: Optional[str] = None
    property_type: Optional[str] = None
    preferred_location: Optional[str] = None
    price_min: Optional[float] = None
    price_max: Optional[float] = None
    additional_notes: Optional[str] = None

    @model_validator(mode="after")
    def check_range(self):
        _check_price_range(self.price_min, self.price_max)
        return self


class PropertyInterestSearchParams(SearchParams):
    sort_by: Literal["property_type", "preferred_location", "created_at"] = "created_at"
    client_id: Optional[str] = None


# --- Response ---
class PropertyInterestRead(BaseModel):
    id: str
    client_id: str
    property_type: str
    preferred_location: str
    price_min: Optional[float] = None
    price_max: Optional[float] = None
    additional_notes: Optional[str] = None
    created_at: datetime

    model_config = {"from_attributes": True}
