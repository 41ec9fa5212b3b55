from typing import Literal, Optional
from pydantic import BaseModel
from datetime import datetime

from app.schemas.common import RequiredStr, SearchParams


# --- Requests ---
class PropertyCreate(BaseModel):
    address: RequiredStr
    property_type: RequiredStr
    price: float
    status: RequiredStr
    description: Optional[str] = None


class PropertyUpdate(BaseModel):
    address: Optional[str] = None
    property_type: Optional[str] = None
    price: Optional[float] = None
    status: Optional[str] = None
    description: Optional[str] = None


class PropertySearchParams(SearchParams):
    sort_by: Literal["address", "price", "created_at"] = "created_at"
    sort_order: Literal["asc", "desc"] = "asc"


# --- Response ---
class PropertyRead(BaseModel):
    id: str
    address: str
    property_type: str
    price: float
    status: str
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
