from typing import Any, Literal, Optional, Union
from pydantic import BaseModel, EmailStr
from datetime import datetime

from app.schemas.common import RequiredStr, SearchParams


# --- Requests ---
class ClientCreate(BaseModel):
    first_name: RequiredStr
    last_name: RequiredStr
    email: EmailStr
    phone: RequiredStr
    address: RequiredStr
    status: RequiredStr
    additional_details: Optional[Any] = None


class ClientUpdate(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[Union[EmailStr, Literal[""]]] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    status: Optional[str] = None
    additional_details: Optional[Any] = None


class ClientSearchParams(SearchParams):
    sort_by: Literal["first_name", "last_name", "created_at"] = "created_at"


# --- Response ---
class ClientRead(BaseModel):
    id: str
    first_name: str
    last_name: str
    email: str
    phone: str
    address: str
    status: str
    additional_details: Optional[Any] = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
