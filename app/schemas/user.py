from typing import Literal, Optional, Union
from pydantic import AliasChoices, BaseModel, EmailStr, Field
from datetime import datetime

from app.core.policy import Role
from app.schemas.common import RequiredStr, SearchParams


# --- Requests ---
class UserCreate(BaseModel):
    username: RequiredStr
    email: EmailStr
    # plaintext; the front end historically posts it as `password_hash`
    password: RequiredStr = Field(validation_alias=AliasChoices("password", "password_hash"))
    role: Role


class UserUpdate(BaseModel):
    username: Optional[str] = None
    email: Optional[Union[EmailStr, Literal[""]]] = None
    password: Optional[str] = Field(None, validation_alias=AliasChoices("password", "password_hash"))
    role: Optional[Union[Role, Literal[""]]] = None


class UserSearchParams(SearchParams):
    sort_by: Literal["username", "email", "created_at"] = "created_at"


# --- Response ---
class UserRead(BaseModel):
    id: str
    username: str
    email: str
    role: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
