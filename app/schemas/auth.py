from pydantic import AliasChoices, BaseModel, EmailStr, Field

from app.schemas.common import RequiredStr
from app.schemas.user import UserRead


class LoginRequest(BaseModel):
    # username or email
    username: RequiredStr = Field(validation_alias=AliasChoices("username", "email", "identifier"))
    password: RequiredStr


class LoginResponse(BaseModel):
    token: str
    user: UserRead


class ForgotPasswordRequest(BaseModel):
    email: EmailStr


class ResetPasswordRequest(BaseModel):
    token: RequiredStr
    password: RequiredStr
