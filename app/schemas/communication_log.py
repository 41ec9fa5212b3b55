from typing import Literal, Optional
from pydantic import BaseModel, field_validator
from datetime import datetime

from app.schemas.common import RequiredStr, SearchParams, reject_null, to_naive_utc


# --- Requests ---
class CommunicationLogFields(BaseModel):
    """Log fields without the owning client; reused by client onboarding."""
    user_id: RequiredStr
    communication_type: RequiredStr  # email, call, meeting, ...
    note: RequiredStr
    follow_up_flag: bool = False
    timestamp: datetime

    @field_validator("timestamp")
    @classmethod
    def normalize_timestamp(cls, value):
        return to_naive_utc(value)


class CommunicationLogCreate(CommunicationLogFields):
    client_id: RequiredStr


class CommunicationLogUpdate(BaseModel):
    client_id: Optional[str] = None
    user_id: Optional[str] = None
    communication_type: Optional[str] = None
    note: Optional[str] = None
    follow_up_flag: Optional[bool] = None
    timestamp: Optional[datetime] = None

    @field_validator("timestamp")
    @classmethod
    def normalize_timestamp(cls, value):
        return to_naive_utc(value)

    @field_validator("follow_up_flag")
    @classmethod
    def follow_up_not_null(cls, value):
        return reject_null(value)


class CommunicationLogSearchParams(SearchParams):
    sort_by: Literal["communication_type", "timestamp"] = "timestamp"
    client_id: Optional[str] = None
    communication_type: Optional[str] = None


# --- Response ---
class CommunicationLogRead(BaseModel):
    id: str
    client_id: str
    user_id: str
    communication_type: str
    note: str
    follow_up_flag: bool
    timestamp: datetime

    model_config = {"from_attributes": True}
