from typing import Any, Literal, Optional
from pydantic import BaseModel
from datetime import datetime

from app.schemas.common import RequiredStr, SearchParams


# --- Requests ---
class UserSettingsCreate(BaseModel):
    user_id: RequiredStr
    dashboard_preferences: Optional[Any] = None
    notification_settings: Optional[Any] = None
    configuration: Optional[Any] = None


class UserSettingsUpdate(BaseModel):
    dashboard_preferences: Optional[Any] = None
    notification_settings: Optional[Any] = None
    configuration: Optional[Any] = None


class UserSettingsSearchParams(SearchParams):
    sort_by: Literal["updated_at"] = "updated_at"
    user_id: Optional[str] = None


# --- Response ---
class UserSettingsRead(BaseModel):
    id: str
    user_id: str
    dashboard_preferences: Optional[Any] = None
    notification_settings: Optional[Any] = None
    configuration: Optional[Any] = None
    updated_at: datetime

    model_config = {"from_attributes": True}
