import datetime as dt
from typing import Literal, Optional
from pydantic import BaseModel, field_validator

from app.schemas.common import RequiredStr, SearchParams, date_part, reject_null


# --- Requests ---
class AppointmentCreate(BaseModel):
    client_id: RequiredStr
    property_id: Optional[str] = None
    agent_id: RequiredStr
    appointment_date: dt.date
    appointment_time: RequiredStr  # "HH:MM", free text
    notes: Optional[str] = None
    is_confirmed: bool = False

    @field_validator("appointment_date", mode="before")
    @classmethod
    def normalize_date(cls, value):
        return date_part(value)


class AppointmentUpdate(BaseModel):
    client_id: Optional[str] = None
    property_id: Optional[str] = None
    agent_id: Optional[str] = None
    appointment_date: Optional[dt.date] = None
    appointment_time: Optional[str] = None
    notes: Optional[str] = None
    is_confirmed: Optional[bool] = None

    @field_validator("appointment_date", mode="before")
    @classmethod
    def normalize_date(cls, value):
        return date_part(value)

    @field_validator("is_confirmed")
    @classmethod
    def confirmed_not_null(cls, value):
        return reject_null(value)


class AppointmentSearchParams(SearchParams):
    sort_by: Literal["appointment_date", "appointment_time", "created_at"] = "appointment_date"
    client_id: Optional[str] = None
    agent_id: Optional[str] = None
    date: Optional[dt.date] = None


# --- Response ---
class AppointmentRead(BaseModel):
    id: str
    client_id: str
    property_id: Optional[str] = None
    agent_id: str
    appointment_date: dt.date
    appointment_time: str
    notes: Optional[str] = None
    is_confirmed: bool
    created_at: dt.datetime
    updated_at: dt.datetime

    model_config = {"from_attributes": True}
