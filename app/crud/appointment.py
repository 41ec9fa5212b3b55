# app/crud/appointment.py
from app.crud.base import CRUDRepository
from app.models import Appointment, Client, Property, User

repository = CRUDRepository(
    Appointment,
    "Appointment",
    search_columns=("appointment_time", "notes"),
    presence_fields=("property_id", "notes", "is_confirmed"),
    references={
        "client_id": (Client, "Client"),
        "agent_id": (User, "Agent"),
        "property_id": (Property, "Property"),
    },
)
