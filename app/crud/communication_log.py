# app/crud/communication_log.py
from app.crud.base import CRUDRepository
from app.models import Client, CommunicationLog, User

# `timestamp` is supplied by the caller; the table has no server-managed timestamps.
repository = CRUDRepository(
    CommunicationLog,
    "Log",
    search_columns=("communication_type", "note"),
    presence_fields=("follow_up_flag",),
    created_field=None,
    updated_field=None,
    references={
        "client_id": (Client, "Client"),
        "user_id": (User, "User"),
    },
)
