# app/crud/client.py
from app.crud.base import CRUDRepository
from app.models import Client

repository = CRUDRepository(
    Client,
    "Client",
    search_columns=("first_name", "last_name", "email"),
    presence_fields=("additional_details",),
)
