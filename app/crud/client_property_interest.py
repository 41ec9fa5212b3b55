# app/crud/client_property_interest.py
from app.crud.base import CRUDRepository
from app.models import Client, ClientPropertyInterest

repository = CRUDRepository(
    ClientPropertyInterest,
    "Record",
    search_columns=("property_type", "preferred_location", "additional_notes"),
    presence_fields=("price_min", "price_max", "additional_notes"),
    updated_field=None,
    references={"client_id": (Client, "Client")},
)
