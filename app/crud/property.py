# app/crud/property.py
from app.crud.base import CRUDRepository
from app.models import Property

repository = CRUDRepository(
    Property,
    "Property",
    search_columns=("address", "property_type"),
    presence_fields=("description",),
)
