# app/crud/client_document.py
from app.crud.base import CRUDRepository
from app.models import Client, ClientDocument

repository = CRUDRepository(
    ClientDocument,
    "Document",
    search_columns=("document_name", "document_type"),
    created_field="uploaded_at",
    updated_field=None,
    references={"client_id": (Client, "Client")},
)
