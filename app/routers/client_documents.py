from typing import Annotated, List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.deps import get_current_user
from app.crud import client_document as crud_document
from app.db.session import get_db
from app.schemas.client_document import (
    ClientDocumentCreate,
    ClientDocumentRead,
    ClientDocumentSearchParams,
    ClientDocumentUpdate,
)
from app.schemas.common import DeleteResponse

router = APIRouter(
    prefix="/api/client-documents",
    tags=["Client Documents"],
    dependencies=[Depends(get_current_user)],
)


@router.post("", response_model=ClientDocumentRead, status_code=201, summary="Attach a document record to a client")
async def create_document(request: ClientDocumentCreate, db: AsyncSession = Depends(get_db)):
    return await crud_document.repository.create(db, request.model_dump())


@router.get("", response_model=List[ClientDocumentRead], summary="Search client documents")
async def list_documents(
    params: Annotated[ClientDocumentSearchParams, Query()],
    db: AsyncSession = Depends(get_db),
):
    return await crud_document.repository.list(db, params, filters={"client_id": params.client_id})


@router.get("/{document_id}", response_model=ClientDocumentRead)
async def get_document(document_id: str, db: AsyncSession = Depends(get_db)):
    return await crud_document.repository.get(db, document_id)


@router.put("/{document_id}", response_model=ClientDocumentRead)
async def update_document(document_id: str, request: ClientDocumentUpdate, db: AsyncSession = Depends(get_db)):
    return await crud_document.repository.update(db, document_id, request.model_dump(exclude_unset=True))


@router.delete("/{document_id}", response_model=DeleteResponse)
async def delete_document(document_id: str, db: AsyncSession = Depends(get_db)):
    await crud_document.repository.delete(db, document_id)
    return {"message": f"Client document {document_id} deleted successfully", "id": document_id}
