from typing import Annotated, List

from fastapi import APIRouter, Depends, File, Query, Response, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.deps import get_current_user, require
from app.core.policy import Action
from app.crud import client as crud_client
from app.db.session import get_db
from app.schemas.client import ClientCreate, ClientRead, ClientSearchParams, ClientUpdate
from app.schemas.common import DeleteResponse
from app.schemas.onboarding import ClientOnboardingRequest, ClientOnboardingResponse
from app.services.client_onboarding import ClientOnboardingService
from app.services.client_transfer import ClientTransferService

router = APIRouter(prefix="/api/clients", tags=["Clients"])


# --- Bulk transfer (declared before /{client_id}) ---
@router.post(
    "/import",
    summary="Bulk import clients",
    description="Parses the first sheet of an uploaded .xlsx or .csv file and inserts every row as a client, all or nothing.",
    dependencies=[Depends(require(Action.CLIENT_IMPORT))],
)
async def import_clients(file: UploadFile = File(...), db: AsyncSession = Depends(get_db)):
    content = await file.read()
    created = await ClientTransferService.import_clients(file.filename, content, db)
    return {
        "message": "Bulk import completed successfully",
        "data": [ClientRead.model_validate(c) for c in created],
    }


@router.get(
    "/export",
    summary="Export clients as CSV",
    dependencies=[Depends(require(Action.CLIENT_EXPORT))],
)
async def export_clients(db: AsyncSession = Depends(get_db)):
    csv_data = await ClientTransferService.export_clients_csv(db)
    return Response(
        content=csv_data,
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=clients_export.csv"},
    )


@router.post(
    "/onboard",
    response_model=ClientOnboardingResponse,
    status_code=201,
    summary="Create a client with its first related records",
    description="Creates the client and optional property interest, communication log and document in one transaction.",
    dependencies=[Depends(get_current_user)],
)
async def onboard_client(request: ClientOnboardingRequest, db: AsyncSession = Depends(get_db)):
    return await ClientOnboardingService.onboard_client(request, db)


# --- CRUD ---
@router.post(
    "",
    response_model=ClientRead,
    status_code=201,
    summary="Create a client",
    dependencies=[Depends(get_current_user)],
)
async def create_client(request: ClientCreate, db: AsyncSession = Depends(get_db)):
    return await crud_client.repository.create(db, request.model_dump())


@router.get(
    "",
    response_model=List[ClientRead],
    summary="Search clients",
    dependencies=[Depends(get_current_user)],
)
async def list_clients(
    params: Annotated[ClientSearchParams, Query()],
    db: AsyncSession = Depends(get_db),
):
    return await crud_client.repository.list(db, params)


@router.get("/{client_id}", response_model=ClientRead, dependencies=[Depends(get_current_user)])
async def get_client(client_id: str, db: AsyncSession = Depends(get_db)):
    return await crud_client.repository.get(db, client_id)


@router.put(
    "/{client_id}",
    response_model=ClientRead,
    summary="Update a client",
    description="Partial update: only fields present in the body change.",
    dependencies=[Depends(get_current_user)],
)
async def update_client(client_id: str, request: ClientUpdate, db: AsyncSession = Depends(get_db)):
    return await crud_client.repository.update(db, client_id, request.model_dump(exclude_unset=True))


@router.delete("/{client_id}", response_model=DeleteResponse, dependencies=[Depends(get_current_user)])
async def delete_client(client_id: str, db: AsyncSession = Depends(get_db)):
    await crud_client.repository.delete(db, client_id)
    return {"message": f"Client {client_id} deleted successfully", "id": client_id}
