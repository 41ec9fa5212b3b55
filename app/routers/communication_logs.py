from typing import Annotated, List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.deps import get_current_user
from app.crud import communication_log as crud_log
from app.db.session import get_db
from app.schemas.common import DeleteResponse
from app.schemas.communication_log import (
    CommunicationLogCreate,
    CommunicationLogRead,
    CommunicationLogSearchParams,
    CommunicationLogUpdate,
)

router = APIRouter(
    prefix="/api/communication-logs",
    tags=["Communication Logs"],
    dependencies=[Depends(get_current_user)],
)


@router.post("", response_model=CommunicationLogRead, status_code=201, summary="Log a client communication")
async def create_log(request: CommunicationLogCreate, db: AsyncSession = Depends(get_db)):
    return await crud_log.repository.create(db, request.model_dump())


@router.get(
    "",
    response_model=List[CommunicationLogRead],
    summary="Search communication logs",
    description="Exact-match filters: `client_id`, `communication_type`.",
)
async def list_logs(
    params: Annotated[CommunicationLogSearchParams, Query()],
    db: AsyncSession = Depends(get_db),
):
    filters = {"client_id": params.client_id, "communication_type": params.communication_type}
    return await crud_log.repository.list(db, params, filters=filters)


@router.get("/{log_id}", response_model=CommunicationLogRead)
async def get_log(log_id: str, db: AsyncSession = Depends(get_db)):
    return await crud_log.repository.get(db, log_id)


@router.put("/{log_id}", response_model=CommunicationLogRead)
async def update_log(log_id: str, request: CommunicationLogUpdate, db: AsyncSession = Depends(get_db)):
    return await crud_log.repository.update(db, log_id, request.model_dump(exclude_unset=True))


@router.delete("/{log_id}", response_model=DeleteResponse)
async def delete_log(log_id: str, db: AsyncSession = Depends(get_db)):
    await crud_log.repository.delete(db, log_id)
    return {"message": f"Communication log {log_id} deleted successfully", "id": log_id}
