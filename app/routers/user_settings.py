from typing import Annotated, List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.deps import get_current_user
from app.crud import user_settings as crud_settings
from app.db.session import get_db
from app.schemas.common import DeleteResponse
from app.schemas.user_settings import (
    UserSettingsCreate,
    UserSettingsRead,
    UserSettingsSearchParams,
    UserSettingsUpdate,
)

router = APIRouter(prefix="/api/user-settings", tags=["User Settings"], dependencies=[Depends(get_current_user)])


@router.post("", response_model=UserSettingsRead, status_code=201, summary="Create a user's settings")
async def create_settings(request: UserSettingsCreate, db: AsyncSession = Depends(get_db)):
    return await crud_settings.create_settings(db, request.model_dump())


@router.get("", response_model=List[UserSettingsRead], summary="List settings rows")
async def list_settings(
    params: Annotated[UserSettingsSearchParams, Query()],
    db: AsyncSession = Depends(get_db),
):
    return await crud_settings.repository.list(db, params, filters={"user_id": params.user_id})


@router.get(
    "/{user_id}",
    response_model=UserSettingsRead,
    summary="Get settings by user id",
    description="Looked up by the owning user's id, not the settings row id.",
)
async def get_settings_for_user(user_id: str, db: AsyncSession = Depends(get_db)):
    return await crud_settings.get_by_user_id(db, user_id)


@router.put(
    "/{settings_id}",
    response_model=UserSettingsRead,
    summary="Update settings",
    description="Partial update by settings row id; an explicit null clears a section.",
)
async def update_settings(settings_id: str, request: UserSettingsUpdate, db: AsyncSession = Depends(get_db)):
    return await crud_settings.repository.update(db, settings_id, request.model_dump(exclude_unset=True))


@router.delete("/{settings_id}", response_model=DeleteResponse)
async def delete_settings(settings_id: str, db: AsyncSession = Depends(get_db)):
    await crud_settings.repository.delete(db, settings_id)
    return {"message": f"Settings {settings_id} deleted successfully", "id": settings_id}
