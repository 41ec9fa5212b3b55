from typing import Annotated, List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.deps import require
from app.core.policy import Action
from app.crud import user as crud_user
from app.db.session import get_db
from app.schemas.common import DeleteResponse
from app.schemas.user import UserCreate, UserRead, UserSearchParams, UserUpdate

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.post(
    "",
    response_model=UserRead,
    status_code=201,
    summary="Create a user",
    dependencies=[Depends(require(Action.USER_CREATE))],
)
async def create_user(request: UserCreate, db: AsyncSession = Depends(get_db)):
    return await crud_user.create_user(db, request.model_dump())


@router.get(
    "",
    response_model=List[UserRead],
    summary="Search users",
    dependencies=[Depends(require(Action.USER_LIST))],
)
async def list_users(
    params: Annotated[UserSearchParams, Query()],
    db: AsyncSession = Depends(get_db),
):
    return await crud_user.repository.list(db, params)


@router.get(
    "/{user_id}",
    response_model=UserRead,
    dependencies=[Depends(require(Action.USER_READ))],
)
async def get_user(user_id: str, db: AsyncSession = Depends(get_db)):
    return await crud_user.repository.get(db, user_id)


@router.put(
    "/{user_id}",
    response_model=UserRead,
    summary="Update a user",
    description="Partial update: only fields present in the body change. A new password is re-hashed.",
    dependencies=[Depends(require(Action.USER_UPDATE))],
)
async def update_user(user_id: str, request: UserUpdate, db: AsyncSession = Depends(get_db)):
    return await crud_user.update_user(db, user_id, request.model_dump(exclude_unset=True))


@router.delete(
    "/{user_id}",
    response_model=DeleteResponse,
    dependencies=[Depends(require(Action.USER_DELETE))],
)
async def delete_user(user_id: str, db: AsyncSession = Depends(get_db)):
    await crud_user.repository.delete(db, user_id)
    return {"message": f"User {user_id} deleted successfully", "id": user_id}
