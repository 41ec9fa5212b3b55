from typing import Annotated, List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.deps import get_current_user
from app.crud import client_property_interest as crud_interest
from app.db.session import get_db
from app.schemas.client_property_interest import (
    PropertyInterestCreate,
    PropertyInterestRead,
    PropertyInterestSearchParams,
    PropertyInterestUpdate,
)
from app.schemas.common import DeleteResponse

router = APIRouter(
    prefix="/api/client-property-interests",
    tags=["Client Property Interests"],
    dependencies=[Depends(get_current_user)],
)


@router.post("", response_model=PropertyInterestRead, status_code=201, summary="Record a client's property interest")
async def create_interest(request: PropertyInterestCreate, db: AsyncSession = Depends(get_db)):
    return await crud_interest.repository.create(db, request.model_dump())


@router.get(
    "",
    response_model=List[PropertyInterestRead],
    summary="Search property interests",
    description="Optionally narrowed to one client with `client_id`.",
)
async def list_interests(
    params: Annotated[PropertyInterestSearchParams, Query()],
    db: AsyncSession = Depends(get_db),
):
    return await crud_interest.repository.list(db, params, filters={"client_id": params.client_id})


@router.get("/{interest_id}", response_model=PropertyInterestRead)
async def get_interest(interest_id: str, db: AsyncSession = Depends(get_db)):
    return await crud_interest.repository.get(db, interest_id)


@router.put("/{interest_id}", response_model=PropertyInterestRead)
async def update_interest(interest_id: str, request: PropertyInterestUpdate, db: AsyncSession = Depends(get_db)):
    return await crud_interest.repository.update(db, interest_id, request.model_dump(exclude_unset=True))


@router.delete("/{interest_id}", response_model=DeleteResponse)
async def delete_interest(interest_id: str, db: AsyncSession = Depends(get_db)):
    await crud_interest.repository.delete(db, interest_id)
    return {"message": f"Record {interest_id} deleted successfully", "id": interest_id}
