from typing import Annotated, List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.deps import get_current_user
from app.crud import property as crud_property
from app.db.session import get_db
from app.schemas.common import DeleteResponse
from app.schemas.property import PropertyCreate, PropertyRead, PropertySearchParams, PropertyUpdate

router = APIRouter(prefix="/api/properties", tags=["Properties"], dependencies=[Depends(get_current_user)])


@router.post("", response_model=PropertyRead, status_code=201, summary="Create a property listing")
async def create_property(request: PropertyCreate, db: AsyncSession = Depends(get_db)):
    return await crud_property.repository.create(db, request.model_dump())


@router.get("", response_model=List[PropertyRead], summary="Search properties")
async def list_properties(
    params: Annotated[PropertySearchParams, Query()],
    db: AsyncSession = Depends(get_db),
):
    return await crud_property.repository.list(db, params)


@router.get("/{property_id}", response_model=PropertyRead)
async def get_property(property_id: str, db: AsyncSession = Depends(get_db)):
    return await crud_property.repository.get(db, property_id)


@router.put("/{property_id}", response_model=PropertyRead)
async def update_property(property_id: str, request: PropertyUpdate, db: AsyncSession = Depends(get_db)):
    return await crud_property.repository.update(db, property_id, request.model_dump(exclude_unset=True))


@router.delete("/{property_id}", response_model=DeleteResponse)
async def delete_property(property_id: str, db: AsyncSession = Depends(get_db)):
    await crud_property.repository.delete(db, property_id)
    return {"message": f"Property {property_id} deleted successfully", "id": property_id}
