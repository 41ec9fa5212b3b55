from typing import Annotated, List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.deps import get_current_user
from app.crud import appointment as crud_appointment
from app.db.session import get_db
from app.schemas.appointment import (
    AppointmentCreate,
    AppointmentRead,
    AppointmentSearchParams,
    AppointmentUpdate,
)
from app.schemas.common import DeleteResponse

router = APIRouter(prefix="/api/appointments", tags=["Appointments"], dependencies=[Depends(get_current_user)])


@router.post(
    "",
    response_model=AppointmentRead,
    status_code=201,
    summary="Schedule an appointment",
    description="Links a client, an agent (user) and optionally a property. Every referenced id must exist."
)
async def create_appointment(request: AppointmentCreate, db: AsyncSession = Depends(get_db)):
    return await crud_appointment.repository.create(db, request.model_dump())


@router.get(
    "",
    response_model=List[AppointmentRead],
    summary="Search appointments",
    description="Exact-match filters: `client_id`, `agent_id`, `date` (appointment date).",
)
async def list_appointments(
    params: Annotated[AppointmentSearchParams, Query()],
    db: AsyncSession = Depends(get_db),
):
    filters = {
        "client_id": params.client_id,
        "agent_id": params.agent_id,
        "appointment_date": params.date,
    }
    return await crud_appointment.repository.list(db, params, filters=filters)


@router.get("/{appointment_id}", response_model=AppointmentRead)
async def get_appointment(appointment_id: str, db: AsyncSession = Depends(get_db)):
    return await crud_appointment.repository.get(db, appointment_id)


@router.put("/{appointment_id}", response_model=AppointmentRead)
async def update_appointment(appointment_id: str, request: AppointmentUpdate, db: AsyncSession = Depends(get_db)):
    return await crud_appointment.repository.update(db, appointment_id, request.model_dump(exclude_unset=True))


@router.delete("/{appointment_id}", response_model=DeleteResponse)
async def delete_appointment(appointment_id: str, db: AsyncSession = Depends(get_db)):
    await crud_appointment.repository.delete(db, appointment_id)
    return {"message": f"Appointment {appointment_id} deleted successfully", "id": appointment_id}
