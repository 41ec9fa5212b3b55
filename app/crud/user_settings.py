# app/crud/user_settings.py
from typing import Any, Dict

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import NotFoundError, ValidationError
from app.crud.base import CRUDRepository
from app.models import User, UserSettings

repository = CRUDRepository(
    UserSettings,
    "Settings",
    presence_fields=("dashboard_preferences", "notification_settings", "configuration"),
    created_field=None,
    references={"user_id": (User, "User")},
)


async def get_by_user_id(db: AsyncSession, user_id: str) -> UserSettings:
    result = await db.execute(select(UserSettings).where(UserSettings.user_id == user_id))
    settings = result.scalar_one_or_none()
    if settings is None:
        raise NotFoundError("Settings not found")
    return settings


async def create_settings(db: AsyncSession, data: Dict[str, Any]) -> UserSettings:
    """One settings row per user."""
    existing = await db.scalar(select(UserSettings.id).where(UserSettings.user_id == data["user_id"]))
    if existing is not None:
        raise ValidationError("Settings already exist for this user")
    return await repository.create(db, data)
