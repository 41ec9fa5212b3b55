# app/crud/user.py
from typing import Any, Dict, Optional

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import ValidationError
from app.core.security import hash_password
from app.crud.base import CRUDRepository
from app.models import User

repository = CRUDRepository(
    User,
    "User",
    search_columns=("username", "email"),
)


# --- Lookups ---
async def get_by_login(db: AsyncSession, identifier: str) -> Optional[User]:
    """Single user whose username OR email equals the identifier."""
    result = await db.execute(
        select(User).where(or_(User.username == identifier, User.email == identifier)).limit(1)
    )
    return result.scalar_one_or_none()


async def get_by_email(db: AsyncSession, email: str) -> Optional[User]:
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


# --- Uniqueness check ---
async def ensure_unique(db: AsyncSession, values: Dict[str, Any], exclude_id: Optional[str] = None):
    for field, label in (("username", "Username"), ("email", "Email")):
        value = values.get(field)
        if not value:
            continue
        stmt = select(User.id).where(getattr(User, field) == value)
        if exclude_id:
            stmt = stmt.where(User.id != exclude_id)
        if await db.scalar(stmt) is not None:
            raise ValidationError(f"{label} already exists")


def _with_hashed_password(values: Dict[str, Any]) -> Dict[str, Any]:
    values = dict(values)
    password = values.pop("password", None)
    if password:
        values["password_hash"] = hash_password(password)
    if values.get("role") is not None and hasattr(values["role"], "value"):
        values["role"] = values["role"].value
    return values


# ---------------- CREATE ----------------
async def create_user(db: AsyncSession, data: Dict[str, Any]) -> User:
    await ensure_unique(db, data)
    return await repository.create(db, _with_hashed_password(data))


# ---------------- UPDATE ----------------
async def update_user(db: AsyncSession, user_id: str, changes: Dict[str, Any]) -> User:
    await ensure_unique(db, changes, exclude_id=user_id)
    return await repository.update(db, user_id, _with_hashed_password(changes))
