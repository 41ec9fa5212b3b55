# app/crud/base.py
import logging
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Tuple
from uuid import uuid4

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import NotFoundError, UpstreamError, ValidationError
from app.crud.query import build_search_query
from app.schemas.common import SearchParams

logger = logging.getLogger(__name__)


async def commit_or_raise(db: AsyncSession) -> None:
    """Commit; storage failures roll back and surface as UpstreamError."""
    try:
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error("Commit failed: %s", e)
        raise UpstreamError(str(getattr(e, "orig", None) or e))


class CRUDRepository:
    """
    Create/read/update/delete for one entity table.

    Args:
        model: SQLAlchemy model with a string `id` primary key.
        label: Human name used in error messages ("Client").
        search_columns: text columns matched by the list `query` parameter.
        presence_fields: attributes applied on update whenever they are present
            in the body, including explicit null/false. Every other attribute is
            applied only when truthy, so an empty required string is ignored.
        created_field / updated_field: server-managed timestamp columns, or None
            when the table does not carry them.
        references: attribute -> (model, label) whose value must resolve to an
            existing row when set.
    """

    def __init__(
        self,
        model,
        label: str,
        search_columns: Iterable[str] = (),
        presence_fields: Iterable[str] = (),
        created_field: Optional[str] = "created_at",
        updated_field: Optional[str] = "updated_at",
        references: Optional[Dict[str, Tuple[Any, str]]] = None,
    ):
        self.model = model
        self.label = label
        self.search_columns = tuple(search_columns)
        self.presence_fields = frozenset(presence_fields)
        self.created_field = created_field
        self.updated_field = updated_field
        self.references = references or {}

    # ---------------- HELPERS ----------------
    def not_found(self) -> NotFoundError:
        return NotFoundError(f"{self.label} not found")

    def merge_values(self, changes: Dict[str, Any]) -> Dict[str, Any]:
        """Columns to write for a partial update body (already `exclude_unset`)."""
        return {
            field: value
            for field, value in changes.items()
            if field in self.presence_fields or value
        }

    async def check_references(self, db: AsyncSession, values: Dict[str, Any]) -> None:
        for field, (ref_model, ref_label) in self.references.items():
            ref_id = values.get(field)
            if ref_id is None:
                continue
            found = await db.scalar(select(ref_model.id).where(ref_model.id == ref_id))
            if found is None:
                raise ValidationError(f"{ref_label} not found for {field}")

    # ---------------- CREATE ----------------
    async def create(self, db: AsyncSession, data: Dict[str, Any], commit: bool = True):
        await self.check_references(db, data)

        now = datetime.utcnow()
        values = dict(data)
        if self.created_field:
            values[self.created_field] = now
        if self.updated_field:
            values[self.updated_field] = now

        record = self.model(id=str(uuid4()), **values)
        db.add(record)
        if commit:
            await commit_or_raise(db)
            logger.info("%s %s created", self.label, record.id)
        else:
            await db.flush()
        return record

    # ---------------- READ ----------------
    async def get(self, db: AsyncSession, record_id: str):
        result = await db.execute(select(self.model).where(self.model.id == record_id))
        record = result.scalar_one_or_none()
        if record is None:
            raise self.not_found()
        return record

    async def list(
        self,
        db: AsyncSession,
        params: SearchParams,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[Any]:
        stmt = build_search_query(self.model, params, self.search_columns, filters)
        result = await db.execute(stmt)
        return result.scalars().all()

    async def all(self, db: AsyncSession) -> List[Any]:
        order_column = getattr(self.model, self.created_field or "id")
        result = await db.execute(select(self.model).order_by(order_column, self.model.id))
        return result.scalars().all()

    # ---------------- UPDATE ----------------
    async def update(self, db: AsyncSession, record_id: str, changes: Dict[str, Any]):
        """
        Partial merge: only the columns being changed are sent, in a single
        UPDATE ... RETURNING; the row is not read first.
        """
        values = self.merge_values(changes)
        if self.updated_field:
            values[self.updated_field] = datetime.utcnow()
        if not values:
            return await self.get(db, record_id)

        result = await db.execute(
            update(self.model)
            .where(self.model.id == record_id)
            .values(**values)
            .returning(self.model)
        )
        record = result.scalar_one_or_none()
        if record is None:
            await db.rollback()
            raise self.not_found()

        try:
            await self.check_references(db, values)
        except ValidationError:
            await db.rollback()
            raise

        await commit_or_raise(db)
        logger.info("%s %s updated (%s)", self.label, record_id, ", ".join(sorted(values)))
        return record

    # ---------------- DELETE ----------------
    async def delete(self, db: AsyncSession, record_id: str) -> None:
        """Remove the row. Dependents are left in place."""
        result = await db.execute(delete(self.model).where(self.model.id == record_id))
        if result.rowcount == 0:
            await db.rollback()
            raise self.not_found()
        await commit_or_raise(db)
        logger.info("%s %s deleted", self.label, record_id)
