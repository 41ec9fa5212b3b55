# app/crud/query.py
from typing import Any, Dict, Iterable, Optional

from sqlalchemy import Select, and_, asc, desc, or_, select

from app.schemas.common import SearchParams


def escape_like(text: str) -> str:
    """Match `%` and `_` in user input literally."""
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def build_search_query(
    model,
    params: SearchParams,
    search_columns: Iterable[str] = (),
    filters: Optional[Dict[str, Any]] = None,
) -> Select:
    """
    Translate a generic list request into a SELECT.

    - `params.query` becomes a case-insensitive substring match OR-ed across
      `search_columns`.
    - `filters` are exact-match conditions AND-ed together; None values are skipped.
    - `params.sort_by` has already been narrowed to the entity's allow-list by
      its search-params schema, so it is always a real column.
    - Rows are ordered by the sort column, then by id, so LIMIT/OFFSET pages
      are disjoint and contiguous.
    """
    stmt = select(model)
    conditions = []

    if params.query:
        pattern = f"%{escape_like(params.query)}%"
        matches = [getattr(model, column).ilike(pattern, escape="\\") for column in search_columns]
        if matches:
            conditions.append(or_(*matches))

    for column, value in (filters or {}).items():
        if value is not None:
            conditions.append(getattr(model, column) == value)

    if conditions:
        stmt = stmt.where(and_(*conditions))

    direction = desc if params.sort_order == "desc" else asc
    sort_by = getattr(params, "sort_by", "created_at")
    stmt = stmt.order_by(direction(getattr(model, sort_by)), direction(model.id))

    return stmt.limit(params.limit).offset(params.offset)
