"""Shared write helpers: single-flag maintenance and partial-update merge."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel
from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute

from cardstudio.models.card import utcnow

logger = logging.getLogger(__name__)


async def clear_flag(
    db: AsyncSession,
    flag: InstrumentedAttribute,
    *scope: Any,
    exclude_id: str | None = None,
) -> None:
    """Unset ``flag`` on every row in ``scope`` (except ``exclude_id``).

    Runs in the caller's transaction, so the clear and the following
    insert/update commit or roll back together. The partial unique
    indexes on both tables reject any leftover second flagged row.
    """
    model = flag.class_
    stmt = (
        update(model)
        .where(*scope, flag.is_(True))
        .values({flag: False, model.updated_at: utcnow()})
        .execution_options(synchronize_session="fetch")
    )
    if exclude_id is not None:
        stmt = stmt.where(model.id != exclude_id)
    await db.execute(stmt)
    logger.info("Cleared %s.%s in scope", model.__tablename__, flag.key)


def provided_fields(data: BaseModel, *exclude: str) -> dict[str, Any]:
    """Fields the caller actually sent. Explicit nulls count as not sent."""
    return {
        key: value
        for key, value in data.model_dump(exclude_unset=True).items()
        if value is not None and key not in exclude
    }


def merge_changes(record: Any, changes: dict[str, Any]) -> bool:
    """Apply ``changes`` to ``record``; return False when there was nothing to do."""
    if not changes:
        return False
    for field, value in changes.items():
        setattr(record, field, value)
    record.updated_at = utcnow()
    return True
