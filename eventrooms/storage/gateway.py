"""
eventrooms/storage/gateway.py

Generic async persistence operations parameterized by mapped class.

All functions accept an AsyncSession and are flush-only (no commit).
The caller (the service layer) owns the transaction boundary.

``criteria`` are SQLAlchemy boolean clauses combined with AND; passing none
matches every row.  ``include`` is a sequence of relationship attributes to
eager-load with selectinload.
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

from sqlalchemy import ColumnElement, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute, selectinload

from eventrooms.database.postgres import Base

ModelT = TypeVar("ModelT", bound=Base)


def _select(
    model: type[ModelT],
    criteria: Sequence[ColumnElement[bool]],
    include: Sequence[InstrumentedAttribute[Any]],
):
    stmt = select(model).where(*criteria)
    if include:
        stmt = stmt.options(*(selectinload(rel) for rel in include))
        # Objects already in the identity map (e.g. just inserted) must
        # still get their relationships populated.
        stmt = stmt.execution_options(populate_existing=True)
    return stmt


async def find_one(
    session: AsyncSession,
    model: type[ModelT],
    *criteria: ColumnElement[bool],
    include: Sequence[InstrumentedAttribute[Any]] = (),
) -> ModelT | None:
    """Return the first row matching *criteria*, or None."""
    stmt = _select(model, criteria, include).limit(1)
    result = await session.execute(stmt)
    return result.scalars().first()


async def count(
    session: AsyncSession,
    model: type[ModelT],
    *criteria: ColumnElement[bool],
) -> int:
    """Return the number of rows matching *criteria*."""
    stmt = select(func.count()).select_from(model).where(*criteria)
    return (await session.execute(stmt)).scalar_one()


async def find_page(
    session: AsyncSession,
    model: type[ModelT],
    *criteria: ColumnElement[bool],
    page: int,
    page_size: int,
    order_by: Sequence[ColumnElement[Any] | InstrumentedAttribute[Any]],
    include: Sequence[InstrumentedAttribute[Any]] = (),
) -> list[ModelT]:
    """Return at most *page_size* rows for the 1-based *page*.

    *order_by* must be deterministic or pages may overlap between calls.
    """
    if page < 1 or page_size < 1:
        raise ValueError("page and page_size must be >= 1")
    stmt = (
        _select(model, criteria, include)
        .order_by(*order_by)
        .offset((page - 1) * page_size)
        .limit(page_size)
    )
    rows = (await session.execute(stmt)).scalars().all()
    return list(rows)


async def add(session: AsyncSession, record: ModelT) -> ModelT:
    """Stage *record*, flush it and refresh server-generated columns."""
    session.add(record)
    await session.flush()
    await session.refresh(record)
    return record
