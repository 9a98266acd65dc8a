"""
eventrooms/storage/event_room_store.py

Composite-key operations for EventRoom associations.

Rows are looked up by (event_id, room_id) directly; the surrogate id is only
used to give listings a stable order.  Flush-only, like gateway.py.
"""
from __future__ import annotations

import uuid

from sqlalchemy import ColumnElement, delete
from sqlalchemy.ext.asyncio import AsyncSession

from eventrooms.models.sql.event_room import EventRoom
from eventrooms.storage import gateway

RELATED = (EventRoom.event, EventRoom.room)


def key_criteria(event_id: uuid.UUID, room_id: uuid.UUID) -> list[ColumnElement[bool]]:
    return [EventRoom.event_id == event_id, EventRoom.room_id == room_id]


def match_filter(
    event_id: uuid.UUID | None = None,
    room_id: uuid.UUID | None = None,
) -> list[ColumnElement[bool]]:
    """Build the listing predicate.  Unset filters match everything."""
    criteria: list[ColumnElement[bool]] = []
    if event_id is not None:
        criteria.append(EventRoom.event_id == event_id)
    if room_id is not None:
        criteria.append(EventRoom.room_id == room_id)
    return criteria


async def find_by_keys(
    session: AsyncSession,
    event_id: uuid.UUID,
    room_id: uuid.UUID,
    *,
    include_related: bool = False,
) -> EventRoom | None:
    """Fetch the association for (event_id, room_id), or None.

    Set include_related=True to eager-load the Event and Room projections.
    """
    return await gateway.find_one(
        session,
        EventRoom,
        *key_criteria(event_id, room_id),
        include=RELATED if include_related else (),
    )


async def delete_by_keys(
    session: AsyncSession,
    event_id: uuid.UUID,
    room_id: uuid.UUID,
) -> bool:
    """Delete the association for (event_id, room_id).

    Returns True if a row was deleted, False if none existed.
    """
    stmt = (
        delete(EventRoom)
        .where(*key_criteria(event_id, room_id))
        .returning(EventRoom.id)
    )
    result = await session.execute(stmt)
    await session.flush()
    return result.scalar_one_or_none() is not None


async def list_page(
    session: AsyncSession,
    *,
    event_id: uuid.UUID | None = None,
    room_id: uuid.UUID | None = None,
    page: int = 1,
    page_size: int = 10,
) -> tuple[list[EventRoom], int]:
    """
    Return a (results, total_count) tuple for one page of associations.

    Filters are optional and combined with AND logic.  Results are ordered by
    the surrogate id ascending and carry their Event and Room projections.
    """
    criteria = match_filter(event_id, room_id)
    total = await gateway.count(session, EventRoom, *criteria)
    if total == 0:
        return [], 0
    rows = await gateway.find_page(
        session,
        EventRoom,
        *criteria,
        page=page,
        page_size=page_size,
        order_by=[EventRoom.id.asc()],
        include=RELATED,
    )
    return rows, total
