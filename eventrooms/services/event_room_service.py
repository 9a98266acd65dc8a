"""
eventrooms/services/event_room_service.py

Business rules for linking events to rooms.

create
    Validate that both the event and the room exist, reject duplicates,
    persist, commit, and return the re-read record.
get / delete
    Address a single association by its (event_id, room_id) key.
list_filtered
    Paginated listing with optional event/room filters.

Every validation short-circuits before the first write, and all writes run
inside unit_of_work() so a failure leaves nothing behind.  The unique
constraint on (event_id, room_id) backs up the duplicate check when two
creates race.
"""
from __future__ import annotations

import uuid

import structlog
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from eventrooms.database.postgres import unit_of_work
from eventrooms.errors import ConflictError, NotFoundError
from eventrooms.models.schemas.event_room import EventRoomFilter
from eventrooms.models.schemas.pagination import PagedResult
from eventrooms.models.sql.event import Event
from eventrooms.models.sql.event_room import EVENT_ROOM_KEY_CONSTRAINT, EventRoom
from eventrooms.models.sql.room import Room
from eventrooms.storage import event_room_store, gateway

logger = structlog.get_logger(__name__)


class EventRoomService:
    """Orchestrates validation and persistence for EventRoom associations."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create(
        self,
        event_id: uuid.UUID,
        room_id: uuid.UUID,
        *,
        created_by: str | None = None,
    ) -> EventRoom:
        """Link *event_id* to *room_id*.

        Raises:
            NotFoundError: the event or the room does not exist.
            ConflictError: the pair is already linked.
        """
        if await gateway.find_one(self.session, Event, Event.id == event_id) is None:
            raise NotFoundError("Event", event_id=event_id)
        if await gateway.find_one(self.session, Room, Room.id == room_id) is None:
            raise NotFoundError("Room", room_id=room_id)
        if await event_room_store.find_by_keys(self.session, event_id, room_id) is not None:
            logger.info(
                "event_room_conflict",
                event_id=str(event_id),
                room_id=str(room_id),
            )
            raise ConflictError("duplicate association", event_id=event_id, room_id=room_id)

        try:
            async with unit_of_work(self.session):
                await gateway.add(
                    self.session,
                    EventRoom(event_id=event_id, room_id=room_id, created_by=created_by),
                )
        except IntegrityError as exc:
            if EVENT_ROOM_KEY_CONSTRAINT not in str(exc.orig):
                raise
            logger.warning(
                "event_room_conflict_on_write",
                event_id=str(event_id),
                room_id=str(room_id),
            )
            raise ConflictError(
                "duplicate association", event_id=event_id, room_id=room_id
            ) from exc

        created = await event_room_store.find_by_keys(
            self.session, event_id, room_id, include_related=True
        )
        if created is None:
            # Deleted by a concurrent request between commit and re-read.
            raise NotFoundError("EventRoom", event_id=event_id, room_id=room_id)

        logger.info(
            "event_room_created",
            event_room_id=str(created.id),
            event_id=str(event_id),
            room_id=str(room_id),
            created_by=created_by,
        )
        return created

    async def get(self, event_id: uuid.UUID, room_id: uuid.UUID) -> EventRoom:
        """Return the association with its Event and Room loaded."""
        record = await event_room_store.find_by_keys(
            self.session, event_id, room_id, include_related=True
        )
        if record is None:
            raise NotFoundError("EventRoom", event_id=event_id, room_id=room_id)
        return record

    async def list_filtered(self, filters: EventRoomFilter) -> PagedResult[EventRoom]:
        # Unknown event/room ids simply match nothing.
        items, total = await event_room_store.list_page(
            self.session,
            event_id=filters.event_id,
            room_id=filters.room_id,
            page=filters.page_number,
            page_size=filters.page_size,
        )
        return PagedResult.build(
            items,
            page_index=filters.page_number,
            page_size=filters.page_size,
            total_count=total,
        )

    async def delete(self, event_id: uuid.UUID, room_id: uuid.UUID) -> None:
        """Remove the association.  Deleting a missing pair raises NotFoundError."""
        if await event_room_store.find_by_keys(self.session, event_id, room_id) is None:
            raise NotFoundError("EventRoom", event_id=event_id, room_id=room_id)

        async with unit_of_work(self.session):
            deleted = await event_room_store.delete_by_keys(self.session, event_id, room_id)
            if not deleted:
                raise NotFoundError("EventRoom", event_id=event_id, room_id=room_id)

        logger.info("event_room_deleted", event_id=str(event_id), room_id=str(room_id))
