"""
eventrooms/api/routes/event_rooms.py

Event-room association endpoints.

POST /event-rooms
    Link an existing event to an existing room.  404 when either side is
    missing, 409 when the pair is already linked.

GET /event-rooms
    Paginated list with optional event_id / room_id filters.

GET /event-rooms/{event_id}/{room_id}
    Single association with its event and room.

DELETE /event-rooms/{event_id}/{room_id}
    Remove an association.  404 when it does not exist.

Domain errors are translated to HTTP responses by the handlers registered
in eventrooms.main.
"""
from __future__ import annotations

import uuid

import structlog
from fastapi import APIRouter, Depends, Header, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from eventrooms.api.routes import require_api_key
from eventrooms.config import settings
from eventrooms.database.postgres import get_db
from eventrooms.models.schemas.event_room import (
    EventRoomCreate,
    EventRoomFilter,
    EventRoomOut,
)
from eventrooms.models.schemas.pagination import PagedResult
from eventrooms.services.event_room_service import EventRoomService

logger = structlog.get_logger(__name__)

router = APIRouter()


def get_event_room_service(pg_session: AsyncSession = Depends(get_db)) -> EventRoomService:
    return EventRoomService(pg_session)


@router.post(
    "",
    response_model=EventRoomOut,
    status_code=status.HTTP_201_CREATED,
    summary="Link an event to a room",
)
async def create_event_room(
    body: EventRoomCreate,
    x_user_id: str | None = Header(default=None, description="Actor recorded as created_by"),
    service: EventRoomService = Depends(get_event_room_service),
    _key: str = Depends(require_api_key),
) -> EventRoomOut:
    """Create an association between an existing event and an existing room."""
    record = await service.create(body.event_id, body.room_id, created_by=x_user_id)
    return EventRoomOut.model_validate(record)


@router.get(
    "",
    response_model=PagedResult[EventRoomOut],
    summary="List event-room associations",
)
async def list_event_rooms(
    event_id: uuid.UUID | None = Query(default=None, description="Filter by event UUID"),
    room_id: uuid.UUID | None = Query(default=None, description="Filter by room UUID"),
    page_number: int = Query(default=1, ge=1, description="1-based page number"),
    page_size: int = Query(
        default=settings.default_page_size,
        ge=1,
        le=settings.max_page_size,
        description="Maximum results per page",
    ),
    service: EventRoomService = Depends(get_event_room_service),
    _key: str = Depends(require_api_key),
) -> PagedResult[EventRoomOut]:
    """Return one page of associations ordered by id.

    Filters are optional and combined with AND logic.  A page past the last
    one returns no items but keeps the count metadata.
    """
    page = await service.list_filtered(
        EventRoomFilter(
            event_id=event_id,
            room_id=room_id,
            page_number=page_number,
            page_size=page_size,
        )
    )
    logger.info(
        "event_rooms_listed",
        total=page.total_count,
        returned=len(page.items),
        page_number=page_number,
        page_size=page_size,
    )
    return PagedResult[EventRoomOut](
        items=[EventRoomOut.model_validate(r) for r in page.items],
        **page.model_dump(exclude={"items"}),
    )


@router.get(
    "/{event_id}/{room_id}",
    response_model=EventRoomOut,
    summary="Get an event-room association",
)
async def get_event_room(
    event_id: uuid.UUID,
    room_id: uuid.UUID,
    service: EventRoomService = Depends(get_event_room_service),
    _key: str = Depends(require_api_key),
) -> EventRoomOut:
    """Fetch the association for (event_id, room_id).

    Returns HTTP 404 when the pair is not linked.
    """
    record = await service.get(event_id, room_id)
    logger.info("event_room_fetched", event_id=str(event_id), room_id=str(room_id))
    return EventRoomOut.model_validate(record)


@router.delete(
    "/{event_id}/{room_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an event-room association",
)
async def delete_event_room(
    event_id: uuid.UUID,
    room_id: uuid.UUID,
    service: EventRoomService = Depends(get_event_room_service),
    _key: str = Depends(require_api_key),
) -> Response:
    """Unlink the event from the room.  Returns HTTP 404 when not linked."""
    await service.delete(event_id, room_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
