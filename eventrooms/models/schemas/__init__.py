from eventrooms.models.schemas.event_room import (
    EventBrief,
    EventRoomCreate,
    EventRoomFilter,
    EventRoomOut,
    RoomBrief,
)
from eventrooms.models.schemas.pagination import PagedResult

__all__ = [
    "EventBrief",
    "EventRoomCreate",
    "EventRoomFilter",
    "EventRoomOut",
    "PagedResult",
    "RoomBrief",
]
