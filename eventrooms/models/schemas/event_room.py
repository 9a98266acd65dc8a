from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from eventrooms.config import settings


class EventRoomCreate(BaseModel):
    """Request body for linking an event to a room."""
    event_id: UUID = Field(..., description="Existing event UUID")
    room_id: UUID = Field(..., description="Existing room UUID")


class EventRoomFilter(BaseModel):
    """Optional key filters plus 1-based paging."""
    event_id: UUID | None = None
    room_id: UUID | None = None
    page_number: int = Field(default=1, ge=1)
    page_size: int = Field(default=settings.default_page_size, ge=1)


class EventBrief(BaseModel):
    """Compact event representation embedded in association responses."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    starts_at: datetime | None = None
    ends_at: datetime | None = None


class RoomBrief(BaseModel):
    """Compact room representation embedded in association responses."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    capacity: int | None = None


class EventRoomOut(BaseModel):
    """Response schema for an event-room association."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    event_id: UUID
    room_id: UUID
    created_by: str | None = None
    created_at: datetime
    event: EventBrief | None = None
    room: RoomBrief | None = None
