import uuid

from sqlalchemy import ForeignKey, UniqueConstraint, text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from eventrooms.database.postgres import Base
from eventrooms.models.sql.audit import AuditMixin
from eventrooms.models.sql.event import Event
from eventrooms.models.sql.room import Room

# Generated from the naming convention in eventrooms.database.postgres.
EVENT_ROOM_KEY_CONSTRAINT = "uq_event_rooms_event_id_room_id"


class EventRoom(AuditMixin, Base):
    """Association table linking events to rooms.

    (event_id, room_id) is the lookup key; id only addresses and orders rows.
    """
    __tablename__ = "event_rooms"
    __table_args__ = (UniqueConstraint("event_id", "room_id"),)

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        server_default=text("gen_random_uuid()"),
    )
    event_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("events.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    room_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("rooms.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Read-only projections, populated only when eager-loaded.
    event: Mapped[Event] = relationship(viewonly=True, lazy="raise")
    room: Mapped[Room] = relationship(viewonly=True, lazy="raise")

    def __repr__(self) -> str:
        return f"<EventRoom(event_id={self.event_id}, room_id={self.room_id})>"
