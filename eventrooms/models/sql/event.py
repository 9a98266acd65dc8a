import uuid
from datetime import datetime

from sqlalchemy import DateTime, String, text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from eventrooms.database.postgres import Base
from eventrooms.models.sql.audit import AuditMixin


class Event(AuditMixin, Base):
    __tablename__ = "events"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        server_default=text("gen_random_uuid()"),
    )
    title: Mapped[str] = mapped_column(String(512), nullable=False, index=True)
    starts_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), index=True,
        comment="Event start timestamp (UTC)",
    )
    ends_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        comment="Event end timestamp (UTC)",
    )

    def __repr__(self) -> str:
        return f"<Event(id={self.id}, title='{self.title[:50]}')>"
