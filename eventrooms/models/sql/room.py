import uuid

from sqlalchemy import Integer, String, text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from eventrooms.database.postgres import Base
from eventrooms.models.sql.audit import AuditMixin


class Room(AuditMixin, Base):
    __tablename__ = "rooms"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        server_default=text("gen_random_uuid()"),
    )
    name: Mapped[str] = mapped_column(String(256), nullable=False, index=True)
    capacity: Mapped[int | None] = mapped_column(Integer)

    def __repr__(self) -> str:
        return f"<Room(id={self.id}, name='{self.name}')>"
