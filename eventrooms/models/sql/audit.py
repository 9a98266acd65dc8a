from datetime import datetime, timezone

from sqlalchemy import DateTime, String, text
from sqlalchemy.orm import Mapped, mapped_column


class AuditMixin:
    """Creation metadata shared by every table."""

    created_by: Mapped[str | None] = mapped_column(
        String(256), comment="Actor that created the row, if known"
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        server_default=text("now()"),
    )
