"""
eventrooms/errors.py

Domain errors raised by the association service.

NotFoundError
    A referenced or targeted record does not exist.  Mapped to HTTP 404.

ConflictError
    Creating the record would violate the (event_id, room_id) uniqueness
    invariant.  Mapped to HTTP 409.
"""
from __future__ import annotations

from typing import Any


class EventRoomError(Exception):
    """Base class for all domain errors."""

    code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, *, key: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.key = key or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "detail": self.message,
            "code": self.code,
            "key": {name: str(value) for name, value in self.key.items()},
        }


class NotFoundError(EventRoomError):
    code = "NOT_FOUND"

    def __init__(self, resource: str, **key: Any) -> None:
        self.resource = resource
        described = ", ".join(f"{name}={value}" for name, value in key.items())
        label = f"{resource} {described}" if described else resource
        super().__init__(f"{label} not found.", key=key)

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "resource": self.resource}


class ConflictError(EventRoomError):
    code = "CONFLICT"

    def __init__(self, reason: str, **key: Any) -> None:
        self.reason = reason
        described = ", ".join(f"{name}={value}" for name, value in key.items())
        super().__init__(f"Conflict: {reason} ({described}).", key=key)
