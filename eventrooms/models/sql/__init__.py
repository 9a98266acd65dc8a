from eventrooms.models.sql.event import Event
from eventrooms.models.sql.room import Room
from eventrooms.models.sql.event_room import EventRoom

__all__ = ["Event", "Room", "EventRoom"]
