"""Timeline events: `0,Event=Kind|param|...|text` lines."""

from __future__ import annotations

from typing import TypeAlias

from dataclasses import dataclass
from enum import Enum

from acmi.core.fields import check_writable
from acmi.errors import InvalidEventError


class EventKind(Enum):
    MESSAGE = "Message"
    """Generic event."""

    BOOKMARK = "Bookmark"
    """Highlighted in the timeline and event log."""

    DEBUG = "Debug"
    """Development event, shown only in debug mode."""

    LEFT_AREA = "LeftArea"
    """Object cleanly removed from the battlefield (not destroyed)."""

    DESTROYED = "Destroyed"
    """Object officially destroyed."""

    TAKEN_OFF = "TakenOff"
    """Manually injected take-off."""

    LANDED = "Landed"
    """Manually injected landing."""

    TIMEOUT = "Timeout"
    """Weapon reached or missed its target."""


@dataclass(frozen=True, slots=True)
class UnknownEventKind:
    """Event kind this package does not know."""

    value: str


AnyEventKind: TypeAlias = EventKind | UnknownEventKind

_KINDS = {kind.value: kind for kind in EventKind}


@dataclass(frozen=True, slots=True)
class Event:
    """A timeline event.

    Attributes:
        kind: Event kind.
        params: Positional parameters, typically object ids.
        text: Free-text trailer. None when absent or empty.
    """

    kind: AnyEventKind
    params: tuple[str, ...] = ()
    text: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", tuple(self.params))
        if self.text == "":
            object.__setattr__(self, "text", None)


def parse_event(value: str) -> Event:
    """Parse the value of an `Event=` field.

    The last '|' segment after the kind is the text trailer (None if empty);
    the segments in between are params.

    Raises:
        InvalidEventError: If the kind segment is empty.
    """
    name, *segments = value.split("|")
    if not name:
        raise InvalidEventError()
    kind = _KINDS.get(name) or UnknownEventKind(name)
    if not segments:
        return Event(kind)
    *params, text = segments
    return Event(kind, tuple(params), text or None)


def format_event(event: Event) -> str:
    """Render the value of an `Event=` field. The trailer is always written.

    Raises:
        ValueError: If the kind is empty, a segment holds '|', or the
            rendered value ends with a backslash.
    """
    if not event.kind.value:
        raise ValueError("Event kind cannot be empty")
    segments = [event.kind.value, *event.params, event.text or ""]
    for segment in segments:
        if "|" in segment:
            raise ValueError(f"Event segment cannot contain '|': {segment!r}")
    return check_writable("|".join(segments), allow_separators=True)
