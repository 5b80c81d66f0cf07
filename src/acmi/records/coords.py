"""Object coordinates (the `T` property).

Field names never appear on the wire. The number of '|'-separated slots
alone decides which fields they carry:

    3 slots: lon|lat|alt
    5 slots: lon|lat|alt|u|v
    6 slots: lon|lat|alt|roll|pitch|yaw
    9 slots: lon|lat|alt|roll|pitch|yaw|u|v|heading

Any other slot count is invalid. An empty slot means "unchanged".

Usage:
    delta = Coords.parse("0.1|0.2|1000")
    state = Coords()
    state.update(delta, reference_latitude=42.0, reference_longitude=6.0)
    str(state)  # "6.1|42.2|1000"
"""

from __future__ import annotations

from dataclasses import dataclass, fields

from acmi.core.numeric import format_float, parse_float
from acmi.errors import InvalidCoordinateFormatError

SLOT_LAYOUTS: dict[int, tuple[str, ...]] = {
    3: ("longitude", "latitude", "altitude"),
    5: ("longitude", "latitude", "altitude", "u", "v"),
    6: ("longitude", "latitude", "altitude", "roll", "pitch", "yaw"),
    9: ("longitude", "latitude", "altitude", "roll", "pitch", "yaw", "u", "v", "heading"),
}
"""Slot count -> field order on the wire."""


@dataclass(slots=True)
class Coords:
    """Partial object position and attitude.

    Attributes:
        longitude: Degrees, relative to ReferenceLongitude on the wire.
        latitude: Degrees, relative to ReferenceLatitude on the wire.
        altitude: Meters.
        u: Flat-world x, meters.
        v: Flat-world y, meters.
        roll: Degrees.
        pitch: Degrees.
        yaw: Degrees.
        heading: Degrees.
    """

    longitude: float | None = None
    latitude: float | None = None
    altitude: float | None = None
    u: float | None = None
    v: float | None = None
    roll: float | None = None
    pitch: float | None = None
    yaw: float | None = None
    heading: float | None = None

    @classmethod
    def parse(cls, value: str) -> Coords:
        """Parse a '|'-separated coordinate value.

        Raises:
            InvalidCoordinateFormatError: If the slot count is not 3, 5, 6 or 9.
            InvalidNumericError: If a non-empty slot is not a float.
        """
        slots = value.split("|")
        layout = SLOT_LAYOUTS.get(len(slots))
        if layout is None:
            raise InvalidCoordinateFormatError(
                f"encountered invalid coordinate format: {len(slots)} slots"
            )
        coords = cls()
        for name, slot in zip(layout, slots, strict=True):
            if slot:
                setattr(coords, name, parse_float(slot))
        return coords

    def slot_count(self) -> int:
        """Narrowest wire layout that carries every populated field."""
        attitude = self.roll is not None or self.pitch is not None or self.yaw is not None
        flat = self.u is not None or self.v is not None
        if self.heading is not None or (attitude and flat):
            return 9
        if attitude:
            return 6
        if flat:
            return 5
        return 3

    def format(self) -> str:
        """Render in the narrowest layout, unset slots left empty."""
        layout = SLOT_LAYOUTS[self.slot_count()]
        return "|".join(_slot(getattr(self, name)) for name in layout)

    def __str__(self) -> str:
        return self.format()

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def update(
        self,
        other: Coords,
        reference_latitude: float = 0.0,
        reference_longitude: float = 0.0,
    ) -> None:
        """Merge a partial update into this accumulated state, in place.

        Longitude and latitude in `other` are offset by the mission references
        and replace the current values. Every other present field replaces
        its counterpart. Absent fields leave the current value untouched.
        """
        if other.longitude is not None:
            self.longitude = other.longitude + reference_longitude
        if other.latitude is not None:
            self.latitude = other.latitude + reference_latitude
        for name in ("altitude", "u", "v", "roll", "pitch", "yaw", "heading"):
            value = getattr(other, name)
            if value is not None:
                setattr(self, name, value)


def _slot(value: float | None) -> str:
    return "" if value is None else format_float(value)
