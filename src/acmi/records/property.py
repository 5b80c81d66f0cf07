"""Object properties: the `Name=Value` fields of an update line.

Each known field name maps to a PropertyKind that fixes the value's shape
(text, id, boolean, float with unit, tag set, color, coordinates). Names not
in the table become UnknownProperty and are carried verbatim.

Indexed families (fuel tanks, engines) share one kind; the wire suffix picks
the index: `FuelWeight` is index 0, `FuelWeight2` index 1, `FuelWeight3`
index 2, and so on.

Usage:
    prop = parse_property("FuelWeight3=5")
    prop.kind, prop.index, prop.value   # (PropertyKind.FUEL_WEIGHT, 2, 5.0)
    format_property(prop)               # "FuelWeight3=5"
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, TypeAlias

from acmi.core.fields import check_writable, escape_text, unescape_text
from acmi.core.numeric import (
    format_float,
    format_id,
    parse_float,
    parse_id,
    parse_integer,
    parse_unsigned,
)
from acmi.errors import MissingDelimiterError
from acmi.records.coords import Coords
from acmi.records.tags import format_tags, parse_color, parse_tags


class ValueShape(Enum):
    """How a property value is encoded on the wire."""

    TEXT = auto()
    """UTF-8 text, commas escaped."""

    ID = auto()
    """Hexadecimal object id."""

    UNSIGNED = auto()
    """Decimal unsigned integer."""

    BOOL = auto()
    """Integer, 0 is false and anything else true. Written as 0/1."""

    FLOAT = auto()
    """Double-precision float in the kind's unit."""

    TAGS = auto()
    """'+'-joined set of tags."""

    COLOR = auto()
    """Color name."""

    COORDS = auto()
    """'|'-separated coordinate slots."""


class PropertyKind(Enum):
    """Known object property names.

    Each member carries its wire name, value shape, documentary unit and,
    for indexed families, the number of index slots.
    """

    T = ("T", ValueShape.COORDS)
    NAME = ("Name", ValueShape.TEXT)
    TYPE = ("Type", ValueShape.TAGS)
    PARENT = ("Parent", ValueShape.ID)
    NEXT = ("Next", ValueShape.ID)
    CALL_SIGN = ("CallSign", ValueShape.TEXT)
    REGISTRATION = ("Registration", ValueShape.TEXT)
    SQUAWK = ("Squawk", ValueShape.TEXT)
    ICAO24 = ("ICAO24", ValueShape.TEXT)
    PILOT = ("Pilot", ValueShape.TEXT)
    GROUP = ("Group", ValueShape.TEXT)
    COUNTRY = ("Country", ValueShape.TEXT)
    COALITION = ("Coalition", ValueShape.TEXT)
    COLOR = ("Color", ValueShape.COLOR)
    SHAPE = ("Shape", ValueShape.TEXT)
    DEBUG = ("Debug", ValueShape.TEXT)
    LABEL = ("Label", ValueShape.TEXT)
    FOCUSED_TARGET = ("FocusedTarget", ValueShape.ID)
    LOCKED_TARGET = ("LockedTarget", ValueShape.ID)
    IMPORTANCE = ("Importance", ValueShape.FLOAT, "ratio")
    SLOT = ("Slot", ValueShape.UNSIGNED)
    DISABLED = ("Disabled", ValueShape.BOOL)
    VISIBLE = ("Visible", ValueShape.BOOL)
    HEALTH = ("Health", ValueShape.FLOAT, "ratio")
    LENGTH = ("Length", ValueShape.FLOAT, "m")
    WIDTH = ("Width", ValueShape.FLOAT, "m")
    HEIGHT = ("Height", ValueShape.FLOAT, "m")
    RADIUS = ("Radius", ValueShape.FLOAT, "m")
    IAS = ("IAS", ValueShape.FLOAT, "m/s")
    CAS = ("CAS", ValueShape.FLOAT, "m/s")
    TAS = ("TAS", ValueShape.FLOAT, "m/s")
    MACH = ("Mach", ValueShape.FLOAT, "ratio")
    AOA = ("AOA", ValueShape.FLOAT, "deg")
    AOS = ("AOS", ValueShape.FLOAT, "deg")
    AGL = ("AGL", ValueShape.FLOAT, "m")
    HDG = ("HDG", ValueShape.FLOAT, "deg")
    HDM = ("HDM", ValueShape.FLOAT, "deg")
    THROTTLE = ("Throttle", ValueShape.FLOAT, "ratio")
    AFTERBURNER = ("Afterburner", ValueShape.FLOAT, "ratio")
    AIR_BRAKES = ("AirBrakes", ValueShape.FLOAT, "ratio")
    FLAPS = ("Flaps", ValueShape.FLOAT, "ratio")
    LANDING_GEAR = ("LandingGear", ValueShape.FLOAT, "ratio")
    LANDING_GEAR_HANDLE = ("LandingGearHandle", ValueShape.FLOAT, "ratio")
    TAILHOOK = ("Tailhook", ValueShape.FLOAT, "ratio")
    PARACHUTE = ("Parachute", ValueShape.FLOAT, "ratio")
    DRAG_CHUTE = ("DragChute", ValueShape.FLOAT, "ratio")
    FUEL_WEIGHT = ("FuelWeight", ValueShape.FLOAT, "kg", 10)
    FUEL_VOLUME = ("FuelVolume", ValueShape.FLOAT, "l", 10)
    FUEL_FLOW_WEIGHT = ("FuelFlowWeight", ValueShape.FLOAT, "kg/hour", 8)
    FUEL_FLOW_VOLUME = ("FuelFlowVolume", ValueShape.FLOAT, "l/hour", 8)
    RADAR_MODE = ("RadarMode", ValueShape.FLOAT)
    RADAR_AZIMUTH = ("RadarAzimuth", ValueShape.FLOAT, "deg")
    RADAR_ELEVATION = ("RadarElevation", ValueShape.FLOAT, "deg")
    RADAR_ROLL = ("RadarRoll", ValueShape.FLOAT, "deg")
    RADAR_RANGE = ("RadarRange", ValueShape.FLOAT, "m")
    RADAR_HORIZONTAL_BEAMWIDTH = ("RadarHorizontalBeamwidth", ValueShape.FLOAT, "deg")
    RADAR_VERTICAL_BEAMWIDTH = ("RadarVerticalBeamwidth", ValueShape.FLOAT, "deg")
    LOCKED_TARGET_MODE = ("LockedTargetMode", ValueShape.FLOAT)
    LOCKED_TARGET_AZIMUTH = ("LockedTargetAzimuth", ValueShape.FLOAT, "deg")
    LOCKED_TARGET_ELEVATION = ("LockedTargetElevation", ValueShape.FLOAT, "deg")
    LOCKED_TARGET_RANGE = ("LockedTargetRange", ValueShape.FLOAT, "m")
    ENGAGEMENT_MODE = ("EngagementMode", ValueShape.FLOAT)
    ENGAGEMENT_MODE2 = ("EngagementMode2", ValueShape.FLOAT)
    ENGAGEMENT_RANGE = ("EngagementRange", ValueShape.FLOAT, "m")
    ENGAGEMENT_RANGE2 = ("EngagementRange2", ValueShape.FLOAT, "m")
    VERTICAL_ENGAGEMENT_RANGE = ("VerticalEngagementRange", ValueShape.FLOAT, "m")
    VERTICAL_ENGAGEMENT_RANGE2 = ("VerticalEngagementRange2", ValueShape.FLOAT, "m")
    ROLL_CONTROL_INPUT = ("RollControlInput", ValueShape.FLOAT, "ratio")
    PITCH_CONTROL_INPUT = ("PitchControlInput", ValueShape.FLOAT, "ratio")
    YAW_CONTROL_INPUT = ("YawControlInput", ValueShape.FLOAT, "ratio")
    ROLL_CONTROL_POSITION = ("RollControlPosition", ValueShape.FLOAT, "ratio")
    PITCH_CONTROL_POSITION = ("PitchControlPosition", ValueShape.FLOAT, "ratio")
    YAW_CONTROL_POSITION = ("YawControlPosition", ValueShape.FLOAT, "ratio")
    ROLL_TRIM_TAB = ("RollTrimTab", ValueShape.FLOAT, "ratio")
    PITCH_TRIM_TAB = ("PitchTrimTab", ValueShape.FLOAT, "ratio")
    YAW_TRIM_TAB = ("YawTrimTab", ValueShape.FLOAT, "ratio")
    AILERON_LEFT = ("AileronLeft", ValueShape.FLOAT, "ratio")
    AILERON_RIGHT = ("AileronRight", ValueShape.FLOAT, "ratio")
    ELEVATOR = ("Elevator", ValueShape.FLOAT, "ratio")
    RUDDER = ("Rudder", ValueShape.FLOAT, "ratio")
    PILOT_HEAD_ROLL = ("PilotHeadRoll", ValueShape.FLOAT, "ratio")
    PILOT_HEAD_PITCH = ("PilotHeadPitch", ValueShape.FLOAT, "ratio")
    PILOT_HEAD_YAW = ("PilotHeadYaw", ValueShape.FLOAT, "ratio")
    VERTICAL_G_FORCE = ("VerticalGForce", ValueShape.FLOAT, "g")
    LONGITUDINAL_G_FORCE = ("LongitudinalGForce", ValueShape.FLOAT, "g")
    LATERAL_G_FORCE = ("LateralGForce", ValueShape.FLOAT, "g")
    ENL = ("ENL", ValueShape.FLOAT, "ratio")

    def __init__(
        self, wire_name: str, shape: ValueShape, unit: str | None = None, slots: int = 1
    ) -> None:
        self.wire_name = wire_name
        self.shape = shape
        self.unit = unit
        self.slots = slots

    @property
    def indexed(self) -> bool:
        return self.slots > 1

    def name_for(self, index: int) -> str:
        """Wire name for an index. Index 0 is the bare name, k is name{k+1}."""
        if index == 0:
            return self.wire_name
        return f"{self.wire_name}{index + 1}"


@dataclass(frozen=True, slots=True)
class Property:
    """A known object property.

    Attributes:
        kind: Which property this is.
        value: Value typed per kind.shape (str, int, bool, float,
            frozenset of tags, color, or Coords).
        index: Tank/engine index for indexed families, 0 otherwise.
    """

    kind: PropertyKind
    value: Any
    index: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.index < self.kind.slots:
            raise ValueError(
                f"{self.kind.wire_name} index must be in [0, {self.kind.slots}), got {self.index}"
            )

    @property
    def name(self) -> str:
        return self.kind.name_for(self.index)


@dataclass(frozen=True, slots=True)
class UnknownProperty:
    """Property name this package does not know. Value kept verbatim."""

    name: str
    value: str


AnyProperty: TypeAlias = Property | UnknownProperty

_PARSERS: dict[ValueShape, Callable[[str], Any]] = {
    ValueShape.TEXT: unescape_text,
    ValueShape.ID: parse_id,
    ValueShape.UNSIGNED: parse_unsigned,
    ValueShape.BOOL: lambda v: parse_integer(v) != 0,
    ValueShape.FLOAT: parse_float,
    ValueShape.TAGS: parse_tags,
    ValueShape.COLOR: parse_color,
    ValueShape.COORDS: Coords.parse,
}

_FORMATTERS: dict[ValueShape, Callable[[Any], str]] = {
    ValueShape.TEXT: escape_text,
    ValueShape.ID: format_id,
    ValueShape.UNSIGNED: str,
    ValueShape.BOOL: lambda v: "1" if v else "0",
    ValueShape.FLOAT: format_float,
    ValueShape.TAGS: format_tags,
    ValueShape.COLOR: lambda v: v.value,
    ValueShape.COORDS: lambda v: v.format(),
}


def _build_name_table() -> dict[str, tuple[PropertyKind, int]]:
    table: dict[str, tuple[PropertyKind, int]] = {}
    for kind in PropertyKind:
        for index in range(kind.slots):
            table[kind.name_for(index)] = (kind, index)
    return table


PROPERTY_NAMES = _build_name_table()
"""Wire name -> (kind, index) for every known property name."""


def split_pair(field: str) -> tuple[str, str]:
    """Split `Name=Value` at the first '='.

    Raises:
        MissingDelimiterError: If the field has no '='.
    """
    name, sep, value = field.partition("=")
    if not sep:
        raise MissingDelimiterError("=")
    return name, value


def parse_property(field: str) -> AnyProperty:
    """Parse one `Name=Value` field of an update line.

    Raises:
        MissingDelimiterError: If the field has no '='.
        InvalidIdError: If an id-valued property is not hex.
        InvalidNumericError: If a numeric property fails to parse.
        InvalidCoordinateFormatError: If T has a bad slot count.
    """
    name, value = split_pair(field)
    entry = PROPERTY_NAMES.get(name)
    if entry is None:
        return UnknownProperty(name, value)
    kind, index = entry
    return Property(kind, _PARSERS[kind.shape](value), index)


def format_property(prop: AnyProperty) -> str:
    """Render a property back to `Name=Value`.

    Raises:
        ValueError: If the rendered value would not split back as one field.
    """
    if isinstance(prop, UnknownProperty):
        value = prop.value
    else:
        value = _FORMATTERS[prop.kind.shape](prop.value)
    return f"{prop.name}={check_writable(value)}"
