"""Mission-level metadata: the `0,Name=Value` lines.

ReferenceLongitude and ReferenceLatitude are the only numeric entries; they
de-bias every object coordinate in the recording (see Coords.update).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeAlias

from acmi.core.fields import check_writable, escape_text, unescape_text
from acmi.core.numeric import format_float, parse_float, round_to_precision
from acmi.records.property import split_pair


class GlobalPropertyKind(Enum):
    """Known global property names.

    Each member carries its wire name and whether the value is a float.
    """

    DATA_SOURCE = ("DataSource", False)
    DATA_RECORDER = ("DataRecorder", False)
    REFERENCE_TIME = ("ReferenceTime", False)
    RECORDING_TIME = ("RecordingTime", False)
    AUTHOR = ("Author", False)
    TITLE = ("Title", False)
    CATEGORY = ("Category", False)
    BRIEFING = ("Briefing", False)
    DEBRIEFING = ("Debriefing", False)
    COMMENTS = ("Comments", False)
    REFERENCE_LONGITUDE = ("ReferenceLongitude", True)
    REFERENCE_LATITUDE = ("ReferenceLatitude", True)

    def __init__(self, wire_name: str, numeric: bool) -> None:
        self.wire_name = wire_name
        self.numeric = numeric


@dataclass(frozen=True, slots=True)
class GlobalProperty:
    """A known global property. Value is float for the reference
    coordinates and str otherwise."""

    kind: GlobalPropertyKind
    value: Any

    @property
    def name(self) -> str:
        return self.kind.wire_name


@dataclass(frozen=True, slots=True)
class UnknownGlobalProperty:
    """Global property name this package does not know. Value kept verbatim."""

    name: str
    value: str


AnyGlobalProperty: TypeAlias = GlobalProperty | UnknownGlobalProperty

_KINDS = {kind.wire_name: kind for kind in GlobalPropertyKind}


def parse_global_property(field: str) -> AnyGlobalProperty:
    """Parse the `Name=Value` part of a `0,...` line.

    Raises:
        MissingDelimiterError: If the field has no '='.
        InvalidNumericError: If a reference coordinate is not a float.
    """
    name, value = split_pair(field)
    kind = _KINDS.get(name)
    if kind is None:
        return UnknownGlobalProperty(name, value)
    if kind.numeric:
        return GlobalProperty(kind, parse_float(value))
    return GlobalProperty(kind, unescape_text(value))


def format_global_property(prop: AnyGlobalProperty, reference_precision: int = 7) -> str:
    """Render to `Name=Value`, rounding reference coordinates.

    The value runs to the end of the line, so unknown values may hold raw
    commas.

    Raises:
        ValueError: If the value ends with a backslash.
    """
    if isinstance(prop, UnknownGlobalProperty):
        value = prop.value
    elif prop.kind.numeric:
        value = format_float(round_to_precision(prop.value, reference_precision))
    else:
        value = escape_text(prop.value)
    return f"{prop.name}={check_writable(value, allow_separators=True)}"
