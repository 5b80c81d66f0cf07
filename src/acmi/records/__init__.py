"""Record types and their wire vocabulary.

Every `*Kind` enum is closed, and every one has an `Unknown*` counterpart
that keeps unrecognized names verbatim for forward compatibility.
"""

from acmi.records.coords import SLOT_LAYOUTS, Coords
from acmi.records.event import (
    AnyEventKind,
    Event,
    EventKind,
    UnknownEventKind,
    format_event,
    parse_event,
)
from acmi.records.global_property import (
    AnyGlobalProperty,
    GlobalProperty,
    GlobalPropertyKind,
    UnknownGlobalProperty,
    format_global_property,
    parse_global_property,
)
from acmi.records.models import Frame, Record, Remove, Update
from acmi.records.property import (
    PROPERTY_NAMES,
    AnyProperty,
    Property,
    PropertyKind,
    UnknownProperty,
    ValueShape,
    format_property,
    parse_property,
)
from acmi.records.tags import (
    AnyColor,
    AnyTag,
    Color,
    Tag,
    UnknownColor,
    UnknownTag,
    format_tags,
    parse_color,
    parse_tag,
    parse_tags,
)

__all__ = [
    # Records
    "Record",
    "Remove",
    "Frame",
    "Update",
    # Properties
    "Property",
    "PropertyKind",
    "UnknownProperty",
    "AnyProperty",
    "ValueShape",
    "PROPERTY_NAMES",
    "parse_property",
    "format_property",
    # Global properties
    "GlobalProperty",
    "GlobalPropertyKind",
    "UnknownGlobalProperty",
    "AnyGlobalProperty",
    "parse_global_property",
    "format_global_property",
    # Events
    "Event",
    "EventKind",
    "UnknownEventKind",
    "AnyEventKind",
    "parse_event",
    "format_event",
    # Coordinates
    "Coords",
    "SLOT_LAYOUTS",
    # Tags and colors
    "Tag",
    "UnknownTag",
    "AnyTag",
    "Color",
    "UnknownColor",
    "AnyColor",
    "parse_tag",
    "parse_tags",
    "format_tags",
    "parse_color",
]
