"""Accumulated recording state.

The parser is stateless: every record only describes what changed on its
line. RecordingState folds records into the full picture (current time,
mission metadata, absolute coordinates and last known properties of every
live object). It is owned by the caller and lives as long as the recording.

Usage:
    state = RecordingState()
    for record in Parser(f):
        state.apply(record)
    state.objects[0x3A].coords.latitude

    state = replay(Parser(f))
"""

from __future__ import annotations

import warnings
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, TypeAlias

from acmi.records.coords import Coords
from acmi.records.event import Event
from acmi.records.global_property import (
    GlobalProperty,
    GlobalPropertyKind,
    UnknownGlobalProperty,
)
from acmi.records.models import Frame, Record, Remove, Update
from acmi.records.property import AnyProperty, Property, PropertyKind, UnknownProperty

PropertyKey: TypeAlias = tuple[PropertyKind, int] | str
"""(kind, index) for known properties, raw name for unknown ones."""


def property_key(prop: AnyProperty) -> PropertyKey:
    if isinstance(prop, UnknownProperty):
        return prop.name
    return (prop.kind, prop.index)


@dataclass
class ObjectState:
    """Last known state of one object.

    Attributes:
        id: Object id.
        coords: Absolute coordinates (reference offsets already applied).
        properties: Latest value of every non-coordinate property.
        first_seen: Frame offset at which the object first appeared.
    """

    id: int
    coords: Coords = field(default_factory=Coords)
    properties: dict[PropertyKey, AnyProperty] = field(default_factory=dict)
    first_seen: float = 0.0

    def get(self, kind: PropertyKind, index: int = 0) -> Any:
        """Value of a known property, or None if never set."""
        prop = self.properties.get((kind, index))
        return None if prop is None else prop.value


@dataclass
class RecordingState:
    """Fold of every record seen so far.

    Attributes:
        time: Offset of the current frame, in seconds.
        reference_latitude: Mission latitude offset added to object latitudes.
        reference_longitude: Mission longitude offset added to object longitudes.
        globals: Latest value of every global property, by wire name.
        events: (frame offset, event) in the order they occurred.
        objects: Live objects by id.
        removed: Ids of objects that left the recording.
    """

    time: float = 0.0
    reference_latitude: float = 0.0
    reference_longitude: float = 0.0
    globals: dict[str, GlobalProperty | UnknownGlobalProperty] = field(default_factory=dict)
    events: list[tuple[float, Event]] = field(default_factory=list)
    objects: dict[int, ObjectState] = field(default_factory=dict)
    removed: set[int] = field(default_factory=set)

    def apply(self, record: Record) -> None:
        """Fold one record into the state."""
        if isinstance(record, Frame):
            self.time = record.offset
        elif isinstance(record, Update):
            self._apply_update(record)
        elif isinstance(record, Remove):
            self._apply_remove(record)
        elif isinstance(record, Event):
            self.events.append((self.time, record))
        elif isinstance(record, (GlobalProperty, UnknownGlobalProperty)):
            self._apply_global(record)
        else:
            raise TypeError(f"Expected a record, got {type(record).__name__}")

    def _apply_global(self, prop: GlobalProperty | UnknownGlobalProperty) -> None:
        self.globals[prop.name] = prop
        if isinstance(prop, GlobalProperty):
            if prop.kind is GlobalPropertyKind.REFERENCE_LATITUDE:
                self.reference_latitude = prop.value
            elif prop.kind is GlobalPropertyKind.REFERENCE_LONGITUDE:
                self.reference_longitude = prop.value

    def _apply_update(self, update: Update) -> None:
        obj = self.objects.get(update.id)
        if obj is None:
            obj = ObjectState(id=update.id, first_seen=self.time)
            self.objects[update.id] = obj
            self.removed.discard(update.id)

        seen: set[PropertyKey] = set()
        for prop in update.properties:
            key = property_key(prop)
            if key in seen:
                warnings.warn(
                    f"Update for object {update.id:x} sets {prop.name} more than once. "
                    "The last value wins.",
                    stacklevel=3,
                )
            seen.add(key)

            if isinstance(prop, Property) and prop.kind is PropertyKind.T:
                obj.coords.update(prop.value, self.reference_latitude, self.reference_longitude)
            else:
                obj.properties[key] = prop

    def _apply_remove(self, remove: Remove) -> None:
        if self.objects.pop(remove.id, None) is None:
            warnings.warn(
                f"Removal of unknown object {remove.id:x} ignored.",
                stacklevel=3,
            )
            return
        self.removed.add(remove.id)


def replay(records: Iterable[Record], state: RecordingState | None = None) -> RecordingState:
    """Apply every record in order and return the resulting state."""
    state = state or RecordingState()
    for record in records:
        state.apply(record)
    return state
