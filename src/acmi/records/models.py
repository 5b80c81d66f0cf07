"""Record types: one record per logical line of a recording.

Usage:
    Remove(0xA1B2)                     # -a1b2
    Frame(12.5)                        # #12.5
    Update(0x3A, [Property(PropertyKind.NAME, "F-16C")])
"""

from __future__ import annotations

from typing import TypeAlias

from dataclasses import dataclass

from acmi.records.event import Event
from acmi.records.global_property import GlobalProperty, UnknownGlobalProperty
from acmi.records.property import AnyProperty


@dataclass(frozen=True, slots=True)
class Remove:
    """Object left the recording."""

    id: int


@dataclass(frozen=True, slots=True)
class Frame:
    """Start of a new time frame, offset in seconds from ReferenceTime."""

    offset: float


@dataclass(frozen=True, slots=True)
class Update:
    """Property changes for one object, in wire order."""

    id: int
    properties: tuple[AnyProperty, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "properties", tuple(self.properties))


Record: TypeAlias = GlobalProperty | UnknownGlobalProperty | Event | Remove | Frame | Update
"""Any record a recording line can produce."""
