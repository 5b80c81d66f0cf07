"""Closed-but-extensible value vocabularies: object tags and colors.

Names this package does not know map to Unknown* values that keep the raw
name, so recordings from newer format revisions survive a round trip.

Usage:
    tags = parse_tags("Air+FixedWing")
    format_tags(tags)      # "Air+FixedWing"
    parse_color("Teal")    # UnknownColor(value="Teal")
"""

from __future__ import annotations

from typing import TypeAlias

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum


class Tag(Enum):
    """Object type tag. Combined with '+' in the Type property."""

    # Class
    AIR = "Air"
    GROUND = "Ground"
    SEA = "Sea"
    WEAPON = "Weapon"
    SENSOR = "Sensor"
    NAVAID = "Navaid"
    MISC = "Misc"
    # Attributes
    STATIC = "Static"
    HEAVY = "Heavy"
    MEDIUM = "Medium"
    LIGHT = "Light"
    MINOR = "Minor"
    # Basic types
    FIXED_WING = "FixedWing"
    ROTORCRAFT = "Rotorcraft"
    ARMOR = "Armor"
    ANTI_AIRCRAFT = "AntiAircraft"
    VEHICLE = "Vehicle"
    WATERCRAFT = "Watercraft"
    HUMAN = "Human"
    BIOLOGIC = "Biologic"
    MISSILE = "Missile"
    ROCKET = "Rocket"
    BOMB = "Bomb"
    TORPEDO = "Torpedo"
    PROJECTILE = "Projectile"
    BEAM = "Beam"
    DECOY = "Decoy"
    BUILDING = "Building"
    BULLSEYE = "Bullseye"
    WAYPOINT = "Waypoint"
    # Specific types
    TANK = "Tank"
    WARSHIP = "Warship"
    AIRCRAFT_CARRIER = "AircraftCarrier"
    SUBMARINE = "Submarine"
    INFANTRY = "Infantry"
    PARACHUTIST = "Parachutist"
    SHELL = "Shell"
    BULLET = "Bullet"
    FLARE = "Flare"
    CHAFF = "Chaff"
    SMOKE_GRENADE = "SmokeGrenade"
    AERODROME = "Aerodrome"
    CONTAINER = "Container"
    SHRAPNEL = "Shrapnel"


@dataclass(frozen=True, slots=True)
class UnknownTag:
    """Tag name not in the known vocabulary."""

    value: str


class Color(Enum):
    RED = "Red"
    ORANGE = "Orange"
    GREEN = "Green"
    BLUE = "Blue"
    VIOLET = "Violet"
    GREY = "Grey"


@dataclass(frozen=True, slots=True)
class UnknownColor:
    """Color name not in the known vocabulary."""

    value: str


AnyTag: TypeAlias = Tag | UnknownTag
AnyColor: TypeAlias = Color | UnknownColor

_TAGS = {tag.value: tag for tag in Tag}
_COLORS = {color.value: color for color in Color}


def parse_tag(name: str) -> AnyTag:
    return _TAGS.get(name) or UnknownTag(name)


def parse_color(name: str) -> AnyColor:
    return _COLORS.get(name) or UnknownColor(name)


def parse_tags(value: str) -> frozenset[AnyTag]:
    """Parse a '+'-joined tag list into a set."""
    return frozenset(parse_tag(name) for name in value.split("+"))


def format_tags(tags: Iterable[AnyTag]) -> str:
    """Join tags with '+', ordered by wire name so output is stable."""
    return "+".join(sorted(tag.value for tag in tags))
