"""Tests for the object property codec.

Critical Invariants:
- Every known name parses to its kind; anything else is UnknownProperty
- Indexed families: Base -> 0, Base{k+1} -> k, both directions
- Booleans read any non-zero integer as true and write 0/1
"""

import pytest

from acmi.errors import (
    InvalidCoordinateFormatError,
    InvalidIdError,
    InvalidNumericError,
    MissingDelimiterError,
)
from acmi.records.coords import Coords
from acmi.records.property import (
    PROPERTY_NAMES,
    Property,
    PropertyKind,
    UnknownProperty,
    ValueShape,
    format_property,
    parse_property,
)
from acmi.records.tags import Color, Tag, UnknownColor, UnknownTag


@pytest.mark.parametrize(
    ("field", "kind", "value"),
    [
        ("Name=F-16C", PropertyKind.NAME, "F-16C"),
        ("Parent=3a", PropertyKind.PARENT, 0x3A),
        ("LockedTarget=FF01", PropertyKind.LOCKED_TARGET, 0xFF01),
        ("Slot=3", PropertyKind.SLOT, 3),
        ("IAS=123.5", PropertyKind.IAS, 123.5),
        ("Color=Blue", PropertyKind.COLOR, Color.BLUE),
        ("Color=Grey", PropertyKind.COLOR, Color.GREY),
        ("Color=Teal", PropertyKind.COLOR, UnknownColor("Teal")),
        ("T=1|2|3", PropertyKind.T, Coords(longitude=1, latitude=2, altitude=3)),
        ("ENL=0.25", PropertyKind.ENL, 0.25),
    ],
)
def test_known_properties_parse_to_typed_values(field, kind, value) -> None:
    prop = parse_property(field)
    assert prop == Property(kind, value)


def test_type_parses_tag_set_with_unknown_fallback() -> None:
    prop = parse_property("Type=Air+FixedWing+Stealthy")
    assert prop.value == frozenset({Tag.AIR, Tag.FIXED_WING, UnknownTag("Stealthy")})


def test_type_formats_in_stable_order() -> None:
    prop = Property(PropertyKind.TYPE, frozenset({Tag.FIXED_WING, Tag.AIR}))
    assert format_property(prop) == "Type=Air+FixedWing"
    assert format_property(parse_property(format_property(prop))) == "Type=Air+FixedWing"


@pytest.mark.parametrize(("text", "expected"), [("0", False), ("1", True), ("-2", True), ("7", True)])
def test_boolean_fields_read_integers(text, expected) -> None:
    assert parse_property(f"Visible={text}").value is expected
    assert parse_property(f"Disabled={text}").value is expected


def test_boolean_fields_write_zero_or_one() -> None:
    assert format_property(Property(PropertyKind.VISIBLE, True)) == "Visible=1"
    assert format_property(Property(PropertyKind.DISABLED, False)) == "Disabled=0"


def test_fuel_index_mapping() -> None:
    """CRITICAL: FuelWeight is index 0, FuelWeight3 is index 2, and back."""
    first = parse_property("FuelWeight=10")
    third = parse_property("FuelWeight3=5")
    assert (first.kind, first.index, first.value) == (PropertyKind.FUEL_WEIGHT, 0, 10.0)
    assert (third.kind, third.index, third.value) == (PropertyKind.FUEL_WEIGHT, 2, 5.0)
    assert format_property(first) == "FuelWeight=10"
    assert format_property(third) == "FuelWeight3=5"


@pytest.mark.parametrize(
    ("kind", "last"),
    [
        (PropertyKind.FUEL_WEIGHT, "FuelWeight10"),
        (PropertyKind.FUEL_VOLUME, "FuelVolume10"),
        (PropertyKind.FUEL_FLOW_WEIGHT, "FuelFlowWeight8"),
        (PropertyKind.FUEL_FLOW_VOLUME, "FuelFlowVolume8"),
    ],
)
def test_indexed_family_bounds(kind, last) -> None:
    assert PROPERTY_NAMES[last] == (kind, kind.slots - 1)
    assert f"{kind.wire_name}1" not in PROPERTY_NAMES
    assert f"{kind.wire_name}{kind.slots + 1}" not in PROPERTY_NAMES


def test_out_of_range_index_is_rejected() -> None:
    with pytest.raises(ValueError, match="index"):
        Property(PropertyKind.FUEL_FLOW_WEIGHT, 1.0, index=8)
    with pytest.raises(ValueError, match="index"):
        Property(PropertyKind.IAS, 1.0, index=1)


def test_unknown_name_is_kept_verbatim() -> None:
    prop = parse_property("FutureThing=a\\,b|c")
    assert prop == UnknownProperty("FutureThing", "a\\,b|c")
    assert format_property(prop) == "FutureThing=a\\,b|c"


def test_text_value_unescapes_commas_and_formats_them_back() -> None:
    prop = parse_property("Pilot=Doe\\, John")
    assert prop.value == "Doe, John"
    assert format_property(prop) == "Pilot=Doe\\, John"


def test_value_may_contain_equals_sign() -> None:
    assert parse_property("Label=a=b").value == "a=b"


def test_empty_text_value() -> None:
    assert parse_property("Name=").value == ""


@pytest.mark.parametrize(
    ("field", "error"),
    [
        ("NoDelimiter", MissingDelimiterError),
        ("Parent=zz", InvalidIdError),
        ("IAS=fast", InvalidNumericError),
        ("Visible=yes", InvalidNumericError),
        ("Slot=-1", InvalidNumericError),
        ("T=1|2", InvalidCoordinateFormatError),
    ],
)
def test_malformed_values_raise(field, error) -> None:
    with pytest.raises(error):
        parse_property(field)


def test_missing_delimiter_reports_equals_sign() -> None:
    with pytest.raises(MissingDelimiterError) as info:
        parse_property("Name")
    assert info.value.delimiter == "="


def test_every_kind_round_trips_through_its_wire_name() -> None:
    samples = {
        ValueShape.TEXT: "x",
        ValueShape.ID: 0x10,
        ValueShape.UNSIGNED: 2,
        ValueShape.BOOL: True,
        ValueShape.FLOAT: 1.5,
        ValueShape.TAGS: frozenset({Tag.SEA}),
        ValueShape.COLOR: Color.RED,
        ValueShape.COORDS: Coords(altitude=1.0),
    }
    for kind in PropertyKind:
        prop = Property(kind, samples[kind.shape], index=kind.slots - 1)
        assert parse_property(format_property(prop)) == prop, kind
