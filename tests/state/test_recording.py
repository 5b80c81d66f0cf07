"""Tests for accumulated recording state.

Critical Invariants:
- Coordinates accumulate: absent fields keep their last value
- Longitude/latitude are offset by the references in effect at update time
- Removed objects disappear from objects and appear in removed
"""

import pytest

from acmi.records.coords import Coords
from acmi.records.event import Event, EventKind
from acmi.records.global_property import (
    GlobalProperty,
    GlobalPropertyKind,
    UnknownGlobalProperty,
)
from acmi.records.models import Frame, Remove, Update
from acmi.records.property import Property, PropertyKind, UnknownProperty
from acmi.state.recording import ObjectState, RecordingState, property_key, replay


def _t(**kwargs) -> Property:
    return Property(PropertyKind.T, Coords(**kwargs))


def test_references_offset_object_coordinates() -> None:
    state = replay(
        [
            GlobalProperty(GlobalPropertyKind.REFERENCE_LATITUDE, 42.0),
            GlobalProperty(GlobalPropertyKind.REFERENCE_LONGITUDE, 6.0),
            Update(1, (_t(longitude=0.5, latitude=0.25, altitude=100.0),)),
        ]
    )
    coords = state.objects[1].coords
    assert (coords.longitude, coords.latitude, coords.altitude) == (6.5, 42.25, 100.0)
    assert (state.reference_latitude, state.reference_longitude) == (42.0, 6.0)


def test_partial_updates_accumulate() -> None:
    state = replay(
        [
            Update(1, (_t(longitude=1.0, latitude=2.0, altitude=3.0),)),
            Update(1, (_t(altitude=4.0, yaw=90.0),)),
        ]
    )
    assert state.objects[1].coords == Coords(longitude=1.0, latitude=2.0, altitude=4.0, yaw=90.0)


def test_properties_keep_latest_value() -> None:
    state = replay(
        [
            Update(1, (Property(PropertyKind.NAME, "A"), UnknownProperty("X", "1"))),
            Update(1, (Property(PropertyKind.NAME, "B"),)),
        ]
    )
    obj = state.objects[1]
    assert obj.get(PropertyKind.NAME) == "B"
    assert obj.properties["X"] == UnknownProperty("X", "1")
    assert obj.get(PropertyKind.PILOT) is None


def test_indexed_properties_are_kept_apart() -> None:
    state = replay(
        [
            Update(
                1,
                (
                    Property(PropertyKind.FUEL_WEIGHT, 10.0),
                    Property(PropertyKind.FUEL_WEIGHT, 20.0, index=1),
                ),
            )
        ]
    )
    obj = state.objects[1]
    assert obj.get(PropertyKind.FUEL_WEIGHT) == 10.0
    assert obj.get(PropertyKind.FUEL_WEIGHT, 1) == 20.0


def test_first_seen_and_events_use_current_frame() -> None:
    bookmark = Event(EventKind.BOOKMARK, (), "Merge")
    state = replay([Frame(0.0), Frame(2.5), Update(7, ()), bookmark])
    assert state.time == 2.5
    assert state.objects[7].first_seen == 2.5
    assert state.events == [(2.5, bookmark)]


def test_remove_moves_object_to_removed() -> None:
    state = replay([Update(7, ()), Remove(7)])
    assert 7 not in state.objects
    assert state.removed == {7}


def test_reappearing_object_starts_fresh() -> None:
    state = replay([Update(7, (Property(PropertyKind.NAME, "A"),)), Remove(7), Update(7, ())])
    assert state.removed == set()
    assert state.objects[7] == ObjectState(id=7)


def test_globals_are_tracked_by_name() -> None:
    state = replay(
        [
            GlobalProperty(GlobalPropertyKind.TITLE, "One"),
            GlobalProperty(GlobalPropertyKind.TITLE, "Two"),
            UnknownGlobalProperty("Weather", "calm"),
        ]
    )
    assert state.globals["Title"].value == "Two"
    assert state.globals["Weather"] == UnknownGlobalProperty("Weather", "calm")


def test_duplicate_property_in_one_update_warns() -> None:
    state = RecordingState()
    with pytest.warns(UserWarning, match="more than once"):
        state.apply(Update(1, (Property(PropertyKind.NAME, "A"), Property(PropertyKind.NAME, "B"))))
    assert state.objects[1].get(PropertyKind.NAME) == "B"


def test_removing_unknown_object_warns() -> None:
    state = RecordingState()
    with pytest.warns(UserWarning, match="unknown object 2a"):
        state.apply(Remove(0x2A))
    assert state.removed == set()


def test_non_record_is_rejected() -> None:
    with pytest.raises(TypeError):
        RecordingState().apply(object())  # type: ignore[arg-type]


def test_property_key() -> None:
    assert property_key(Property(PropertyKind.FUEL_VOLUME, 1.0, index=3)) == (
        PropertyKind.FUEL_VOLUME,
        3,
    )
    assert property_key(UnknownProperty("Future", "x")) == "Future"


def test_replay_continues_existing_state() -> None:
    state = replay([Frame(1.0)])
    same = replay([Frame(2.0)], state)
    assert same is state
    assert state.time == 2.0
