"""Optional accumulation layer on top of the stateless codec."""

from acmi.state.recording import (
    ObjectState,
    PropertyKey,
    RecordingState,
    property_key,
    replay,
)

__all__ = [
    "ObjectState",
    "RecordingState",
    "PropertyKey",
    "property_key",
    "replay",
]
