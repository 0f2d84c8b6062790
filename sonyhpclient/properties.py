"""Device-side state holders and headphone events."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class Property(Generic[T]):
    """A setting with the value the device reports and the value the user wants.

    When ``desired`` is not given it starts equal to ``current``.
    """

    current: T = None
    desired: T = None
    pending_request: bool = False

    def __post_init__(self) -> None:
        if self.desired is None:
            self.desired = copy.deepcopy(self.current)

    def flag_pending(self) -> None:
        self.pending_request = True

    def is_pending(self) -> bool:
        return self.pending_request

    def fulfill(self) -> None:
        """Record that the device now holds the desired value."""
        self.current = copy.deepcopy(self.desired)
        self.pending_request = False

    def is_fulfilled(self) -> bool:
        return self.desired == self.current

    def overwrite(self, value: T) -> None:
        """Set both values from a device report."""
        self.current = value
        self.desired = copy.deepcopy(value)
        self.pending_request = False


@dataclass
class ReadonlyProperty(Generic[T]):
    """A value only the device sets."""

    current: T = None

    def overwrite(self, value: T) -> None:
        self.current = value


@dataclass
class EqualizerConfig:
    """The built-in equaliser: bass and five bands, each -10..10."""

    bass_level: int = 0
    bands: list[int] = field(default_factory=lambda: [0] * 5)


@dataclass
class Playback:
    """Now-playing metadata."""

    title: str = ""
    album: str = ""
    artist: str = ""
    snd_pressure: int = 0


class EventType(Enum):
    NONE = auto()
    JSON_MESSAGE = auto()
    HEADPHONE_INTERACTION_EVENT = auto()
    PLAYBACK_METADATA_UPDATE = auto()
    PLAYBACK_VOLUME_UPDATE = auto()
    PLAYBACK_PLAY_PAUSE_UPDATE = auto()
    MULTIPOINT_SWITCH = auto()
    CONNECTED_DEVICE_UPDATE = auto()


@dataclass
class HeadphonesEvent:
    """Something a received message told us about."""

    type: EventType = EventType.NONE
    message: str = ""