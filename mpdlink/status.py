"""Player status as reported by the ``status`` command."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field

from .errors import GenericError, _parse_seconds, _parse_unsigned
from .protocol import FromMpd, _logged
from .volume import Volume

logger = logging.getLogger(__name__)


class State(enum.Enum):
    """Whether the player is playing, stopped or paused."""

    PLAY = "play"
    STOP = "stop"
    PAUSE = "pause"

    @classmethod
    def parse(cls, text: str) -> State:
        """Parse the server's name of a state."""
        try:
            return cls(text)
        except ValueError:
            raise GenericError(f"Invalid State: '{text}'") from None

    def __str__(self) -> str:
        return _STATE_NAMES[self]


_STATE_NAMES = {State.PLAY: "Playing", State.STOP: "Stopped", State.PAUSE: "Paused"}


class OnOffOneshot(enum.Enum):
    """A mode that is on, off, or on for one song only."""

    ON = "1"
    OFF = "0"
    ONESHOT = "oneshot"

    @classmethod
    def parse(cls, text: str) -> OnOffOneshot:
        """Parse the server's value of the mode."""
        try:
            return cls(text)
        except ValueError:
            raise GenericError(f"Received unknown value for OnOffOneshot '{text}'") from None

    def cycle(self) -> OnOffOneshot:
        """The next mode: on, off, oneshot, on again."""
        return {
            OnOffOneshot.ON: OnOffOneshot.OFF,
            OnOffOneshot.OFF: OnOffOneshot.ONESHOT,
            OnOffOneshot.ONESHOT: OnOffOneshot.ON,
        }[self]

    def cycle_pre_mpd_24(self) -> OnOffOneshot:
        """The next mode for servers without oneshot support."""
        return OnOffOneshot.ON if self is OnOffOneshot.OFF else OnOffOneshot.OFF

    def to_mpd_value(self) -> str:
        """The value to send to the server."""
        return self.value

    def __str__(self) -> str:
        return _MODE_NAMES[self]


_MODE_NAMES = {OnOffOneshot.ON: "On", OnOffOneshot.OFF: "Off", OnOffOneshot.ONESHOT: "OS"}


def _u32(value: str) -> int:
    return _parse_unsigned(value, 32)


def _u8(value: str) -> int:
    return _parse_unsigned(value, 8)


@dataclass
class Status(FromMpd):
    """The state of the player; times are in seconds."""

    partition: str = ""
    volume: Volume = field(default_factory=Volume)
    repeat: bool = False
    random: bool = False
    single: OnOffOneshot = OnOffOneshot.OFF
    consume: OnOffOneshot = OnOffOneshot.OFF
    playlist: int | None = None
    playlistlength: int = 0
    state: State = State.STOP
    song: int | None = None
    songid: int | None = None
    nextsong: int | None = None
    nextsongid: int | None = None
    elapsed: float = 0.0
    duration: float = 0.0
    bitrate: int | None = None
    xfade: int | None = None
    mixrampdb: str | None = None
    mixrampdelay: str | None = None
    audio: str | None = None
    updating_db: int | None = None
    error: str | None = None

    def next_internal(self, key: str, value: str) -> bool:
        if key == "partition":
            self.partition = value
        elif key == "volume":
            if value == "-1":
                logger.warning("Received unsupported value command=status key=%s value=%s", key, value)
                self.volume = Volume(0)
            else:
                self.volume = Volume(_logged(_u8, key, value))
        elif key == "repeat":
            self.repeat = value != "0"
        elif key == "random":
            self.random = value != "0"
        elif key == "single":
            self.single = _logged(OnOffOneshot.parse, key, value)
        elif key == "consume":
            self.consume = _logged(OnOffOneshot.parse, key, value)
        elif key == "playlist":
            self.playlist = _logged(_u32, key, value)
        elif key == "playlistlength":
            self.playlistlength = _u32(value)
        elif key == "state":
            self.state = _logged(State.parse, key, value)
        elif key in ("song", "songid", "nextsong", "nextsongid", "xfade", "updating_db"):
            setattr(self, key, _logged(_u32, key, value))
        elif key in ("elapsed", "duration"):
            setattr(self, key, _logged(_parse_seconds, key, value))
        elif key == "bitrate":
            self.bitrate = None if value == "0" else _logged(_u32, key, value)
        elif key in ("mixrampdb", "mixrampdelay", "audio", "error"):
            setattr(self, key, value)
        elif key == "time":
            pass
        else:
            return False
        return True