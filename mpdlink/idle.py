"""Events reported by the ``idle`` command."""

from __future__ import annotations

import enum

from .protocol import FromMpd


class IdleEvent(enum.Enum):
    """A subsystem that changed on the server."""

    PLAYER = "player"
    MIXER = "mixer"
    PLAYLIST = "playlist"
    OPTIONS = "options"
    DATABASE = "database"
    UPDATE = "update"
    STORED_PLAYLIST = "stored_playlist"
    OUTPUT = "output"
    PARTITION = "partition"
    STICKER = "sticker"
    SUBSCRIPTION = "subscription"
    MESSAGE = "message"
    NEIGHBOR = "neighbor"
    MOUNT = "mount"


class IdleEvents(list, FromMpd):
    """The events of one ``idle`` response, in the order received."""

    def next_internal(self, key: str, value: str) -> bool:
        try:
            event = IdleEvent(value)
        except ValueError:
            return False
        self.append(event)
        return True