"""Directory listings from the ``lsinfo`` command."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import GenericError
from .protocol import FromMpd
from .song import Song


@dataclass
class Dir(FromMpd):
    """A directory: its own name, its full path and last modification."""

    path: str = ""
    full_path: str = ""
    last_modified: str = ""

    def next_internal(self, key: str, value: str) -> bool:
        if key == "directory":
            self.path = value.rsplit("/", 1)[-1]
            self.full_path = value
        elif key == "last-modified":
            self.last_modified = value
        elif key == "playlist":
            pass
        else:
            return False
        return True


class LsInfo(list, FromMpd):
    """Entries of an ``lsinfo`` response, each a :class:`Dir` or a :class:`Song`."""

    def next_internal(self, key: str, value: str) -> bool:
        if key == "file":
            self.append(Song())
        elif key == "directory":
            self.append(Dir())
        if not self:
            raise GenericError(
                f"No element in accumulator while parsing LsInfo. Key '{key}' Value :'{value}'"
            )
        return self[-1].next_internal(key, value)