"""Simple list responses: tags, files, mounts and stored playlists."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .errors import GenericError, _parse_unsigned
from .protocol import FromMpd, _logged


def _empty(kind: str, key: str, value: str) -> GenericError:
    return GenericError(f"No element in accumulator while parsing {kind}. Key '{key}' Value :'{value}'")


class MpdList(list, FromMpd):
    """Every value of the response, keys ignored."""

    def next_internal(self, key: str, value: str) -> bool:
        self.append(value)
        return True


class ListingType(enum.Enum):
    """Whether a listed entry is a file or a directory."""

    FILE = "file"
    DIR = "directory"


@dataclass
class Listed(FromMpd):
    """One entry of a ``listfiles`` response."""

    kind: ListingType = ListingType.FILE
    name: str = ""
    size: int = 0
    last_modified: str = ""

    def next_internal(self, key: str, value: str) -> bool:
        if key == "file":
            self.kind = ListingType.FILE
            self.name = value
        elif key == "directory":
            self.kind = ListingType.DIR
            self.name = value
        elif key == "size":
            self.size = _logged(lambda v: _parse_unsigned(v, 64), key, value)
        elif key == "last-modified":
            self.last_modified = value
        else:
            return False
        return True


class ListFiles(list, FromMpd):
    """Entries of a ``listfiles`` response."""

    def next_internal(self, key: str, value: str) -> bool:
        if key in ("file", "directory"):
            self.append(Listed())
        if not self:
            raise _empty("ListFiles", key, value)
        return self[-1].next_internal(key, value)


@dataclass
class Mount(FromMpd):
    """A mounted storage."""

    mount: str = ""
    storage: str = ""

    def next_internal(self, key: str, value: str) -> bool:
        if key == "mount":
            self.mount = value
        elif key == "storage":
            self.storage = value
        else:
            return False
        return True


class Mounts(list, FromMpd):
    """Entries of a ``listmounts`` response."""

    def next_internal(self, key: str, value: str) -> bool:
        if key == "mount":
            self.append(Mount())
        if not self:
            raise _empty("Mounts", key, value)
        return self[-1].next_internal(key, value)


class FileList(list, FromMpd):
    """The files of a stored playlist."""

    def next_internal(self, key: str, value: str) -> bool:
        if key != "file":
            return False
        self.append(value)
        return True


@dataclass
class Playlist(FromMpd):
    """A stored playlist."""

    name: str = ""
    last_modified: str = ""

    def next_internal(self, key: str, value: str) -> bool:
        if key == "playlist":
            self.name = value
        elif key == "last-modified":
            self.last_modified = value
        else:
            return False
        return True


class Playlists(list, FromMpd):
    """Entries of a ``listplaylists`` response."""

    def next_internal(self, key: str, value: str) -> bool:
        if key == "playlist":
            self.append(Playlist())
        if not self:
            raise _empty("Playlists", key, value)
        return self[-1].next_internal(key, value)