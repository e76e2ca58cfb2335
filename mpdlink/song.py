"""Songs as reported by ``currentsong``, ``playlistinfo`` and searches."""

from __future__ import annotations

from dataclasses import dataclass, field

from .errors import GenericError, _parse_seconds, _parse_unsigned
from .protocol import FromMpd, _logged


@dataclass
class Song(FromMpd):
    """One song: its id, file, duration in seconds and tags."""

    id: int = 0
    file: str = ""
    duration: float | None = None
    metadata: dict[str, str] = field(default_factory=dict)

    def title(self) -> str | None:
        return self.metadata.get("title")

    def artist(self) -> str | None:
        return self.metadata.get("artist")

    def album(self) -> str | None:
        return self.metadata.get("album")

    def next_internal(self, key: str, value: str) -> bool:
        if key == "file":
            self.file = value
        elif key == "id":
            self.id = _logged(lambda v: _parse_unsigned(v, 32), key, value)
        elif key == "duration":
            self.duration = _logged(_parse_seconds, key, value)
        elif key in ("time", "format"):
            pass
        else:
            self.metadata[key] = value
        return True


class SongList(list, FromMpd):
    """A list of songs; each ``file`` key starts a new one."""

    def next_internal(self, key: str, value: str) -> bool:
        if key == "file":
            self.append(Song())
        if not self:
            raise GenericError(
                f"No element in accumulator while parsing PlayListInfo. Key '{key}' Value :'{value}'"
            )
        return self[-1].next_internal(key, value)