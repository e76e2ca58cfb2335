"""High-level commands of the MPD protocol."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, TypeVar

from .errors import ErrorCode, MpdError, MpdFailureError, UnsupportedMpdVersionError
from .idle import IdleEvents
from .lists import FileList, ListFiles, MpdList, Mounts, Playlists
from .lsinfo import LsInfo
from .outputs import Outputs
from .proto_client import ProtoClient, SocketClient
from .protocol import FromMpd
from .query import (
    Filter,
    QueueMoveTarget,
    SaveMode,
    SingleOrRange,
    TagLike,
    ValueChange,
    filters_to_query,
    tag_name,
)
from .song import Song, SongList
from .status import OnOffOneshot, Status
from .version import Version
from .volume import Volume

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=FromMpd)

_V0_23 = Version(0, 23, 0)
_V0_24 = Version(0, 24, 0)


def _is_no_exist(err: MpdError) -> bool:
    return isinstance(err, MpdFailureError) and err.response.code is ErrorCode.NO_EXIST


class MpdClient:
    """Typed access to the server's commands over one connection.

    The connection must carry the server's protocol ``version``.
    """

    def __init__(self, connection: SocketClient) -> None:
        self.connection = connection

    @property
    def version(self) -> Version:
        """The protocol version announced by the server."""
        return self.connection.version

    def _send(self, command: str) -> ProtoClient:
        return ProtoClient(command, self.connection)

    def _ok(self, command: str) -> None:
        self._send(command).read_ok()

    def _response(self, command: str, factory: Callable[[], V]) -> V:
        return self._send(command).read_response(factory)

    def _opt_response(self, command: str, factory: Callable[[], V]) -> V | None:
        return self._send(command).read_opt_response(factory)

    # Queries
    def commands(self) -> MpdList:
        """Commands the server supports."""
        return self._response("commands", MpdList)

    def idle(self) -> IdleEvents:
        """Wait for and return the next changes on the server."""
        return self._response("idle", IdleEvents)

    def noidle(self) -> None:
        self._ok("noidle")

    def get_volume(self) -> Volume:
        if self.version < _V0_23:
            raise UnsupportedMpdVersionError("getvol can be used since MPD 0.23.0")
        return self._response("getvol", Volume)

    def set_volume(self, volume: Volume) -> None:
        self._ok(f"setvol {volume.value}")

    def volume(self, change: ValueChange) -> None:
        """Set the volume, or move it relative to the current level."""
        if change.sign:
            self._ok(f"volume {change.to_mpd_str()}")
        else:
            self._ok(f"setvol {change.amount}")

    def get_current_song(self) -> Song | None:
        return self._opt_response("currentsong", Song)

    def get_status(self) -> Status:
        return self._response("status", Status)

    # Playback control
    def pause_toggle(self) -> None:
        self._ok("pause")

    def pause(self) -> None:
        self._ok("pause 1")

    def unpause(self) -> None:
        self._ok("pause 0")

    def next(self) -> None:
        self._ok("next")

    def prev(self) -> None:
        self._ok("previous")

    def play_pos(self, pos: int) -> None:
        self._ok(f"play {pos}")

    def play(self) -> None:
        self._ok("play")

    def play_id(self, song_id: int) -> None:
        self._ok(f"playid {song_id}")

    def stop(self) -> None:
        self._ok("stop")

    def seek_current(self, value: ValueChange) -> None:
        self._ok(f"seekcur {value.to_mpd_str()}")

    def repeat(self, enabled: bool) -> None:
        self._ok(f"repeat {int(bool(enabled))}")

    def random(self, enabled: bool) -> None:
        self._ok(f"random {int(bool(enabled))}")

    def single(self, single: OnOffOneshot) -> None:
        self._ok(f"single {single.to_mpd_value()}")

    def consume(self, consume: OnOffOneshot) -> None:
        if self.version < _V0_24 and consume is OnOffOneshot.ONESHOT:
            raise UnsupportedMpdVersionError("consume oneshot can be used since MPD 0.24.0")
        self._ok(f"consume {consume.to_mpd_value()}")

    # Mounts
    def mount(self, name: str, path: str) -> None:
        self._ok(f'mount "{name}" "{path}"')

    def unmount(self, name: str) -> None:
        self._ok(f'unmount "{name}"')

    def list_mounts(self) -> Mounts:
        return self._response("listmounts", Mounts)

    # Current queue
    def add(self, path: str) -> None:
        self._ok(f'add "{path}"')

    def clear(self) -> None:
        self._ok("clear")

    def delete_id(self, song_id: int) -> None:
        self._ok(f'deleteid "{song_id}"')

    def move_id(self, song_id: int, to: QueueMoveTarget) -> None:
        self._ok(f'moveid "{song_id}" "{to.to_mpd_str()}"')

    def playlist_info(self) -> SongList | None:
        return self._opt_response("playlistinfo", SongList)

    def find(self, filters: Iterable[Filter]) -> SongList:
        """Songs matching every filter exactly (case sensitive)."""
        return self._response(f'find "({filters_to_query(filters)})"', SongList)

    def search(self, filters: Iterable[Filter]) -> SongList:
        """Songs matching every filter, ignoring case."""
        query = filters_to_query(filters)
        logger.debug("Searching for songs query=%s", query)
        return self._response(f'search "({query})"', SongList)

    def search_add(self, filters: Iterable[Filter]) -> None:
        """Add the songs :meth:`search` would return to the queue."""
        query = filters_to_query(filters)
        logger.debug("Searching for songs and adding them query=%s", query)
        self._ok(f'searchadd "({query})"')

    def find_one(self, filters: Iterable[Filter]) -> Song | None:
        """The last song :meth:`find` returns, if any."""
        songs = self.find(filters)
        return songs[-1] if songs else None

    def find_add(self, filters: Iterable[Filter]) -> None:
        self._ok(f'findadd "({filters_to_query(filters)})"')

    def list_tag(self, tag: TagLike, filters: Iterable[Filter] | None = None) -> MpdList:
        """Distinct values of a tag, optionally among songs matching filters."""
        if filters is not None:
            command = f'list {tag_name(tag)} "({filters_to_query(filters)})"'
        else:
            command = f"list {tag_name(tag)}"
        return self._response(command, MpdList)

    # Database
    def lsinfo(self, path: str | None = None) -> LsInfo:
        command = "lsinfo" if path is None else f'lsinfo "{path}"'
        result = self._opt_response(command, LsInfo)
        return LsInfo() if result is None else result

    def list_files(self, path: str | None = None) -> ListFiles:
        command = "listfiles" if path is None else f'listfiles "{path}"'
        result = self._opt_response(command, ListFiles)
        return ListFiles() if result is None else result

    # Stored playlists
    def list_playlists(self) -> Playlists:
        return self._response("listplaylists", Playlists)

    def list_playlist(self, name: str) -> FileList:
        return self._response(f'listplaylist "{name}"', FileList)

    def list_playlist_info(self, playlist: str, song_range: SingleOrRange | None = None) -> SongList:
        if song_range is None:
            return self._response(f'listplaylistinfo "{playlist}"', SongList)
        if self.version < _V0_24:
            raise UnsupportedMpdVersionError(
                "listplaylistinfo with range can only be used since MPD 0.24.0"
            )
        return self._response(f'listplaylistinfo "{playlist}" {song_range.as_mpd_range()}', SongList)

    def load_playlist(self, name: str) -> None:
        self._ok(f'load "{name}"')

    def delete_playlist(self, name: str) -> None:
        self._ok(f'rm "{name}"')

    def delete_from_playlist(self, playlist_name: str, song_range: SingleOrRange) -> None:
        self._ok(f'playlistdelete "{playlist_name}" {song_range.as_mpd_range()}')

    def move_in_playlist(
        self, playlist_name: str, song_range: SingleOrRange, target_position: int
    ) -> None:
        self._ok(f'playlistmove "{playlist_name}" {song_range.as_mpd_range()} {target_position}')

    def add_to_playlist(self, playlist_name: str, uri: str, target_position: int | None = None) -> None:
        if target_position is None:
            self._ok(f'playlistadd "{playlist_name}" "{uri}"')
        else:
            self._ok(f'playlistadd "{playlist_name}" "{uri}" {target_position}')

    def rename_playlist(self, name: str, new_name: str) -> None:
        self._ok(f'rename "{name}" "{new_name}"')

    def save_queue_as_playlist(self, name: str, mode: SaveMode | None = None) -> None:
        if mode is None:
            self._ok(f'save "{name}"')
            return
        if self.version < _V0_24:
            raise UnsupportedMpdVersionError("save mode can be used since MPD 0.24.0")
        self._ok(f'save "{name}" "{mode.value}"')

    def read_picture(self, path: str) -> bytes | None:
        return self._send(f'readpicture "{path}"').read_bin()

    def albumart(self, path: str) -> bytes | None:
        return self._send(f'albumart "{path}"').read_bin()

    def find_album_art(self, path: str) -> bytes | None:
        """Album art from ``albumart``, else from ``readpicture``, else ``None``."""
        try:
            art = self.albumart(path)
        except MpdError as err:
            if not _is_no_exist(err):
                logger.error("Failed to read picture. %s", err)
                return None
            art = None
        if art is not None:
            return art

        try:
            picture = self.read_picture(path)
        except MpdError as err:
            if _is_no_exist(err):
                logger.debug("No album art found, falling back to placeholder image")
            else:
                logger.error("Failed to read picture. %s", err)
            return None
        if picture is None:
            logger.debug("No album art found, falling back to placeholder image")
        return picture

    # Outputs
    def outputs(self) -> Outputs:
        return self._response("outputs", Outputs)

    def toggle_output(self, output_id: int) -> None:
        self._ok(f"toggleoutput {output_id}")

    def enable_output(self, output_id: int) -> None:
        self._ok(f"enableoutput {output_id}")

    def disable_output(self, output_id: int) -> None:
        self._ok(f"disableoutput {output_id}")