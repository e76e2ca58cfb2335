import pytest

from mpdlink.errors import GenericError, ParseError
from mpdlink.lists import (
    FileList,
    ListFiles,
    Listed,
    ListingType,
    Mount,
    Mounts,
    MpdList,
    Playlist,
    Playlists,
)


def _feed(target, lines):
    for line in lines:
        target.next(line)
    return target


def test_mpd_list_keeps_values():
    result = _feed(MpdList(), ["command: add", "command: play", "Artist: x"])
    assert result == ["add", "play", "x"]


def test_list_files():
    result = _feed(
        ListFiles(),
        [
            "file: 03 Diode.flac",
            "size: 18183774",
            "Last-Modified: 2022-12-24T13:02:09Z",
            "directory: sub",
            "Last-Modified: 2023-01-01T00:00:00Z",
        ],
    )
    assert result == [
        Listed(ListingType.FILE, "03 Diode.flac", 18183774, "2022-12-24T13:02:09Z"),
        Listed(ListingType.DIR, "sub", 0, "2023-01-01T00:00:00Z"),
    ]


def test_list_files_requires_entry_first():
    with pytest.raises(GenericError) as excinfo:
        ListFiles().next("size: 1")
    assert "ListFiles" in excinfo.value.message


def test_listed_bad_size():
    with pytest.raises(ParseError):
        Listed().next("size: big")


def test_listed_unknown_key():
    listed = Listed()
    assert listed.next_internal("owner", "me") is False
    assert listed == Listed()


def test_mounts():
    result = _feed(Mounts(), ["mount: ", "storage: /music", "mount: usb", "storage: /media/usb"])
    assert result == [Mount("", "/music"), Mount("usb", "/media/usb")]


def test_mounts_requires_mount_first():
    with pytest.raises(GenericError) as excinfo:
        Mounts().next("storage: /music")
    assert "Mounts" in excinfo.value.message


def test_file_list_only_takes_files():
    result = FileList()
    assert result.next_internal("file", "a.flac") is True
    assert result.next_internal("title", "A") is False
    assert result == ["a.flac"]


def test_playlists():
    result = _feed(
        Playlists(),
        ["playlist: favourites", "Last-Modified: 2021-01-01", "playlist: other"],
    )
    assert result == [Playlist("favourites", "2021-01-01"), Playlist("other", "")]


def test_playlists_require_playlist_first():
    with pytest.raises(GenericError) as excinfo:
        Playlists().next("Last-Modified: 2021-01-01")
    assert "Playlists" in excinfo.value.message