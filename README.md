# mpdlink

A Python client library for the Music Player Daemon (MPD) protocol.

It connects over TCP or a Unix socket, sends commands and turns the
replies into plain Python objects: songs, status, volume, stored
playlists, outputs, mounts, directory listings and idle events. Errors
reported by the server are raised as exceptions that carry the parsed
`ACK` line.

## Installation

```
pip install mpdlink
```

## Usage

```python
from mpdlink.client import Client, MpdAddress
from mpdlink.mpd_client import MpdClient
from mpdlink.query import Filter, FilterKind, Tag

with Client.connect(MpdAddress(host="localhost", port=6600), "example", True) as client:
    mpd = MpdClient(client)

    status = mpd.get_status()
    print(status.state, status.volume.value)   # e.g. "Playing 80"

    song = mpd.get_current_song()
    if song is not None:
        print(song.title(), song.artist())

    for found in mpd.search([Filter(Tag.ARTIST, "singer").with_kind(FilterKind.CONTAINS)]):
        print(found.file)
```

A Unix socket is given as `MpdAddress(socket_path="/run/mpd/socket")`.

`Client.connect` reads the server's greeting and raises `GenericError`
if it is not a valid `OK MPD <version>` line; the parsed protocol
version is kept in `client.version`. Servers older than 0.23.5 are
accepted, with a warning logged. Replies are read with a 10 second
timeout and writes with a 1 second timeout; change them with
`set_read_timeout` and `set_write_timeout` (`None` waits forever).
When the connection turns out to be closed while a reply is read, it is
opened again and the command is sent once more.

`MpdClient` covers playback control (`play`, `pause`, `next`,
`seek_current`, `repeat`, `random`, `single`, `consume`, ...), the
volume, the queue (`add`, `clear`, `delete_id`, `move_id`,
`playlist_info`), searching (`find`, `search`, `find_one`, `find_add`,
`search_add`, `list_tag`), the database (`lsinfo`, `list_files`),
stored playlists, mounts, outputs, `idle`/`noidle`, and album art
(`albumart`, `read_picture`, and `find_album_art`, which tries both and
returns `None` when there is none).

Lower down, `Client.send(command)` returns a `ProtoClient` whose
`read_ok`, `read_response`, `read_opt_response` and `read_bin` read the
reply to a raw command.

### Queries

Filters are combined into MPD filter expressions, with values escaped:

```python
from mpdlink.query import Filter, Tag, filters_to_query

filters_to_query([Filter(Tag.ALBUM, "the greatest"), Filter(Tag.ARTIST, "mrs singer")])
# "(Album == 'the greatest') AND (Artist == 'mrs singer')"
```

A tag can be a `Tag` member or any tag name as a string. `FilterKind`
chooses between exact match, starts-with, contains and regex.

`Ranges.from_indices` collapses queue positions into runs of
`SingleOrRange`, and `SingleOrRange.as_mpd_range` formats one of them
for commands such as `playlistdelete`. `ValueChange.parse` reads
`+N`, `-N` or `N` for `volume` and `seek_current`.

### Errors

Everything the library raises derives from `mpdlink.errors.MpdError`.
A failure reported by the server is an `MpdFailureError` whose
`response` is an `MpdFailureResponse` with the `ErrorCode`, the command
list index, the command and the message. Commands that need a newer
server (for example `consume` oneshot or `save` with a mode before
0.24) raise `UnsupportedMpdVersionError`.

### Layout helpers

`mpdlink.geometry` has a small rectangle type, `Geometry`, for splitting
a screen area into chunks by percentage (`take_chunk`,
`take_remainder`) and for telling whether another area lies directly
above, below, left or right of it.

## What it does not do

This is a library only. It has no command-line program, no terminal
user interface and no configuration files; it does not log in with a
password and does not download or convert media. Status updates come
only from the calls you make, such as `get_status` or `idle`.

## Running the tests

```
pip install -e ".[test]"
pytest
```