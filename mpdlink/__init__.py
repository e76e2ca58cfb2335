"""Client library for the Music Player Daemon protocol, with screen-area helpers."""

__version__ = "0.1.0"

__all__ = [
    "client",
    "errors",
    "geometry",
    "idle",
    "lists",
    "lsinfo",
    "mpd_client",
    "outputs",
    "proto_client",
    "protocol",
    "query",
    "song",
    "status",
    "update",
    "version",
    "volume",
]