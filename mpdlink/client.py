"""A connection to an MPD server over TCP or a Unix socket."""

from __future__ import annotations

import logging
import socket
from dataclasses import dataclass
from typing import BinaryIO

from .errors import GenericError, MpdError
from .proto_client import ProtoClient, SocketClient
from .version import Version

logger = logging.getLogger(__name__)

MIN_SUPPORTED_VERSION = Version(0, 23, 5)
_WRITE_TIMEOUT = 1.0
_READ_TIMEOUT = 10.0


@dataclass(frozen=True)
class MpdAddress:
    """Either a host and port, or the path of a Unix socket."""

    host: str | None = None
    port: int | None = None
    socket_path: str | None = None

    def __post_init__(self) -> None:
        if self.socket_path is not None:
            if self.host is not None or self.port is not None:
                raise ValueError("an address is either a socket path or a host and port")
        elif self.host is None or self.port is None:
            raise ValueError("an address needs a host and a port, or a socket path")

    def __str__(self) -> str:
        if self.socket_path is not None:
            return self.socket_path
        return f"{self.host}:{self.port}"


class Client(SocketClient):
    """An open connection that has completed the server's handshake."""

    def __init__(
        self,
        address: MpdAddress,
        name: str,
        auto_reconnect: bool,
        sock: socket.socket,
        reader: BinaryIO,
        version: Version,
    ) -> None:
        self.address = address
        self.name = name
        self.auto_reconnect = auto_reconnect
        self.version = version
        self._sock = sock
        self._reader = reader
        self._read_timeout: float | None = _READ_TIMEOUT
        self._write_timeout: float | None = _WRITE_TIMEOUT

    def __repr__(self) -> str:
        return f"Client(name={self.name!r}, reconnect={self.auto_reconnect}, address={self.address!r})"

    @classmethod
    def connect(cls, address: MpdAddress, name: str = "", reconnect: bool = True) -> Client:
        """Connect to the server and validate its greeting."""
        sock, reader, version, greeting = _open(address)
        logger.debug(
            "MPD client initialized name=%s addr=%s version=%s handshake=%s",
            name, address, version, greeting.strip(),
        )
        if version < MIN_SUPPORTED_VERSION:
            logger.warning(
                "MPD version '%s' is lower than supported. Minimum supported protocol version is "
                "'%s'. Some features may work incorrectly.",
                version, MIN_SUPPORTED_VERSION,
            )
        return cls(address, name, reconnect, sock, reader, version)

    def reconnect(self) -> Client:
        """Open a fresh connection to the same address."""
        sock, reader, version, greeting = _open(self.address)
        self._close_stream()
        self._sock = sock
        self._reader = reader
        self.version = version
        self._sock.settimeout(self._read_timeout)
        logger.debug(
            "MPD client initialized name=%s addr=%s handshake=%s version=%s",
            self.name, self.address, greeting.strip(), version,
        )
        return self

    def set_read_timeout(self, timeout: float | None) -> None:
        """Seconds to wait for a reply; ``None`` waits forever."""
        self._read_timeout = timeout
        self._sock.settimeout(timeout)

    def set_write_timeout(self, timeout: float | None) -> None:
        """Seconds to wait for a write; ``None`` waits forever."""
        self._write_timeout = timeout

    def send(self, command: str) -> ProtoClient:
        """Send a command; read its reply from the returned object."""
        return ProtoClient(command, self)

    def write(self, data: bytes) -> None:
        self._sock.settimeout(self._write_timeout)
        try:
            self._sock.sendall(data)
        finally:
            self._sock.settimeout(self._read_timeout)

    def reader(self) -> BinaryIO:
        return self._reader

    def close(self) -> None:
        """Close the connection."""
        self._close_stream()

    def _close_stream(self) -> None:
        try:
            self._reader.close()
        finally:
            self._sock.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def _open(address: MpdAddress) -> tuple[socket.socket, BinaryIO, Version, str]:
    """Connect, read the greeting and return the stream with the server's version."""
    try:
        if address.socket_path is not None:
            sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
            try:
                sock.settimeout(_READ_TIMEOUT)
                sock.connect(address.socket_path)
            except OSError:
                sock.close()
                raise
        else:
            sock = socket.create_connection((address.host, address.port), timeout=_READ_TIMEOUT)
        sock.settimeout(_READ_TIMEOUT)
        reader = sock.makefile("rb")
    except OSError as err:
        raise GenericError(str(err)) from err

    try:
        greeting = _read_greeting(reader)
        if not greeting.startswith("OK"):
            raise GenericError(f"Handshake validation failed. '{greeting}'")
        if not greeting.startswith("OK MPD "):
            raise GenericError(f"Handshake validation failed. Cannot parse version from '{greeting}'")
        try:
            version = Version.parse(greeting[len("OK MPD "):])
        except MpdError:
            raise GenericError(
                f"Handshake validation failed. Cannot parse version from '{greeting}'"
            ) from None
    except BaseException:
        reader.close()
        sock.close()
        raise
    return sock, reader, version, greeting


def _read_greeting(reader: BinaryIO) -> str:
    try:
        raw = reader.readline()
    except OSError as err:
        raise GenericError(str(err)) from err
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as err:
        raise GenericError(str(err)) from err