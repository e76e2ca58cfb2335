"""Sending one command and reading the server's reply to it."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import BinaryIO, Callable, TypeVar

from .errors import (
    ClientClosedError,
    GenericError,
    MpdError,
    MpdFailureError,
    MpdFailureResponse,
    _parse_unsigned,
)
from .protocol import FromMpd, split_line

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=FromMpd)


class SocketClient(ABC):
    """A connection that commands can be written to and replies read from."""

    @abstractmethod
    def reconnect(self) -> SocketClient:
        """Open the connection again after it was lost."""

    @abstractmethod
    def write(self, data: bytes) -> None:
        """Write raw bytes to the server."""

    @abstractmethod
    def reader(self) -> BinaryIO:
        """The buffered stream the server's replies are read from."""


@dataclass
class BinaryMpdResponse:
    """Header of one chunk of a binary reply."""

    bytes_read: int = 0
    size_total: int = 0
    mime_type: str | None = None


class ProtoClient:
    """One command sent to the server, ready to have its reply read."""

    def __init__(self, command: str, client: SocketClient) -> None:
        self.command = command
        self.client = client
        self._execute(command)

    def __repr__(self) -> str:
        return repr(self.command)

    def _write_line(self, command: str) -> None:
        self.client.write(f"{command}\n".encode())

    def _execute(self, command: str) -> None:
        try:
            self._write_line(command)
        except BrokenPipeError:
            self.client.reconnect()
            try:
                self._write_line(command)
            except OSError as err:
                raise GenericError(str(err)) from err
        except OSError as err:
            raise GenericError(str(err)) from err

    def _retry(self, command: str | None = None) -> None:
        self.client.reconnect()
        self._execute(self.command if command is None else command)

    @staticmethod
    def read_line(reader: BinaryIO) -> str | None:
        """Read one reply line: ``None`` for an OK line, otherwise its text.

        An ACK line is raised as :class:`MpdFailureError`; a closed or broken
        connection as :class:`ClientClosedError`.
        """
        try:
            raw = reader.readline()
        except OSError:
            raise ClientClosedError() from None
        if not raw:
            raise ClientClosedError()
        try:
            line = raw.decode("utf-8")
        except UnicodeDecodeError:
            raise ClientClosedError() from None

        if line.startswith("OK") or line.startswith("list_OK"):
            return None
        if line.startswith("ACK"):
            raise MpdFailureError(MpdFailureResponse.parse(line))
        return line[:-1]

    def read_ok(self) -> None:
        """Expect a bare OK reply."""
        logger.debug("Reading command command=%s", self.command)
        while True:
            try:
                value = self.read_line(self.client.reader())
            except ClientClosedError:
                self._retry()
                continue
            if value is not None:
                raise GenericError(f"Expected 'OK' but got '{value}'")
            return

    def read_response(self, factory: Callable[[], V]) -> V:
        """Read every line of the reply into a fresh ``factory()`` value."""
        logger.debug("Reading command command=%s", self.command)
        while True:
            result = factory()
            try:
                while (value := self.read_line(self.client.reader())) is not None:
                    result.next(value)
            except ClientClosedError:
                self._retry()
                continue
            return result

    def read_opt_response(self, factory: Callable[[], V]) -> V | None:
        """Like :meth:`read_response`, but ``None`` when the reply holds no lines."""
        logger.debug("Reading command command=%s", self.command)
        while True:
            result = factory()
            found_any = False
            try:
                while (value := self.read_line(self.client.reader())) is not None:
                    found_any = True
                    result.next(value)
            except ClientClosedError:
                self._retry()
                continue
            return result if found_any else None

    def read_bin(self) -> bytes | None:
        """Read a binary reply, requesting further chunks until it is complete."""
        buffer = bytearray()
        try:
            if self.read_bin_chunk(buffer) is None:
                return None
        except ClientClosedError:
            self._retry(f"{self.command} {len(buffer)}")
            try:
                self.read_bin_chunk(buffer)
            except MpdError:
                pass
        except MpdError:
            # A failure on the first chunk surfaces again on the next request.
            pass

        while True:
            self._execute(f"{self.command} {len(buffer)}")
            response = self.read_bin_chunk(buffer)
            if response is None:
                return None
            if len(buffer) >= response.size_total or response.bytes_read == 0:
                logger.debug("Finished reading binary response len=%d", len(buffer))
                break
        return bytes(buffer)

    def read_bin_chunk(self, buffer: bytearray) -> BinaryMpdResponse | None:
        """Read one chunk of a binary reply, appending its data to ``buffer``.

        Returns ``None`` when the server answered with a plain OK.
        """
        result = BinaryMpdResponse()
        reader = self.client.reader()
        while True:
            value = self.read_line(reader)
            if value is None:
                logger.warning("Expected binary data but got 'OK'")
                return None
            key, field_value = split_line(value)
            key = key.lower()
            if key == "size":
                result.size_total = _parse_unsigned(field_value, 32)
            elif key == "type":
                result.mime_type = field_value
            elif key == "binary":
                result.bytes_read = _parse_unsigned(field_value, 64)
                break
            else:
                raise GenericError(f"Unexpected key when parsing binary response: '{key}'")

        try:
            buffer.extend(reader.read(result.bytes_read))
        except OSError as err:
            raise GenericError(str(err)) from err
        try:
            reader.readline()  # the server ends binary data with an empty line
        except OSError:
            pass

        value = self.read_line(reader)
        if value is not None:
            raise GenericError(f"Expected 'OK' but got '{value}'")
        return result