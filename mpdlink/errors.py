"""Errors raised while talking to an MPD server."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass


class MpdError(Exception):
    """Base class of every error this package raises."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MpdError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class ParseError(MpdError):
    """A value received from the server could not be parsed."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"ParseError: '{self.message}'"


class UnknownCodeError(MpdError):
    """An ACK line carried an error code this package does not know."""

    def __init__(self, code: int) -> None:
        super().__init__(code)
        self.code = code

    def __str__(self) -> str:
        return f"UnknownCodeError: '{self.code}'"


class GenericError(MpdError):
    """Any other failure, described by a message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"GenericError: '{self.message}'"


class ClientClosedError(MpdError):
    """The connection to the server was closed."""

    def __init__(self) -> None:
        super().__init__()

    def __str__(self) -> str:
        return "Client has been already closed."


class ValueExpectedError(MpdError):
    """A line without a key/value separator was received."""

    def __init__(self, value: str) -> None:
        super().__init__(value)
        self.value = value

    def __str__(self) -> str:
        return f"Expected value from mpd but got '{self.value}'"


class UnsupportedMpdVersionError(MpdError):
    """The server is too old for the requested feature."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"Unsupported mpd version: '{self.message}'"


class ErrorCode(enum.Enum):
    """Error codes the server sends in ACK lines."""

    NOT_LIST = 1
    ARGUMENT = 2
    PASSWORD = 3
    PERMISSION = 4
    UNKNOWN_CMD = 5
    NO_EXIST = 50
    PLAYLIST_MAX = 51
    SYSTEM = 52
    PLAYLIST_LOAD = 53
    UPDATE_ALREADY = 54
    PLAYER_SYNC = 55
    EXIST = 56

    @classmethod
    def parse(cls, text: str) -> ErrorCode:
        """Parse the numeric code of an ACK line."""
        try:
            value = _parse_unsigned(text, 8)
        except ParseError:
            raise ParseError(text) from None
        try:
            return cls(value)
        except ValueError:
            raise UnknownCodeError(value) from None

    def __str__(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    ErrorCode.NOT_LIST: "not a list",
    ErrorCode.ARGUMENT: "bad argument",
    ErrorCode.PASSWORD: "invalid password",
    ErrorCode.PERMISSION: "no permission",
    ErrorCode.UNKNOWN_CMD: "unknown commad",
    ErrorCode.NO_EXIST: "resource does not exist",
    ErrorCode.PLAYLIST_MAX: "maximum playlist size",
    ErrorCode.SYSTEM: "system error",
    ErrorCode.PLAYLIST_LOAD: "unable to load playlist",
    ErrorCode.UPDATE_ALREADY: "database update already in progress",
    ErrorCode.PLAYER_SYNC: "player is in an inconsistent state",
    ErrorCode.EXIST: "resource already exists",
}


def _format_error(text: str) -> ParseError:
    return ParseError(f"Invalid error format. {text}.")


@dataclass(frozen=True)
class MpdFailureResponse:
    """A parsed ``ACK [error@command_listNum] {current_command} message_text`` line."""

    code: ErrorCode
    command_list_index: int
    command: str
    message: str

    @classmethod
    def parse(cls, line: str) -> MpdFailureResponse:
        """Parse an ACK line sent by the server."""
        prefix = "ACK ["
        if not line.startswith(prefix):
            raise _format_error("No Ack")
        code_text, sep, rest = line[len(prefix):].partition("@")
        if not sep:
            raise _format_error("No error code")
        code = ErrorCode.parse(code_text)

        index_text, sep, rest = rest.partition("]")
        if not sep:
            raise _format_error("No command index")
        try:
            index = _parse_unsigned(index_text, 8)
        except ParseError:
            raise _format_error("Invalid command index") from None

        if not rest.startswith(" {"):
            raise _format_error("No current command")
        command, sep, rest = rest[2:].partition("} ")
        if not sep:
            raise _format_error("No current command")

        return cls(code=code, command_list_index=index, command=command, message=rest.strip())

    def __str__(self) -> str:
        return (
            f"Cannot execute command: '{self.command}'. Detail: '{self.message}'. "
            f"Reason: '{self.code}'. Cmd idx: '{self.command_list_index}'"
        )


class MpdFailureError(MpdError):
    """The server answered a command with an ACK line."""

    def __init__(self, response: MpdFailureResponse) -> None:
        super().__init__(response)
        self.response = response

    def __str__(self) -> str:
        return f"MpdError: '{self.response}'"


def _parse_unsigned(text: str, bits: int) -> int:
    """Parse an unsigned integer that must fit into ``bits`` bits."""
    if not text:
        raise ParseError("cannot parse integer from empty string")
    digits = text[1:] if text.startswith("+") else text
    if not digits or not digits.isascii() or not digits.isdigit():
        raise ParseError("invalid digit found in string")
    value = int(digits)
    if value >= 1 << bits:
        raise ParseError("number too large to fit in target type")
    return value


def _parse_float(text: str) -> float:
    """Parse a floating point number without surrounding whitespace."""
    if not text or text != text.strip() or "_" in text:
        raise ParseError("invalid float literal")
    try:
        return float(text)
    except ValueError:
        raise ParseError("invalid float literal") from None


def _parse_seconds(text: str) -> float:
    """Parse a non-negative, finite number of seconds."""
    seconds = _parse_float(text)
    if not math.isfinite(seconds) or seconds < 0:
        raise ParseError(f"cannot convert '{text}' to a duration")
    return seconds