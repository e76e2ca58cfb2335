"""Command arguments: value changes, ranges, save modes and search filters."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from itertools import groupby
from typing import Iterable, Union

from .errors import _parse_unsigned

_SIGNS = ("", "+", "-")


def _check_sign(sign: str) -> None:
    if sign not in _SIGNS:
        raise ValueError(f"sign must be one of {_SIGNS!r}, not {sign!r}")


class SaveMode(enum.Enum):
    """How ``save`` treats an existing stored playlist."""

    CREATE = "create"
    APPEND = "append"
    REPLACE = "replace"


@dataclass(frozen=True)
class ValueChange:
    """A value set outright (empty sign) or moved up (``+``) or down (``-``)."""

    amount: int
    sign: str = ""

    def __post_init__(self) -> None:
        _check_sign(self.sign)
        if self.amount < 0:
            raise ValueError("amount must not be negative")

    @classmethod
    def parse(cls, text: str) -> ValueChange:
        """Parse ``+N``, ``-N`` or ``N``."""
        if text.startswith("-"):
            return cls(_parse_unsigned(text.lstrip("-"), 32), "-")
        if text.startswith("+"):
            return cls(_parse_unsigned(text.lstrip("+"), 32), "+")
        return cls(_parse_unsigned(text, 32))

    def to_mpd_str(self) -> str:
        """The argument as the server expects it."""
        return f"{self.sign}{self.amount}"


@dataclass(frozen=True)
class QueueMoveTarget:
    """A queue position, absolute (empty sign) or relative to the current song."""

    position: int
    sign: str = ""

    def __post_init__(self) -> None:
        _check_sign(self.sign)
        if self.position < 0:
            raise ValueError("position must not be negative")

    def to_mpd_str(self) -> str:
        """The argument as the server expects it."""
        return f"{self.sign}{self.position}"


@dataclass(frozen=True)
class SingleOrRange:
    """A single position, or the half-open range ``start:end``."""

    start: int
    end: int | None = None

    @classmethod
    def single(cls, index: int) -> SingleOrRange:
        return cls(index)

    @classmethod
    def range(cls, start: int, end: int) -> SingleOrRange:
        return cls(start, end)

    def as_mpd_range(self) -> str:
        """The quoted range argument."""
        if self.end is None:
            return f'"{self.start}"'
        return f'"{self.start}:{self.end}"'


class Ranges(list):
    """Positions collapsed into runs of :class:`SingleOrRange`."""

    @classmethod
    def from_indices(cls, indices: Iterable[int]) -> Ranges:
        """Group distinct positions into consecutive runs, in ascending order."""
        ordered = sorted(set(indices))
        result = cls()
        for _, run in groupby(enumerate(ordered), key=lambda pair: pair[1] - pair[0]):
            values = [value for _, value in run]
            if len(values) == 1:
                result.append(SingleOrRange(values[0]))
            else:
                result.append(SingleOrRange(values[0], values[-1] + 1))
        return result

    def __str__(self) -> str:
        return ", ".join(
            f"[{item.start}]" if item.end is None else f"[{item.start}:{item.end}]" for item in self
        )


def escape(text: str) -> str:
    """Escape a value for use inside a quoted filter expression."""
    return (
        text.replace("\\", "\\\\\\\\")
        .replace("(", "\\(")
        .replace(")", "\\)")
        .replace("'", "\\\\'")
        .replace('"', '\\"')
    )


class Tag(enum.Enum):
    """Tags understood by every server; any other tag is given as a string."""

    ANY = "Any"
    ARTIST = "Artist"
    ALBUM_ARTIST = "AlbumArtist"
    ALBUM = "Album"
    TITLE = "Title"
    FILE = "File"
    GENRE = "Genre"


TagLike = Union[Tag, str]


def tag_name(tag: TagLike) -> str:
    """The name of a tag as sent to the server."""
    return tag.value if isinstance(tag, Tag) else tag


class FilterKind(enum.Enum):
    """How a filter value is matched."""

    EXACT = "exact"
    STARTS_WITH = "starts_with"
    CONTAINS = "contains"
    REGEX = "regex"


@dataclass(frozen=True)
class Filter:
    """One condition of a search."""

    tag: TagLike
    value: str
    kind: FilterKind = FilterKind.EXACT

    def with_kind(self, kind: FilterKind) -> Filter:
        """The same filter matched in another way."""
        return replace(self, kind=kind)

    def to_query_str(self) -> str:
        """The filter expression for this condition."""
        name = tag_name(self.tag)
        value = escape(self.value)
        if self.kind is FilterKind.EXACT:
            return f"{name} == '{value}'"
        if self.kind is FilterKind.STARTS_WITH:
            return f"{name} =~ '^{value}'"
        if self.kind is FilterKind.CONTAINS:
            return f"{name} =~ '.*{value}.*'"
        return f"{name} =~ '{value}'"


def filters_to_query(filters: Iterable[Filter]) -> str:
    """Join filters into one expression, each parenthesised and joined by AND."""
    return " AND ".join(f"({item.to_query_str()})" for item in filters)