"""Protocol version announced by the server."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import ParseError, _parse_unsigned


@dataclass(frozen=True, order=True)
class Version:
    """A ``major.minor.patch`` protocol version."""

    major: int
    minor: int
    patch: int

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse a version such as ``0.23.5``; extra parts are ignored."""
        parts = text.strip().split(".")
        names = ("major", "minor", "patch")
        if len(parts) < len(names):
            missing = names[len(parts)]
            raise ParseError(f"Cannot parse {missing} version from '{text}'")
        major, minor, patch = (_parse_unsigned(part, 8) for part in parts[:3])
        return cls(major, minor, patch)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"