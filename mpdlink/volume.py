"""Playback volume, bounded to 0..100."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import _parse_unsigned
from .protocol import FromMpd

_MIN = 0
_MAX = 100


def _clamp(value: int) -> int:
    return max(_MIN, min(_MAX, value))


@dataclass
class Volume(FromMpd):
    """A volume level between 0 and 100."""

    value: int = 0

    def __post_init__(self) -> None:
        self.value = _clamp(self.value)

    def set_value(self, value: int) -> Volume:
        """Set the level, clamped to the valid range."""
        self.value = _clamp(value)
        return self

    def inc(self) -> Volume:
        """Raise the level by one, stopping at the maximum."""
        if self.value < _MAX:
            self.value += 1
        return self

    def inc_by(self, step: int) -> Volume:
        """Raise the level by ``step``, stopping at the maximum."""
        self.value = min(self.value + step, _MAX)
        return self

    def dec(self) -> Volume:
        """Lower the level by one, stopping at the minimum."""
        if self.value > _MIN:
            self.value -= 1
        return self

    def dec_by(self, step: int) -> Volume:
        """Lower the level by ``step``, stopping at the minimum."""
        self.value = max(self.value - step, _MIN)
        return self

    def next_internal(self, key: str, value: str) -> bool:
        if key != "volume":
            return False
        self.value = _parse_unsigned(value, 8)
        return True