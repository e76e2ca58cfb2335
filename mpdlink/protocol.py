"""Line parsing shared by every response type."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, TypeVar

from .errors import MpdError, ValueExpectedError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def split_line(line: str) -> tuple[str, str]:
    """Split a ``key: value`` line into its key and value."""
    index = line.find(":")
    if index < 0:
        raise ValueExpectedError(line)
    return line[:index], line[index + 2:]


class FromMpd(ABC):
    """A value built up from the ``key: value`` lines of a response."""

    @abstractmethod
    def next_internal(self, key: str, value: str) -> bool:
        """Consume one pair with a lower-cased key; return whether it was used."""

    def next(self, line: str) -> None:
        """Consume one raw response line."""
        key, value = split_line(line)
        if not self.next_internal(key.lower(), value):
            logger.warning("Encountered unknown key/value pair key=%s value=%s", key, value)


def _logged(parse: Callable[[str], T], key: str, value: str) -> T:
    """Run ``parse`` on ``value``, logging the pair when it fails."""
    try:
        return parse(value)
    except MpdError:
        logger.error("Failed to parse value key=%s value=%s", key, value)
        raise