"""Database update job reported by the ``update`` command."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import _parse_unsigned
from .protocol import FromMpd


@dataclass
class Update(FromMpd):
    """The id of a started database update job."""

    job_id: int = 0

    def next_internal(self, key: str, value: str) -> bool:
        if value != "updating_db":
            return False
        self.job_id = _parse_unsigned(value, 32)
        return True