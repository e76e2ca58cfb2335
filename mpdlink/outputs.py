"""Audio outputs from the ``outputs`` command."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import GenericError, _parse_unsigned
from .protocol import FromMpd, _logged


@dataclass
class Output(FromMpd):
    """An audio output and whether it is enabled."""

    id: int = 0
    name: str = ""
    enabled: bool = False

    def next_internal(self, key: str, value: str) -> bool:
        if key == "outputid":
            self.id = _logged(lambda v: _parse_unsigned(v, 32), key, value)
        elif key == "outputname":
            self.name = value
        elif key == "outputenabled" and value in ("0", "1"):
            self.enabled = value == "1"
        else:
            return False
        return True


class Outputs(list, FromMpd):
    """Entries of an ``outputs`` response."""

    def next_internal(self, key: str, value: str) -> bool:
        if key == "outputid":
            self.append(Output())
        if not self:
            raise GenericError(
                f"No element in accumulator while parsing Outputs. Key '{key}' Value :'{value}'"
            )
        return self[-1].next_internal(key, value)