"""Operands: plain values, split on a delimiter and read as integers where possible."""

from __future__ import annotations

import re

_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


def _atoi(text: str) -> int:
    """Read a leading integer the way C's atoi does; 0 when there is none."""
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


class Operand:
    """A single value.

    ``number`` holds the leading integer of the text; when that is 0 the
    text is kept in ``string`` instead, otherwise ``string`` is None.
    """

    __slots__ = ("string", "number")

    def __init__(self, text: str) -> None:
        self.number = _atoi(text)
        self.string: str | None = text if self.number == 0 else None

    @property
    def value(self) -> int | str:
        """The number, or the text if it did not read as a non-zero number."""
        return self.number if self.string is None else self.string

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Operand):
            return NotImplemented
        return self.number == other.number and self.string == other.string

    def __hash__(self) -> int:
        return hash((self.number, self.string))

    def __repr__(self) -> str:
        return f"Operand({self.value!r})"


def parse_operands(argument: str | None, delimiter: str) -> list[Operand]:
    """Split ``argument`` on ``delimiter`` into operands; empty pieces are kept."""
    if argument is None:
        return []
    return [Operand(piece) for piece in argument.split(delimiter)]