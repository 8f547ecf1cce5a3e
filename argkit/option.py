"""Options: flags with short and long names, optional arguments and help output."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from .errors import ArgparseCode, ArgparseError
from .operand import Operand

#: Long options at least this long get their description on a new line.
MAXLEN_LONG_OPT = 15

_NEGATING_ARGUMENTS = ("false", "no", "disable")


class Option:
    """A command-line option.

    ``present`` is 0 when the option was not given, positive when it was,
    and negative when it was negated (``+f``, ``--no-f`` and the like).
    """

    def __init__(
        self,
        short_opt: str | None,
        long_opt: str | None,
        description: str | None,
    ) -> None:
        self.short_opt = short_opt
        self.long_opt = long_opt
        self.description = description
        self.argument: list[Operand] = []
        self.accepts_arguments = False
        self.requires_arguments = False
        self.argument_delimiter = ":"
        self.present = 0

    def __repr__(self) -> str:
        return (
            f"Option(short_opt={self.short_opt!r}, long_opt={self.long_opt!r}, "
            f"present={self.present}, argument={self.argument!r})"
        )

    def padding(self) -> int:
        """Width of the name columns in help output."""
        # two spaces of indent, "-x" and the separating space
        return 5 + len(self.long_opt or "")

    def help(self, padding: int, stream: TextIO | None = None) -> None:
        """Write one help line for this option to ``stream``."""
        out = sys.stdout if stream is None else stream
        parts = ["  "]
        parts.append(f"-{self.short_opt}" if self.short_opt is not None else "  ")
        parts.append(" ")
        if self.long_opt is not None:
            parts.append(f"--{self.long_opt}")
        if self.description is not None:
            if len(self.long_opt or "") >= MAXLEN_LONG_OPT:
                parts.append("\n" + " " * max(padding, 1))
            else:
                parts.append(" " * max(padding - self.padding() + 2, 1))
            parts.append(self.description)
        parts.append("\n")
        out.write("".join(parts))

    def add_argument(self, operands: Operand | Iterable[Operand]) -> None:
        """Append operands to the option's argument.

        When these are the first operands and the first one reads
        ``false``, ``no`` or ``disable``, the sign of ``present`` flips.
        """
        if operands is None:
            raise ArgparseError(ArgparseCode.PASSED_NULL)
        new = [operands] if isinstance(operands, Operand) else list(operands)
        if not new:
            return
        if not self.argument and new[0].string in _NEGATING_ARGUMENTS:
            self.present = -self.present
        self.argument.extend(new)


def find_option(options: Iterable[Option], name: str) -> Option | None:
    """Find an option by name; a one-character name is taken as a short option."""
    short = len(name) == 1
    for opt in options:
        if short and opt.short_opt is not None:
            compare = opt.short_opt
        else:
            compare = opt.long_opt
        if compare is not None and compare == name:
            return opt
    return None