"""A named subcommand that carries its own set of options and operands."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from .args import Args
from .errors import ArgparseCode, ArgparseError
from .operand import Operand
from .option import Option


class Subcommand:
    """A subcommand with a name, descriptions and an optional argument set.

    The argument set is created the first time an option or operand is added.
    """

    def __init__(
        self,
        name: str | None = None,
        description: str | None = None,
        short_description: str | None = None,
    ) -> None:
        self.args: Args | None = None
        self.name = name
        self.short_description = short_description
        self.description = description

    def __repr__(self) -> str:
        return f"Subcommand(name={self.name!r}, args={self.args!r})"

    def _ensure_args(self) -> Args:
        if self.args is None:
            self.args = Args()
        return self.args

    def add_option(self, opt: Option) -> None:
        """Register an option, creating the argument set if needed."""
        self._ensure_args().add_option(opt)

    def add_operand(self, op: Operand | Iterable[Operand]) -> None:
        """Append operands, creating the argument set if needed."""
        self._ensure_args().add_operand(op)

    def help(self, stream: TextIO | None = None) -> None:
        """Write the subcommand's name and its options' help to ``stream``.

        Raises ArgparseError when the subcommand has no argument set.
        """
        out = sys.stdout if stream is None else stream
        out.write(f"{self.name}:\n")
        if self.args is None:
            raise ArgparseError(
                ArgparseCode.PASSED_NULL,
                f"subcommand {self.name!r} has no arguments",
            )
        self.args.help(out)