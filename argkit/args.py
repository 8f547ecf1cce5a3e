"""A set of options and operands, filled by parsing a command line."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from .errors import ArgparseCode, ArgparseError
from .operand import Operand
from .option import Option, find_option
from .parse import parse_arguments


class Args:
    """Options known to a command and the operands parsed for it."""

    def __init__(self) -> None:
        self.options: list[Option] = []
        self.operands: list[Operand] = []

    def __repr__(self) -> str:
        return f"Args(options={self.options!r}, operands={self.operands!r})"

    def add_option(self, opt: Option) -> None:
        """Register an option; it needs a short or a long name."""
        if opt is None:
            raise ArgparseError(ArgparseCode.PASSED_NULL)
        if not opt.short_opt and not opt.long_opt:
            raise ArgparseError(ArgparseCode.EMPTY_OPTION)
        self.options.append(opt)

    def add_operand(self, op: Operand | Iterable[Operand]) -> None:
        """Append one operand or a sequence of operands."""
        if op is None:
            raise ArgparseError(ArgparseCode.PASSED_NULL)
        if isinstance(op, Operand):
            self.operands.append(op)
        else:
            self.operands.extend(op)

    def find(self, name: str) -> Option | None:
        """Find an option by short (one character) or long name."""
        return find_option(self.options, name)

    def parse(self, argv: Iterable[str]) -> None:
        """Parse command-line words (without the program name)."""
        parse_arguments(self, argv)

    def help(self, stream: TextIO | None = None) -> None:
        """Write help lines for every option to ``stream``."""
        out = sys.stdout if stream is None else stream
        padding = self.max_pad()
        for opt in self.options:
            opt.help(padding, out)

    def max_pad(self) -> int:
        """Largest padding of all options, 0 when there are none."""
        return max((opt.padding() for opt in self.options), default=0)