"""A collection of subcommands with optional global arguments."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from .args import Args
from .errors import ArgparseCode, ArgparseError
from .subcommand import Subcommand


class Subcommands:
    """Subcommands of an application, kept in the order they were added.

    ``args`` holds global options, as in ``cmd --global sub --local``.
    """

    def __init__(
        self, name: str | None = None, description: str | None = None
    ) -> None:
        self.subcommands: list[Subcommand] = []
        self.args: Args | None = None
        self.name = name
        self.description = description

    def __repr__(self) -> str:
        return f"Subcommands(name={self.name!r}, subcommands={self.subcommands!r})"

    def __iter__(self):
        return iter(self.subcommands)

    def __len__(self) -> int:
        return len(self.subcommands)

    @property
    def count(self) -> int:
        """Number of subcommands."""
        return len(self.subcommands)

    def add(self, scmd: Subcommand) -> None:
        """Append a subcommand."""
        if scmd is None:
            raise ArgparseError(ArgparseCode.PASSED_NULL)
        self.subcommands.append(scmd)

    def parse(self, argv: Iterable[str]) -> Subcommand:
        """Dispatch on the first word and parse the rest into that subcommand.

        Returns the matching subcommand. Raises ArgparseError when no
        subcommand has that name, or when the match has no argument set.
        """
        if argv is None:
            raise ArgparseError(ArgparseCode.PASSED_NULL)
        words = list(argv)
        if not words:
            raise ArgparseError(ArgparseCode.NO_MATCH_FOUND, "no subcommand given")

        first, rest = words[0], words[1:]
        for scmd in self.subcommands:
            if scmd.name is not None and scmd.name == first:
                if scmd.args is None:
                    raise ArgparseError(
                        ArgparseCode.PASSED_NULL,
                        f"subcommand {first!r} has no arguments",
                    )
                scmd.args.parse(rest)
                return scmd

        raise ArgparseError(
            ArgparseCode.NO_MATCH_FOUND, f"unknown subcommand: {first}"
        )

    def help(self, stream: TextIO | None = None) -> None:
        """Write application help, global options and subcommands to ``stream``."""
        out = sys.stdout if stream is None else stream
        out.write(f"{self.name}: {self.description}\n\n")
        out.write("Global options:\n")
        if self.args is not None:
            self.args.help(out)
        for scmd in self.subcommands:
            out.write(f"{scmd.name}: {scmd.description}\n")