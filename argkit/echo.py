"""Example commands: flag handling of an echo-like tool, and help output."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .args import Args
from .errors import ArgparseError
from .option import Option


def _echo_args() -> Args:
    args = Args()
    args.add_option(Option("n", "", "do not output a trailing newline"))
    args.add_option(Option("e", "", "enable interpretation of backslash escapes"))
    return args


def main(argv: Sequence[str] | None = None) -> int:
    """Parse echo-style flags and report which ones are in effect."""
    words = list(sys.argv[1:] if argv is None else argv)
    args = _echo_args()
    try:
        args.parse(words)
    except ArgparseError as error:
        print(f"echo: {error.message}", file=sys.stderr)
        return 1

    # a negative count means the flag was negated, e.g. "+e"
    if args.find("e").present > 0:
        print("enable interpretation of escapes")

    if args.find("n").present > 0:
        print("disable printing of a trailing newline")

    return 0


def help_main(argv: Sequence[str] | None = None) -> int:
    """Print the help output of a single example option."""
    args = Args()
    args.add_option(Option("f", "feature", "description of feature"))
    args.help(sys.stdout)
    return 0