"""Parsing of command-line words into options, option-arguments and operands."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from .errors import ArgparseCode, ArgparseError
from .operand import parse_operands
from .option import Option, find_option

if TYPE_CHECKING:
    from .args import Args

# Long-option prefixes and the sign they give to ``present``, checked in order.
_PREFIXES = (
    ("no", -1),
    ("disable", -1),
    ("without", -1),
    ("enable", 1),
    ("with", 1),
)

# Operands outside of option-arguments are split on spaces.
_OPERAND_DELIMITER = " "


def _takes_argument(opt: Option) -> bool:
    return opt.accepts_arguments or opt.requires_arguments


def parse_short(args: Args, argument: str) -> Option | None:
    """Parse a group of short options such as ``-abc`` or ``+abc``.

    Returns the option that still waits for an argument from the next word,
    or None. Parsing stops at the first unknown character.
    """
    present = -1 if argument.startswith("+") else 1
    flags = argument[1:]

    for index, char in enumerate(flags):
        opt = find_option(args.options, char)
        if opt is None:
            return None

        opt.present = present
        if _takes_argument(opt):
            rest = flags[index + 1:]
            if rest:
                opt.add_argument(parse_operands(rest, opt.argument_delimiter))
                return None
            return opt
    return None


def parse_long(args: Args, argument: str) -> Option | None:
    """Parse a long option such as ``--name``, ``--no-name`` or ``--name=value``.

    Returns the option that still waits for an argument from the next word,
    or None. Raises ArgparseError when no option has the given name.
    """
    name = argument[2:]
    present = 1

    for prefix, sign in _PREFIXES:
        if name.startswith(prefix):
            present = sign
            # drop the prefix and the dash that follows it
            name = name[len(prefix) + 1:]
            break

    name, equals, value = name.partition("=")
    opt = find_option(args.options, name)
    if opt is None:
        raise ArgparseError(
            ArgparseCode.NO_MATCH_FOUND, f"unknown option: --{name}"
        )

    if equals:
        if not _takes_argument(opt):
            return None
        opt.present = present
        opt.add_argument(parse_operands(value, opt.argument_delimiter))
        return None

    opt.present = present
    return opt if _takes_argument(opt) else None


def parse_arguments(args: Args, argv: Iterable[str] | None) -> None:
    """Parse ``argv`` (without the program name) into ``args``."""
    if args is None or argv is None:
        raise ArgparseError(ArgparseCode.PASSED_NULL)

    words = list(argv)
    index = 0
    while index < len(words):
        argument = words[index]
        index += 1

        if argument == "--":
            for rest in words[index:]:
                args.add_operand(parse_operands(rest, _OPERAND_DELIMITER))
            return

        if argument.startswith("--"):
            opt = parse_long(args, argument)
        elif argument.startswith(("-", "+")):
            opt = parse_short(args, argument)
        else:
            args.add_operand(parse_operands(argument, _OPERAND_DELIMITER))
            continue

        if opt is None:
            continue

        if not _takes_argument(opt):
            raise ArgparseError(ArgparseCode.FALSE_RETURN)

        if index >= len(words):
            if opt.requires_arguments:
                raise ArgparseError(
                    ArgparseCode.ARG_REQUIRED,
                    f"option {argument} requires an argument",
                )
            return

        if words[index].startswith("-"):
            if opt.requires_arguments:
                raise ArgparseError(
                    ArgparseCode.ARG_REQUIRED,
                    f"option {argument} requires an argument",
                )
            continue

        opt.argument = parse_operands(words[index], opt.argument_delimiter)
        index += 1