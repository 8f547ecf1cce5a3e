"""Result codes and the exception raised by the argument parser."""

from __future__ import annotations

from enum import IntEnum


class ArgparseCode(IntEnum):
    """Outcome of an argument-parsing operation."""

    OK = 0
    PASSED_NULL = 1
    EMPTY_OPTION = 2
    FALSE_RETURN = 3
    ARG_REQUIRED = 4
    ARGS_EXIST = 5
    ARGS_EMPTY = 6
    NO_MATCH_FOUND = 7

    @property
    def description(self) -> str:
        """Human readable explanation of the code."""
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    ArgparseCode.OK: "success",
    ArgparseCode.PASSED_NULL: "a required value was missing",
    ArgparseCode.EMPTY_OPTION: "option has neither a short nor a long name",
    ArgparseCode.FALSE_RETURN: "an unexpected value was returned",
    ArgparseCode.ARG_REQUIRED: "an option-argument is required but none was supplied",
    ArgparseCode.ARGS_EXIST: "an argument set is already attached",
    ArgparseCode.ARGS_EMPTY: "the argument set is empty",
    ArgparseCode.NO_MATCH_FOUND: "no matching subcommand or option has been found",
}


class ArgparseError(Exception):
    """Raised when parsing or configuring arguments fails."""

    def __init__(self, code: ArgparseCode, message: str | None = None) -> None:
        self.code = ArgparseCode(code)
        self.message = message if message is not None else self.code.description
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"ArgparseError({self.code.name}, {self.message!r})"