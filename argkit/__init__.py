"""Command-line argument parsing with options, operands and subcommands."""

__version__ = "0.0.1"

__all__ = [
    "args",
    "echo",
    "errors",
    "operand",
    "option",
    "parse",
    "subcommand",
    "subcommands",
]