# argkit

A small library for parsing command-line arguments. It understands:

- short options, alone or bundled: `-c`, `-abc`
- short options negated with a plus sign: `+c`
- long options: `--create`
- option-arguments in the next word, glued to a short option, or after an
  equals sign: `-c value`, `-cvalue`, `--create=value`
- long-option prefixes that switch an option on (`enable-`, `with-`)
  or off (`no-`, `disable-`, `without-`)
- option-arguments that flip an option off (`false`, `no`, `disable`)
  when glued to a short option or given after `=`
- option-arguments split into several values on a delimiter (`:` by default)
- operands, and `--` to end option processing
- subcommands with their own options

## Installation

```
pip install .
```

The package has no runtime dependencies. To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
import sys

from argkit.args import Args
from argkit.option import Option

args = Args()
args.add_option(Option("n", "", "do not output a trailing newline"))
args.add_option(Option("e", "", "enable interpretation of backslash escapes"))

args.parse(sys.argv[1:])

if args.find("e").present > 0:
    print("escapes on")
```

`Args.find` looks an option up by name: a one-character name is matched
against short names, anything longer against long names.

Each option records whether it was seen in `present`: `0` when it was not
given, a positive value when it was, and a negative value when it was
negated (`+e`, `--no-feature`, or a first option-argument of `false`,
`no` or `disable` given as `-efalse` or `--feature=no`). Compare with
`> 0` rather than testing truth.

An option that takes a value sets `accepts_arguments` or
`requires_arguments`; the parsed value ends up in `argument` as a list of
`Operand` objects, each holding either a `number` (when the text starts
with a non-zero integer) or a `string`, with `value` giving whichever is
set:

```python
from argkit.args import Args
from argkit.option import Option

opt = Option("p", "path", "search path")
opt.requires_arguments = True

args = Args()
args.add_option(opt)
args.parse(["--path=/usr/bin:/bin"])

print([op.string for op in args.find("path").argument])
# ['/usr/bin', '/bin']
```

The delimiter is the option's `argument_delimiter`. An option that accepts
(but does not require) an argument skips a following word that starts with
`-`. Words that are not options become operands in `Args.operands`, split
on spaces.

Operands can be split on their own with `parse_operands`:

```python
from argkit.operand import parse_operands

[op.number for op in parse_operands("20:40", ":")]  # [20, 40]
```

### Errors

Problems are raised as `argkit.errors.ArgparseError`, whose `code` is an
`ArgparseCode` and whose `message` explains it. Among them:

- `EMPTY_OPTION` when an option with neither a short nor a long name is added
- `ARG_REQUIRED` when an option that requires an argument is given none
- `NO_MATCH_FOUND` for an unknown long option or an unknown subcommand
- `PASSED_NULL` when `None` is passed where a value is needed

An unknown character in a group of short options ends that group quietly.

### Help output

```python
import sys

from argkit.args import Args
from argkit.option import Option

args = Args()
args.add_option(Option("f", "feature", "description of feature"))
args.help(sys.stdout)
```

prints

```
  -f --feature  description of feature
```

Descriptions line up across all options; a long name of 15 characters or
more puts its description on the next line.

### Subcommands

```python
from argkit.option import Option
from argkit.subcommand import Subcommand
from argkit.subcommands import Subcommands

build = Subcommand(name="build", description="build the project")
build.add_option(Option("j", "jobs", "number of parallel jobs"))

commands = Subcommands(name="tool", description="does things")
commands.add(build)
chosen = commands.parse(["build", "-j"])  # returns the `build` subcommand
```

`Subcommands.parse` matches the first word against subcommand names and
parses the rest into that subcommand's options. `Subcommands.help` prints
the application name and description, the global options in
`Subcommands.args` and one line per subcommand; `Subcommand.help` prints a
subcommand's name and its options.

## Commands

Two small programs come with the package.

`argkit-echo` recognises `-n` and `-e` and reports which of them were set:

```
argkit-echo -e -n
```

`argkit-help-output` prints the help text for a single sample option:

```
argkit-help-output
```

## What it does not do

- It does not add a `--help` option or print usage on errors; call `help`
  yourself.
- It converts values only to integers; any other type conversion is up to
  the caller.
- `argkit-echo` reports the flags it found; it does not echo its operands.
- Global options in `Subcommands.args` are shown by `help` but not parsed
  by `Subcommands.parse`.