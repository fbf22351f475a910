# lpyp

A small command-line option parser. You describe your options once. Then
`parse` goes through the argument list and calls a handler for each option,
each positional argument and the end of input. The same option table also
produces usage text and help text with aligned columns.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Describing options

Each option is an `Option` from `lpyp.options`. It is a frozen dataclass with
these fields:

- `key`: the identifier passed to your handler. It must not be zero.
- `short_name`: a single character, for example `v` for `-v`.
- `long_name`: for example `verbose` for `--verbose`.
- `flags`: a combination of `OptionFlag` values.
- `description`: the text shown in the help.
- `arg_name`: the name of the argument in the help, such as `FILE`.

Creating an `Option` raises `ValueError` in two cases: the key is zero, or the
short name is not exactly one character.

`OptionFlag` has these members:

- `NO_ARG`: the option takes no argument.
- `REQUIRED_ARG`: the option needs an argument.
- `OPTIONAL_ARG`: the option may take an argument.
- `DENY_DUPLICATE`: the option may be given only once.

`Option.takes_argument()` returns whether the option accepts an argument,
either required or optional.

`Key` holds the special keys passed to your handler:

- `Key.ARG`: a positional argument.
- `Key.END`: the end of the arguments.
- `Key.UNKNOWN`: an unknown option.

An entry in the table whose key is `Key.ARG` names the positional arguments in
the usage line.

## Parsing

```python
from lpyp.options import Key, Option, OptionFlag
from lpyp.parse import parse

options = [
    Option(1, "v", "verbose", description="explain what is done"),
    Option(2, "o", "output", OptionFlag.REQUIRED_ARG | OptionFlag.DENY_DUPLICATE,
           "write to FILE", "FILE"),
]

def handler(key, argument):
    print(key, argument)

parse(["prog", "-v", "--output=out.txt", "input"], options, handler)
```

`parse(argv, options, handler)` reads `argv` the way a program receives it,
with the program name first. For every recognised option it calls
`handler(key, argument)`. The `argument` is `None` when no argument was given.

Short options:

- Short options may be grouped, as in `-abc`.
- A short option that takes an argument uses the next word.
- Once a short option in a group uses the next word, the rest of that group is skipped.

Long options:

- A long option must match a long name exactly.
- A long option takes its argument either as `--name=value` or as `--name value`.

The next word is used as an argument only if it does not start with `-`. A
value written after `=` is used as it stands.

Positional arguments:

- A lone `-` is a positional argument.
- Every word after `--` is passed on as a positional argument.

When the arguments run out, the handler is called once more with `Key.END`.
`parse` returns whatever the handler returned for that call.

Errors:

- For an unknown short or long option, `parse` writes a warning to standard error and calls the handler with `Key.UNKNOWN`. Parsing then continues.
- A missing required argument raises `ParseError`.
- A second use of an option flagged `DENY_DUPLICATE` raises `ParseError`.
- An exception raised by the handler stops parsing and propagates unchanged.

## Help text

`lpyp.usage` builds the text shown to users:

- `format_usage(options, program_name)` returns the one-line summary `Usage: NAME [OPTIONS] ARGS`.
  - `NAME` is `program` when no program name is given.
  - `ARGS` is the `arg_name` of the `Key.ARG` entry, or `ARGS` if that entry has no `arg_name`.
  - It is left out if there is no `Key.ARG` entry.
- `format_help(options, program_name, description)` adds the description and an `Options:` table. The table lists every option, padded to a common width, followed by its description.
  - A short name is shown only if it is an ASCII letter.
  - A required argument is shown as ` NAME` and an optional one as ` [NAME]`, with `ARG` when no argument name is set.
- `print_usage(...)` and `print_help(...)` write the same text to the `file` you pass, or to standard output by default.

## Timing

`lpyp.timing.timestamp()` returns the current wall-clock time in seconds.
`elapsed_ms(start, end)` returns the time between two such readings in
milliseconds.

## What it does not do

This is a library only. It ships no command of its own, and it does not send
or trace anything on a network.