"""Usage and help text for a set of options."""

from __future__ import annotations

import sys
from typing import Iterable, TextIO

from lpyp.options import Key, Option, OptionFlag


def format_usage(options: Iterable[Option], program_name: str | None = None) -> str:
    """Return the one-line usage summary, ending in a newline."""
    line = f"Usage: {program_name or 'program'} [OPTIONS]"
    positional = next((o for o in options if o.key == Key.ARG), None)
    if positional is not None:
        line += f" {positional.arg_name or 'ARGS'}"
    return line + "\n"


def _has_short(option: Option) -> bool:
    name = option.short_name
    return bool(name) and name.isascii() and name.isalpha()


def _option_label(option: Option) -> str:
    label = ""
    if _has_short(option):
        label += f"-{option.short_name}"
        if option.long_name:
            label += ", "
    else:
        label += "    "
    if option.long_name:
        label += f"--{option.long_name}"
    if option.flags & OptionFlag.REQUIRED_ARG:
        label += f" {option.arg_name or 'ARG'}"
    elif option.flags & OptionFlag.OPTIONAL_ARG:
        label += f" [{option.arg_name or 'ARG'}]"
    return label


def format_help(
    options: Iterable[Option],
    program_name: str | None = None,
    description: str | None = None,
) -> str:
    """Return the usage line, the description and an aligned option table."""
    options = list(options)
    parts = [format_usage(options, program_name)]
    if description:
        parts.append(f"\n{description}\n")
    labels = [_option_label(o) for o in options]
    width = max((len(label) for label in labels), default=0)
    parts.append("\nOptions:\n")
    for option, label in zip(options, labels):
        line = "  " + label.ljust(width)
        if option.description:
            line += "  " + option.description
        parts.append(line + "\n")
    return "".join(parts)


def print_usage(
    options: Iterable[Option],
    program_name: str | None = None,
    file: TextIO | None = None,
) -> None:
    """Write the usage line to ``file`` (standard output by default)."""
    (file or sys.stdout).write(format_usage(options, program_name))


def print_help(
    options: Iterable[Option],
    program_name: str | None = None,
    description: str | None = None,
    file: TextIO | None = None,
) -> None:
    """Write the full help text to ``file`` (standard output by default)."""
    (file or sys.stdout).write(format_help(options, program_name, description))