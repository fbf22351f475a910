"""Command-line parsing that reports each option to a handler."""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterable, Sequence

from lpyp.options import Key, Option, OptionFlag

Handler = Callable[[int, "str | None"], Any]


class ParseError(Exception):
    """The command line breaks a rule of the declared options."""


class _Parser:
    def __init__(self, argv: Sequence[str], options: Iterable[Option], handler: Handler):
        self.args = list(argv)
        self.options = list(options)
        self.handler = handler
        self.seen: set[int] = set()
        self.pos = 1

    def _find_short(self, name: str) -> Option | None:
        return next((o for o in self.options if o.short_name == name), None)

    def _find_long(self, name: str) -> Option | None:
        return next((o for o in self.options if o.long_name == name), None)

    def _register(self, option: Option, label: str) -> None:
        if option.flags & OptionFlag.DENY_DUPLICATE and option.key in self.seen:
            raise ParseError(f"option {label} already specified")
        self.seen.add(option.key)

    def _take_next(self) -> str | None:
        following = self.pos + 1
        if following < len(self.args) and not self.args[following].startswith("-"):
            self.pos = following
            return self.args[following]
        return None

    def _short(self, name: str) -> bool:
        """Handle one short option; return True if it consumed the next word."""
        option = self._find_short(name)
        if option is None:
            print(f"lpyp: invalid option -- '{name}'", file=sys.stderr)
            self.handler(Key.UNKNOWN, None)
            return False
        self._register(option, f"'{name}'")
        start = self.pos
        argument = None
        if option.flags & OptionFlag.REQUIRED_ARG:
            argument = self._take_next()
            if argument is None:
                raise ParseError(f"option requires an argument -- '{name}'")
        elif option.flags & OptionFlag.OPTIONAL_ARG:
            argument = self._take_next()
        self.handler(option.key, argument)
        return self.pos != start

    def _long(self, text: str) -> None:
        name, eq, inline = text.partition("=")
        option = self._find_long(name)
        if option is None:
            print(f"lpyp: unrecognized option '--{name}'", file=sys.stderr)
            self.handler(Key.UNKNOWN, None)
            return
        self._register(option, f"'--{name}'")
        argument = None
        if option.flags & OptionFlag.REQUIRED_ARG:
            argument = inline if eq else self._take_next()
            if argument is None:
                raise ParseError(f"option '--{name}' requires an argument")
        elif option.flags & OptionFlag.OPTIONAL_ARG:
            argument = inline if eq else self._take_next()
        self.handler(option.key, argument)

    def run(self) -> Any:
        while self.pos < len(self.args):
            arg = self.args[self.pos]
            if arg == "--":
                self.pos += 1
                break
            if arg.startswith("--"):
                self._long(arg[2:])
            elif arg.startswith("-") and len(arg) > 1:
                for name in arg[1:]:
                    if self._short(name):
                        break
            else:
                self.handler(Key.ARG, arg)
            self.pos += 1
        for arg in self.args[self.pos:]:
            self.handler(Key.ARG, arg)
        return self.handler(Key.END, None)


def parse(argv: Sequence[str], options: Iterable[Option], handler: Handler) -> Any:
    """Parse ``argv`` (whose first item is the program name) against ``options``.

    ``handler(key, argument)`` is called for every option found, with
    :attr:`Key.ARG` for each positional argument, :attr:`Key.UNKNOWN` for an
    unknown option (after a warning on standard error) and finally
    :attr:`Key.END`. Whatever the handler raises stops parsing and
    propagates. Returns what the handler returned for :attr:`Key.END`.
    Raises :class:`ParseError` for a missing argument or a forbidden repeat.
    """
    return _Parser(argv, options, handler).run()