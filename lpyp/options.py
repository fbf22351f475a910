"""Option descriptions and the special keys reported to parse handlers."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class OptionFlag(enum.IntFlag):
    """Behaviour flags of an option; combine with ``|``."""

    NO_ARG = 0x00
    REQUIRED_ARG = 0x01
    OPTIONAL_ARG = 0x02
    DENY_DUPLICATE = 0x04


class Key(enum.IntEnum):
    """Keys passed to a handler for events that are not a declared option."""

    ARG = 0x80000000
    END = 0x80000001
    UNKNOWN = 0x80000002


@dataclass(frozen=True)
class Option:
    """One command-line option.

    ``key`` identifies the option to the handler and must not be zero.
    ``short_name`` is a single character (``"v"`` for ``-v``) and
    ``long_name`` a word (``"verbose"`` for ``--verbose``); either may be
    left out. An option whose key is :attr:`Key.ARG` describes the
    positional arguments in usage text.
    """

    key: int
    short_name: str | None = None
    long_name: str | None = None
    flags: OptionFlag = OptionFlag.NO_ARG
    description: str | None = None
    arg_name: str | None = None

    def __post_init__(self) -> None:
        if self.key == 0:
            raise ValueError("option key must not be zero")
        if self.short_name is not None and len(self.short_name) != 1:
            raise ValueError(
                f"short option name must be one character, got {self.short_name!r}"
            )
        object.__setattr__(self, "flags", OptionFlag(self.flags))

    def takes_argument(self) -> bool:
        """Whether the option accepts an argument, required or optional."""
        return bool(self.flags & (OptionFlag.REQUIRED_ARG | OptionFlag.OPTIONAL_ARG))