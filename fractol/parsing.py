"""Command-line parsing: fractal selection, decimal parsing and usage text."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum
from typing import Sequence

_ASCII_DIGITS = frozenset("0123456789")

_DECIMAL_PREFIX = re.compile(
    r"[ \t\n\v\f\r]*(?P<sign>[+-]?)(?P<whole>[0-9]*)\.?(?P<frac>[0-9]*)"
)

DEFAULT_JULIA = (-0.745429, 0.05)

_HELP_LINES = (
    "Error: Invalid arguments provided.\n",
    "~~~~~~~~Available Fractals~~~~~~~~~~",
    "\tPlease type:",
    "mandelbrot, julia, or burning",
    "\n",
    "For Julia, you may specify starting values",
    "between -2.0 and 2.0. Remember to include",
    "one decimal place.",
    "\n\nExamples for Julia sets:\n\t-0.4\t0.6",
    "\n\t0.285\t0.01\n\t0\t0.8",
    "\n\t-1.476\t0\n\t-0.12\t-0.77",
)


class FractalType(IntEnum):
    """The fractals that can be drawn."""

    MANDELBROT = 1
    JULIA = 2
    BURNING = 3

    @property
    def command_name(self) -> str:
        """The word that selects this fractal on the command line."""
        return _COMMAND_NAMES[self]


_COMMAND_NAMES = {
    FractalType.MANDELBROT: "mandelbrot",
    FractalType.JULIA: "julia",
    FractalType.BURNING: "burning",
}
_BY_NAME = {name: kind for kind, name in _COMMAND_NAMES.items()}


@dataclass(frozen=True)
class Config:
    """What the command line asked for."""

    kind: FractalType
    name: str
    julia: tuple[float, float] = DEFAULT_JULIA


class UsageError(ValueError):
    """Raised when the command line cannot be used; carries the usage text."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(help_text() if message is None else message)


def help_text() -> str:
    """Return the usage message, each line ending in a newline."""
    return "".join(f"{line}\n" for line in _HELP_LINES)


def parse_decimal(text: str) -> float:
    """Parse the leading decimal number of ``text``, ignoring what follows.

    Leading whitespace and one sign are accepted; a string with no digits
    yields zero.
    """
    match = _DECIMAL_PREFIX.match(text)
    assert match is not None  # the pattern matches the empty string
    whole = match["whole"]
    frac = match["frac"]
    numerator = int(whole + frac) if whole or frac else 0
    value = numerator / 10 ** len(frac)
    return -value if match["sign"] == "-" else value


def is_signed_decimal(text: str) -> bool:
    """Tell whether ``text`` is an optionally signed decimal with at least one digit."""
    body = text[1:] if text[:1] in ("+", "-") else text
    if body.count(".") > 1:
        return False
    if any(ch != "." and ch not in _ASCII_DIGITS for ch in body):
        return False
    return any(ch in _ASCII_DIGITS for ch in body)


def parse_args(argv: Sequence[str]) -> Config:
    """Build a :class:`Config` from the arguments following the program name.

    Exactly one argument, naming a fractal, is accepted; anything else
    raises :class:`UsageError`.
    """
    if len(argv) != 1:
        raise UsageError()
    name = argv[0]
    kind = _BY_NAME.get(name)
    if kind is None:
        raise UsageError()
    return Config(kind=kind, name=name)