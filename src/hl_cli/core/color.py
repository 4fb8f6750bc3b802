"""ANSI color parsing and rendering."""

from __future__ import annotations

import re
from dataclasses import dataclass

from hl_cli.errors import AnsiFormatError, IntParseError, UnknownColor

# Foreground SGR prefix; a 4 in place of the 3 selects the background
FOREGROUND = "\033[3"
SGR_END = "m"

# Standard ANSI color names
COLORS = {
    "default": 9,
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "magenta": 5,
    "cyan": 6,
    "white": 7,
}

_UNSIGNED_RE = re.compile(r"\+?[0-9]+")
_SIGNED_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class AnsiCode:
    """A complete escape sequence, terminated with the SGR suffix."""

    code: str


@dataclass(frozen=True)
class SizeConditional:
    """Marker for a color picked at apply time from the field's byte size."""


Color = AnsiCode | SizeConditional


def parse_int(text: str, signed: bool = False) -> int:
    """Parse a plain decimal integer.

    Only ASCII digits with an optional sign are accepted; ``int()`` alone
    would also allow surrounding whitespace and underscores.

    Raises:
        IntParseError: If the text is not a valid integer
    """
    pattern = _SIGNED_RE if signed else _UNSIGNED_RE
    if not pattern.fullmatch(text):
        kind = "integer" if signed else "non-negative integer"
        raise IntParseError(f"invalid {kind}: {text!r}")
    return int(text)


def render(color: Color) -> str:
    """Render a color as its escape sequence.

    Raises:
        AnsiFormatError: For ``SizeConditional``, which has to be resolved
            to a concrete color first
    """
    match color:
        case AnsiCode(code=code):
            return code
        case SizeConditional():
            raise AnsiFormatError("the size color has no escape sequence of its own")


class ColorParser:
    """Parser for color specification strings."""

    def __init__(self, size_color: bool = True) -> None:
        """Initialize the parser.

        Args:
            size_color: Whether the ``size`` color is available
        """
        self.size_color = size_color

    def parse(self, color_spec: str) -> Color:
        """Parse a color specification string.

        Args:
            color_spec: Color string like "red", "fixed(200)" or "rgb(1,2,3)"

        Returns:
            AnsiCode, or SizeConditional for "size"

        Raises:
            UnknownColor: If the string names no color
            IntParseError: If a number inside fixed() or rgb() is malformed

        Examples:
            >>> ColorParser().parse("red")
            AnsiCode(code='\\x1b[31m')
            >>> ColorParser().parse("fixed(200)")
            AnsiCode(code='\\x1b[38;5;200m')
        """
        if color_spec in COLORS:
            body = str(COLORS[color_spec])
        elif color_spec.startswith("fixed(") and color_spec.endswith(")"):
            num = parse_int(color_spec[len("fixed(") : -1])
            body = f"8;5;{num}"
        elif (
            color_spec.startswith("rgb(")
            and color_spec.count(",") == 2
            and color_spec.endswith(")")
        ):
            red, green, blue = (
                parse_int(part) for part in color_spec[len("rgb(") : -1].split(",")
            )
            body = f"8;2;{red};{green};{blue}"
        elif color_spec == "size" and self.size_color:
            return SizeConditional()
        else:
            raise UnknownColor(color_spec)

        return AnsiCode(f"{FOREGROUND}{body}{SGR_END}")


def parse_color(color_spec: str) -> Color:
    """Parse a color specification string with the size color enabled."""
    return ColorParser().parse(color_spec)


DEFAULT = parse_color("default")
RED = parse_color("red")
YELLOW = parse_color("yellow")
GREEN = parse_color("green")
