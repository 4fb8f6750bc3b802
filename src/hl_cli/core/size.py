"""Byte size parsing and the size color rule."""

from __future__ import annotations

import re

from hl_cli.core.color import GREEN, RED, YELLOW, AnsiCode
from hl_cli.errors import IntParseError

KB = 1000
MB = KB * 1000
GB = MB * 1000
TB = GB * 1000
PB = TB * 1000

KIB = 1024
MIB = KIB * 1024
GIB = MIB * 1024
TIB = GIB * 1024
PIB = TIB * 1024

UNITS = {
    "b": 1,
    "k": KB,
    "kb": KB,
    "m": MB,
    "mb": MB,
    "g": GB,
    "gb": GB,
    "t": TB,
    "tb": TB,
    "p": PB,
    "pb": PB,
    "ki": KIB,
    "kib": KIB,
    "mi": MIB,
    "mib": MIB,
    "gi": GIB,
    "gib": GIB,
    "ti": TIB,
    "tib": TIB,
    "pi": PIB,
    "pib": PIB,
}

DEFAULT_YELLOW_SIZE = 20 * MB
DEFAULT_RED_SIZE = 100 * MB

_BYTES_RE = re.compile(r"\+?[0-9]+")
_NUMBER_RE = re.compile(r"[0-9.]*")
_SUFFIX_SKIP_RE = re.compile(r"[\s0-9.]*")


def parse_size(text: str) -> int:
    """Parse a byte quantity.

    A bare integer is a byte count. Otherwise a decimal number may be
    followed by a unit: decimal (k, m, g, t, p with an optional b) or binary
    (ki, mi, gi, ti, pi with an optional b), case-insensitive.

    Args:
        text: Size text like "52591", "126M" or "8.4 MiB"

    Returns:
        Number of bytes, truncated to an integer

    Raises:
        IntParseError: If the text is not a byte quantity

    Examples:
        >>> parse_size("131672735")
        131672735
        >>> parse_size("126M")
        126000000
    """
    if _BYTES_RE.fullmatch(text):
        return int(text)

    number = _NUMBER_RE.match(text).group()
    try:
        value = float(number)
    except ValueError:
        raise IntParseError(f"couldn't parse {text!r} into a byte size") from None

    suffix = text[_SUFFIX_SKIP_RE.match(text).end() :]
    multiplier = UNITS.get(suffix.lower())
    if multiplier is None:
        raise IntParseError(f"couldn't parse {suffix!r} into a known size unit")

    return int(value * multiplier)


def classify_size(
    size: int,
    red_size: int = DEFAULT_RED_SIZE,
    yellow_size: int = DEFAULT_YELLOW_SIZE,
) -> AnsiCode:
    """Pick red, yellow or green for a byte count.

    Thresholds are exclusive: a size equal to ``red_size`` is yellow.
    """
    if size > red_size:
        return RED
    if size > yellow_size:
        return YELLOW
    return GREEN


def classify(
    text: str,
    red_size: int = DEFAULT_RED_SIZE,
    yellow_size: int = DEFAULT_YELLOW_SIZE,
) -> AnsiCode:
    """Resolve the size color for a field's text.

    Args:
        text: Field text; surrounding whitespace is ignored
        red_size: Sizes above this are red
        yellow_size: Sizes above this (and not red) are yellow

    Returns:
        The red, yellow or green color

    Raises:
        IntParseError: If the text is not a byte quantity
    """
    return classify_size(parse_size(text.strip()), red_size, yellow_size)
