"""Exception types raised while parsing configuration and processing lines."""

from __future__ import annotations


class HlError(Exception):
    """Base class for all highlighter errors."""


class ParseError(HlError):
    """A configuration string could not be parsed."""


class UnknownColor(ParseError):
    """The color description matches no known color."""

    def __init__(self, color: str) -> None:
        super().__init__(f"unknown color {color}")
        self.color = color


class MissingColonField(ParseError):
    """A field binding has no ``:`` between field and color."""

    def __init__(self) -> None:
        super().__init__("missing : between field and color")


class IntParseError(ParseError):
    """A number (field index, color component or byte size) is malformed."""


class AnsiFormatError(ParseError):
    """A color cannot be rendered as an escape sequence."""


class SkipPatternNotFound(HlError):
    """A line does not contain the configured skip pattern."""

    def __init__(self, pattern: str) -> None:
        super().__init__(f"skip pattern {pattern!r} not found")
        self.pattern = pattern
