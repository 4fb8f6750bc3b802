"""Field to color bindings given as ``FIELD:COLOR``."""

from __future__ import annotations

from dataclasses import dataclass

from hl_cli.core.color import Color, ColorParser, parse_int
from hl_cli.errors import MissingColonField


@dataclass(frozen=True)
class FieldColorBinding:
    """A color to apply to the field at a given position.

    Attributes:
        field: 0-based field position; negative positions never match
        color: Color applied to the field
    """

    field: int
    color: Color


def parse_binding(spec: str, parser: ColorParser | None = None) -> FieldColorBinding:
    """Parse a ``FIELD:COLOR`` binding.

    Only the first colon separates the field from the color.

    Args:
        spec: Binding string like "1:red" or "0:rgb(10,20,30)"
        parser: Color parser to use (default: one with the size color enabled)

    Returns:
        FieldColorBinding

    Raises:
        MissingColonField: If there is no colon
        IntParseError: If the field is not an integer
        UnknownColor: If the color is not recognized
    """
    field, sep, color = spec.partition(":")
    if not sep:
        raise MissingColonField()

    parser = parser or ColorParser()
    return FieldColorBinding(field=parse_int(field, signed=True), color=parser.parse(color))
