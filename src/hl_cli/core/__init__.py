"""Core functionality: color parsing, field splitting and line coloring."""

from hl_cli.core.binding import FieldColorBinding, parse_binding
from hl_cli.core.color import AnsiCode, Color, ColorParser, SizeConditional, parse_color, render
from hl_cli.core.fields import join_fields, split_fields
from hl_cli.core.processor import LineProcessor
from hl_cli.core.size import classify, parse_size

__all__ = [
    "AnsiCode",
    "SizeConditional",
    "Color",
    "ColorParser",
    "parse_color",
    "render",
    "FieldColorBinding",
    "parse_binding",
    "split_fields",
    "join_fields",
    "classify",
    "parse_size",
    "LineProcessor",
]
