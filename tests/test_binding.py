"""Tests for the binding module."""

import pytest

from hl_cli.core.binding import FieldColorBinding, parse_binding
from hl_cli.core.color import AnsiCode, ColorParser, SizeConditional
from hl_cli.errors import IntParseError, MissingColonField, UnknownColor


class TestParseBinding:
    """Tests for parse_binding function."""

    def test_simple_binding(self):
        """Test parsing field and named color."""
        binding = parse_binding("1:green")

        assert binding == FieldColorBinding(field=1, color=AnsiCode("\x1b[32m"))

    def test_size_binding(self):
        """Test binding the size color."""
        assert parse_binding("1:size").color == SizeConditional()

    def test_splits_on_first_colon(self):
        """Test that later colons belong to the color."""
        with pytest.raises(UnknownColor) as exc_info:
            parse_binding("2:red:bold")

        assert exc_info.value.color == "red:bold"

    def test_rgb_binding(self):
        """Test that commas and parens in the color are kept."""
        binding = parse_binding("0:rgb(1,2,3)")

        assert binding.field == 0
        assert binding.color == AnsiCode("\x1b[38;2;1;2;3m")

    def test_missing_colon(self):
        """Test that a binding without a colon is rejected."""
        with pytest.raises(MissingColonField):
            parse_binding("1green")

    def test_negative_field_accepted(self):
        """Test that negative fields parse."""
        assert parse_binding("-1:red").field == -1

    def test_bad_field(self):
        """Test that a non-integer field is rejected."""
        with pytest.raises(IntParseError):
            parse_binding("x:red")
        with pytest.raises(IntParseError):
            parse_binding(":red")

    def test_empty_color(self):
        """Test that an empty color is unknown."""
        with pytest.raises(UnknownColor):
            parse_binding("1:")

    def test_custom_parser(self):
        """Test that the color parser is used for the color half."""
        with pytest.raises(UnknownColor):
            parse_binding("1:size", parser=ColorParser(size_color=False))
