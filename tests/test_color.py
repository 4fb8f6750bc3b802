"""Tests for the color module."""

import pytest

from hl_cli.core.color import (
    AnsiCode,
    ColorParser,
    SizeConditional,
    parse_color,
    parse_int,
    render,
)
from hl_cli.errors import AnsiFormatError, IntParseError, ParseError, UnknownColor


class TestNamedColors:
    """Tests for the standard color names."""

    @pytest.mark.parametrize(
        ("name", "code"),
        [
            ("default", "\x1b[39m"),
            ("black", "\x1b[30m"),
            ("red", "\x1b[31m"),
            ("green", "\x1b[32m"),
            ("yellow", "\x1b[33m"),
            ("blue", "\x1b[34m"),
            ("magenta", "\x1b[35m"),
            ("cyan", "\x1b[36m"),
            ("white", "\x1b[37m"),
        ],
    )
    def test_named_color(self, name, code):
        """Test that each name maps to its foreground sequence."""
        assert parse_color(name) == AnsiCode(code)

    def test_names_are_case_sensitive(self):
        """Test that capitalized names are unknown."""
        with pytest.raises(UnknownColor):
            parse_color("Red")


class TestFixedColor:
    """Tests for fixed(N) 256-color palette entries."""

    def test_fixed(self):
        """Test parsing a palette index."""
        color = parse_color("fixed(200)")

        assert color == AnsiCode("\x1b[38;5;200m")
        assert "200" in render(color)

    def test_fixed_bad_number(self):
        """Test that a non-numeric index is an integer error."""
        with pytest.raises(IntParseError):
            parse_color("fixed(abc)")

    def test_fixed_negative(self):
        """Test that a negative index is an integer error."""
        with pytest.raises(IntParseError):
            parse_color("fixed(-1)")

    def test_fixed_empty(self):
        """Test that an empty index is an integer error."""
        with pytest.raises(IntParseError):
            parse_color("fixed()")

    def test_fixed_unbalanced(self):
        """Test that a missing closing paren is an unknown color."""
        with pytest.raises(UnknownColor):
            parse_color("fixed(200")


class TestRgbColor:
    """Tests for rgb(R,G,B) truecolor."""

    def test_rgb(self):
        """Test parsing a truecolor triple."""
        code = render(parse_color("rgb(1,2,3)"))

        assert code == "\x1b[38;2;1;2;3m"
        assert code.endswith("1;2;3m")

    def test_rgb_components_in_order(self):
        """Test that the components appear in order."""
        code = render(parse_color("rgb(10,20,30)"))

        assert code.index("10") < code.index("20") < code.index("30")

    def test_rgb_wrong_comma_count(self):
        """Test that anything but three components is an unknown color."""
        with pytest.raises(UnknownColor):
            parse_color("rgb(1,2)")
        with pytest.raises(UnknownColor):
            parse_color("rgb(1,2,3,4)")

    def test_rgb_bad_component(self):
        """Test that a malformed component is an integer error."""
        with pytest.raises(IntParseError):
            parse_color("rgb(1,x,3)")

    def test_rgb_spaces_rejected(self):
        """Test that spaces around components are not accepted."""
        with pytest.raises(IntParseError):
            parse_color("rgb(1, 2, 3)")


class TestSizeColor:
    """Tests for the size color."""

    def test_size(self):
        """Test that size parses to the conditional marker."""
        assert parse_color("size") == SizeConditional()

    def test_size_disabled(self):
        """Test that size is unknown when the capability is off."""
        with pytest.raises(UnknownColor):
            ColorParser(size_color=False).parse("size")

    def test_size_not_renderable(self):
        """Test that rendering the size marker fails distinctly."""
        with pytest.raises(AnsiFormatError):
            render(SizeConditional())


class TestUnknownColor:
    """Tests for unrecognized color strings."""

    def test_unknown(self):
        """Test that an unknown name is reported with its text."""
        with pytest.raises(UnknownColor) as exc_info:
            parse_color("notacolor")

        assert exc_info.value.color == "notacolor"
        assert str(exc_info.value) == "unknown color notacolor"

    def test_empty(self):
        """Test that an empty string is unknown."""
        with pytest.raises(UnknownColor):
            parse_color("")

    def test_is_parse_error(self):
        """Test the error hierarchy."""
        with pytest.raises(ParseError):
            parse_color("purple")


class TestParseInt:
    """Tests for parse_int function."""

    def test_unsigned(self):
        """Test plain digits."""
        assert parse_int("42") == 42
        assert parse_int("+7") == 7

    def test_signed(self):
        """Test signed values."""
        assert parse_int("-3", signed=True) == -3

    def test_rejects_what_int_accepts(self):
        """Test that whitespace and underscores are rejected."""
        for text in (" 1", "1_000", "", "-1", "١"):
            with pytest.raises(IntParseError):
                parse_int(text)
