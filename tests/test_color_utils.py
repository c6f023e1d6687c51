"""Tests for lstar.color_utils module."""

import pytest

from lstar.color_types import RGBAColor
from lstar.color_utils import (
    format_color,
    format_color_output,
    parse_color,
    parse_hex_color,
    parse_hsl_color,
    parse_hsv_color,
    parse_rgb_color,
)


class TestParseHexColor:
    """Test the parse_hex_color function."""

    def test_valid_hex_uppercase(self):
        assert parse_hex_color("#FF0000") == (1.0, 0.0, 0.0, 1.0)

    def test_valid_hex_lowercase(self):
        assert parse_hex_color("#00ff00") == (0.0, 1.0, 0.0, 1.0)

    def test_valid_hex_with_whitespace(self):
        assert parse_hex_color("  #FFFFFF  ") == (1.0, 1.0, 1.0, 1.0)

    def test_valid_hex_with_alpha(self):
        result = parse_hex_color("#0000FF80")
        assert result[:3] == (0.0, 0.0, 1.0)
        assert abs(result[3] - 128 / 255) < 1e-12

    @pytest.mark.parametrize("value", ["FF0000", "#FF00", "#FF00000", "#GGGGGG", "#"])
    def test_invalid(self, value):
        assert parse_hex_color(value) is None


class TestParseRgbColor:
    """Test the parse_rgb_color function."""

    def test_valid_rgb_basic(self):
        assert parse_rgb_color("rgb(255, 0, 0)") == (1.0, 0.0, 0.0, 1.0)

    def test_valid_rgb_no_spaces(self):
        assert parse_rgb_color("rgb(0,255,0)") == (0.0, 1.0, 0.0, 1.0)

    def test_valid_rgba(self):
        assert parse_rgb_color("rgba(0, 0, 255, 0.5)") == (0.0, 0.0, 1.0, 0.5)
        assert parse_rgb_color("RGBA(0, 0, 255, .25)") == (0.0, 0.0, 1.0, 0.25)

    @pytest.mark.parametrize(
        "value",
        ["rgb(256, 0, 0)", "rgb(-1, 0, 0)", "rgb(255, 0)", "rgba(0, 0, 0, 1.5)", "rgb(1, 2, 3) x"],
    )
    def test_invalid(self, value):
        assert parse_rgb_color(value) is None


class TestParseCylindrical:
    """Test the parse_hsl_color and parse_hsv_color functions."""

    def test_hsl_red(self):
        assert parse_hsl_color("hsl(0, 100%, 50%)") == pytest.approx((1.0, 0.0, 0.0, 1.0))

    def test_hsv_blue(self):
        assert parse_hsv_color("hsv(240, 100%, 100%)") == pytest.approx((0.0, 0.0, 1.0, 1.0))

    @pytest.mark.parametrize(
        "value",
        ["hsl(361, 50%, 50%)", "hsl(180, 101%, 50%)", "hsl(180, 50%, 101%)", "hsl(180, 50, 50)"],
    )
    def test_hsl_invalid(self, value):
        assert parse_hsl_color(value) is None

    @pytest.mark.parametrize(
        "value", ["hsv(361, 50%, 50%)", "hsv(180, 101%, 50%)", "hsv(180, 50%, 101%)"]
    )
    def test_hsv_invalid(self, value):
        assert parse_hsv_color(value) is None


class TestParseColor:
    """Test the parse_color dispatcher."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("#FF0000", RGBAColor(1.0, 0.0, 0.0)),
            ("rgb(0, 255, 0)", RGBAColor(0.0, 1.0, 0.0)),
            ("rgba(0, 0, 255, 0.5)", RGBAColor(0.0, 0.0, 1.0, 0.5)),
            ("rgb(128, 128, 128)", RGBAColor.gray(128 / 255)),
        ],
    )
    def test_valid(self, value, expected):
        assert parse_color(value) == expected

    def test_cylindrical_formats(self):
        assert parse_color("hsl(120, 100%, 50%)").to_rgba() == pytest.approx((0.0, 1.0, 0.0, 1.0))
        assert parse_color("hsv(0, 0%, 100%)").to_rgba() == pytest.approx((1.0, 1.0, 1.0, 1.0))

    @pytest.mark.parametrize("value", ["invalid", "", "   ", "#GG0000", "hsl(361, 50%, 50%)"])
    def test_invalid_raises(self, value):
        with pytest.raises(ValueError, match="Invalid color format"):
            parse_color(value)


class TestFormatColor:
    """Test format_color and format_color_output."""

    def test_hex(self):
        assert format_color(RGBAColor(1.0, 0.5, 0.0), "hex") == "#FF8000"
        assert format_color(RGBAColor(1.0, 0.5, 0.0, 0.5), "hex") == "#FF800080"

    def test_rgb(self):
        assert format_color((1.0, 0.0, 0.0), "rgb") == "rgb(255, 0, 0)"
        assert format_color((1.0, 0.0, 0.0, 0.5), "rgb") == "rgba(255, 0, 0, 0.5)"

    def test_raw(self):
        assert format_color(RGBAColor(0.5, 0.25, 0.125), "raw") == "(0.5000, 0.2500, 0.1250)"
        assert (
            format_color(RGBAColor(0.5, 0.25, 0.125, 0.5), "raw")
            == "(0.5000, 0.2500, 0.1250, 0.5000)"
        )

    def test_unreadable_color_raises(self):
        with pytest.raises(ValueError):
            format_color(object())

    def test_format_color_output(self):
        colors = [RGBAColor(0, 0, 0), RGBAColor(1, 1, 1)]
        assert format_color_output(colors) == ["#000000", "#FFFFFF"]
        assert format_color_output([], "rgb") == []
