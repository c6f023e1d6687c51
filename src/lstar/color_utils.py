"""Color parsing and formatting utilities for lstar."""

import re
from typing import Any

import colour
import numpy as np

from .color_types import RGBA, RGBAColor, extract_rgba

__all__ = [
    "parse_hex_color",
    "parse_rgb_color",
    "parse_hsl_color",
    "parse_hsv_color",
    "parse_color",
    "format_color",
    "format_color_output",
]

FORMAT_TYPES = ("hex", "rgb", "raw")


def parse_hex_color(color_str: str) -> RGBA | None:
    """Parse hexadecimal color format #RRGGBB or #RRGGBBAA."""
    color_str = color_str.strip()
    if not color_str.startswith("#"):
        return None

    hex_str = color_str[1:]
    if len(hex_str) not in (6, 8):
        return None

    try:
        values = [int(hex_str[i : i + 2], 16) / 255.0 for i in range(0, len(hex_str), 2)]
    except ValueError:
        return None

    if len(values) == 3:
        values.append(1.0)
    r, g, b, a = values
    return (r, g, b, a)


def parse_rgb_color(color_str: str) -> RGBA | None:
    """Parse RGB color format rgb(R, G, B) or rgba(R, G, B, A).

    R, G and B are integers in [0, 255]; A is a float in [0, 1].
    """
    pattern = (
        r"rgba?\s*\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*"
        r"(?:,\s*(\d+(?:\.\d+)?|\.\d+)\s*)?\)"
    )
    match = re.fullmatch(pattern, color_str.strip(), re.IGNORECASE)

    if not match:
        return None

    try:
        r = int(match.group(1))
        g = int(match.group(2))
        b = int(match.group(3))
        a = float(match.group(4)) if match.group(4) is not None else 1.0

        if not all(0 <= val <= 255 for val in [r, g, b]) or not 0.0 <= a <= 1.0:
            return None

        return (r / 255.0, g / 255.0, b / 255.0, a)
    except ValueError:
        return None


def _parse_cylindrical(color_str: str, prefix: str) -> tuple[float, float, float] | None:
    pattern = (
        prefix + r"\s*\(\s*(\d+(?:\.\d+)?)\s*,\s*"
        r"(\d+(?:\.\d+)?)\s*%\s*,\s*(\d+(?:\.\d+)?)\s*%\s*\)"
    )
    match = re.fullmatch(pattern, color_str.strip(), re.IGNORECASE)

    if not match:
        return None

    h = float(match.group(1))
    s = float(match.group(2))
    third = float(match.group(3))

    if not (0 <= h <= 360 and 0 <= s <= 100 and 0 <= third <= 100):
        return None
    return (h / 360, s / 100, third / 100)


def parse_hsl_color(color_str: str) -> RGBA | None:
    """Parse HSL color format hsl(H, S%, L%)."""
    hsl = _parse_cylindrical(color_str, "hsl")
    if hsl is None:
        return None

    try:
        rgb = colour.HSL_to_RGB(np.array(hsl))
        return (float(rgb[0]), float(rgb[1]), float(rgb[2]), 1.0)
    except (ValueError, AttributeError):
        return None


def parse_hsv_color(color_str: str) -> RGBA | None:
    """Parse HSV color format hsv(H, S%, V%)."""
    hsv = _parse_cylindrical(color_str, "hsv")
    if hsv is None:
        return None

    try:
        rgb = colour.HSV_to_RGB(np.array(hsv))
        return (float(rgb[0]), float(rgb[1]), float(rgb[2]), 1.0)
    except (ValueError, AttributeError):
        return None


def parse_color(color_str: str) -> RGBAColor:
    """Parse a color string into an RGBAColor.

    Raises:
        ValueError: If no supported format matches
    """
    color_str = color_str.strip()

    # Try each format
    parsers = [parse_hex_color, parse_rgb_color, parse_hsl_color, parse_hsv_color]

    for parser in parsers:
        result = parser(color_str)
        if result is not None:
            return RGBAColor(*result)

    raise ValueError(
        f"Invalid color format: '{color_str}'. "
        "Supported formats: #RRGGBB, #RRGGBBAA, rgb(R,G,B), rgba(R,G,B,A), "
        "hsl(H,S%,L%), hsv(H,S%,V%)"
    )


def format_color(color: Any, format_type: str = "hex") -> str:
    """Format a single color. Alpha is shown only when it is not 1."""
    rgba = extract_rgba(color)
    if rgba is None:
        raise ValueError(f"Cannot format color: {color!r}")
    r, g, b, a = rgba
    opaque = a >= 1.0

    if format_type == "hex":
        r_int, g_int, b_int, a_int = (int(round(c * 255)) for c in rgba)
        if opaque:
            return f"#{r_int:02X}{g_int:02X}{b_int:02X}"
        return f"#{r_int:02X}{g_int:02X}{b_int:02X}{a_int:02X}"
    elif format_type == "rgb":
        r_int, g_int, b_int = (int(round(c * 255)) for c in (r, g, b))
        if opaque:
            return f"rgb({r_int}, {g_int}, {b_int})"
        return f"rgba({r_int}, {g_int}, {b_int}, {a:g})"
    else:  # raw
        if opaque:
            return f"({r:.4f}, {g:.4f}, {b:.4f})"
        return f"({r:.4f}, {g:.4f}, {b:.4f}, {a:.4f})"


def format_color_output(colors: list[Any], format_type: str = "hex") -> list[str]:
    """Format each color with format_color()."""
    return [format_color(color, format_type) for color in colors]
