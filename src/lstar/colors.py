"""Perceptual color measurements for lstar.

This module converts sRGB colors into the quantities lstar reasons about:
relative luminance (physical light) and CIE L* perceived lightness (how bright
a color looks to a human observer). Raw sRGB channel values are not linear in
light intensity, and light intensity is not linear in perceived brightness, so
both steps are needed before two colors can be compared meaningfully.

Pipeline:
    sRGB component -> linear sRGB -> relative luminance (Y) -> L*

Key Features:
    - IEC 61966-2-1 sRGB linearization (0.04045 threshold)
    - ITU-R BT.709 luminance weights
    - Piecewise CIE L* with the exact 216/24389 and 24389/27 constants
    - Closed-form inverse from L* to an sRGB gray level

All functions are pure and total. Colors that cannot be decoded into sRGB
components measure as luminance 0, exactly like black.

Example:
    >>> from lstar.colors import perceived_lightness, relative_luminance
    >>> round(perceived_lightness(relative_luminance(0.5, 0.5, 0.5)), 1)
    53.4
"""

import logging
from typing import Any

from .color_types import extract_rgba
from .config import MIDDLE_LIGHTNESS

__all__ = [
    "to_linear",
    "to_srgb",
    "relative_luminance",
    "relative_luminance_of",
    "perceived_lightness",
    "perceived_lightness_of",
    "lightness_to_luminance",
    "gray_for_lightness",
    "is_light",
    "is_dark",
    "perceived_contrast",
]

logger = logging.getLogger(__name__)

# CIE constants, kept as exact ratios
CIE_EPSILON = 216 / 24389
CIE_KAPPA = 24389 / 27


def to_linear(value: float) -> float:
    """Convert an sRGB component to linear sRGB.

    Args:
        value: sRGB component in [0, 1]

    Returns:
        Linear-light component in [0, 1]

    Algorithm:
        - For v <= 0.04045: v / 12.92
        - Otherwise: ((v + 0.055) / 1.055) ** 2.4
    """
    if value <= 0.04045:
        return value / 12.92
    return ((value + 0.055) / 1.055) ** 2.4


def to_srgb(linear: float) -> float:
    """Encode a linear-light value as an sRGB component (inverse of to_linear)."""
    if linear <= 0.0031308:
        return 12.92 * linear
    return 1.055 * linear ** (1 / 2.4) - 0.055


def relative_luminance(red: float, green: float, blue: float) -> float:
    """Calculate relative luminance from sRGB components.

    Each component is linearized and weighted by the eye's sensitivity to
    it: R=21.26%, G=71.52%, B=7.22%.

    Args:
        red: Red component in [0, 1]
        green: Green component in [0, 1]
        blue: Blue component in [0, 1]

    Returns:
        float: Relative luminance in [0, 1], where 0.0 is black and 1.0 white.
            This is physical light, not perceived brightness; use
            perceived_lightness() for comparisons people will see.

    Examples:
        >>> relative_luminance(1.0, 0.0, 0.0)
        0.2126
    """
    return (
        0.2126 * to_linear(red)
        + 0.7152 * to_linear(green)
        + 0.0722 * to_linear(blue)
    )


def relative_luminance_of(color: Any) -> float:
    """Calculate relative luminance of any color lstar can read.

    Returns 0 if the color cannot be expressed as sRGB components. Callers
    cannot tell such colors apart from black.
    """
    rgba = extract_rgba(color)
    if rgba is None:
        logger.debug("No sRGB components for %r, using luminance 0", color)
        return 0.0
    r, g, b, _ = rgba
    return relative_luminance(r, g, b)


def perceived_lightness(luminance: float) -> float:
    """Convert relative luminance to CIE L* perceived lightness.

    L* is perceptually uniform: a change of 1.0 is about equally noticeable
    anywhere on the scale. 0 is black, 50 perceptual middle gray, 100 white.

    The formula is piecewise so the curve keeps a finite slope near black:
        - For Y <= 216/24389: L* = Y * 24389/27
        - Otherwise: L* = 116 * Y^(1/3) - 16

    Examples:
        >>> perceived_lightness(0.0)
        0.0
        >>> round(perceived_lightness(0.18), 1)
        49.5
    """
    if luminance <= CIE_EPSILON:
        return luminance * CIE_KAPPA
    return luminance ** (1 / 3) * 116 - 16


def perceived_lightness_of(color: Any) -> float:
    return perceived_lightness(relative_luminance_of(color))


def lightness_to_luminance(lightness: float) -> float:
    """Invert perceived_lightness(): recover relative luminance from L*."""
    if lightness > 8.0:
        t = (lightness + 16.0) / 116.0
        return t**3
    return lightness * (3.0 / 29.0) ** 3


def gray_for_lightness(lightness: float) -> float:
    """Return the sRGB gray level, clamped to [0, 1], whose L* is ``lightness``."""
    gray = to_srgb(lightness_to_luminance(lightness))
    return min(max(gray, 0.0), 1.0)


def is_light(lightness: float) -> bool:
    """True if L* is strictly above middle gray. Exactly 50 is neither."""
    return lightness > MIDDLE_LIGHTNESS


def is_dark(lightness: float) -> bool:
    """True if L* is strictly below middle gray. Exactly 50 is neither."""
    return lightness < MIDDLE_LIGHTNESS


def perceived_contrast(lhs_lightness: float, rhs_lightness: float) -> float:
    """Signed difference in perceived lightness.

    Positive when the first color is lighter. Range is [-100, 100].
    """
    return lhs_lightness - rhs_lightness
