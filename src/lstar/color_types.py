"""Color representations understood by lstar.

Every operation in lstar reads colors through :func:`extract_rgba` and
builds results through :func:`make_rgba`, so any type can take part as long
as it implements the :class:`ColorLike` capability. Plain sequences of three
or four floats in [0, 1] are accepted too, and results come back in the same
shape as the input.

Hue/saturation/brightness conversions use colour-science's HSV model, with
hue normalized to [0, 1).
"""

import enum
import logging
import math
from dataclasses import dataclass
from typing import Any, Optional, Protocol, Sequence, runtime_checkable

import colour
import numpy as np

__all__ = [
    "ColorLike",
    "PerceptualColorMixin",
    "RGBAColor",
    "ContrastChoice",
    "extract_rgba",
    "make_rgba",
    "hsb_to_rgb",
    "make_hsba",
    "decompose_hsba",
]

logger = logging.getLogger(__name__)

RGBA = tuple[float, float, float, float]
HSBA = tuple[float, float, float, float]


class ContrastChoice(enum.Enum):
    """Which reference color of a contrast pair to use."""

    DARK = "dark"
    LIGHT = "light"


@runtime_checkable
class ColorLike(Protocol):
    """Capability for colors that convert to and from sRGB components."""

    def to_rgba(self) -> Optional[RGBA]:
        """Return sRGB (r, g, b, a) in [0, 1], or None if not expressible."""
        ...

    @classmethod
    def from_rgba(cls, r: float, g: float, b: float, a: float = 1.0) -> Any:
        ...


# Sequences that are never colors, even with three or four items
_NOT_COLORS = (str, bytes, bytearray, memoryview, range)


def _clamp(value: float) -> float:
    return min(max(float(value), 0.0), 1.0)


class PerceptualColorMixin:
    """Perceived lightness and contrast for any :class:`ColorLike` type.

    Inherit from this next to ``to_rgba`` / ``from_rgba`` and instances gain
    the lstar measurements as properties and methods. Results are built with
    the subclass's ``from_rgba``.
    """

    @property
    def relative_luminance(self) -> float:
        """Relative luminance in [0, 1].

        For how bright a color looks, prefer :attr:`perceived_lightness`;
        luminance measures physical light.
        """
        from .colors import relative_luminance_of

        return relative_luminance_of(self)

    @property
    def perceived_lightness(self) -> float:
        """CIE L* in [0, 100]: 0 is black, 50 middle gray, 100 white."""
        from .colors import perceived_lightness

        return perceived_lightness(self.relative_luminance)

    @property
    def is_perceptually_light(self) -> bool:
        from .colors import is_light

        return is_light(self.perceived_lightness)

    @property
    def is_perceptually_dark(self) -> bool:
        from .colors import is_dark

        return is_dark(self.perceived_lightness)

    def perceived_contrast(self, other: Any) -> float:
        """Signed L* difference, positive when this color is lighter."""
        from .colors import perceived_contrast, perceived_lightness_of

        return perceived_contrast(
            self.perceived_lightness, perceived_lightness_of(other)
        )

    def contrasting_color(self, *candidates: Any, cache: Any = None) -> Any:
        """Return the candidate (or cached black/white) contrasting most."""
        from .contrast import contrasting_color

        return contrasting_color(self, *candidates, cache=cache)

    def with_perceived_lightness(self, lightness: float) -> Any:
        from .lightness import with_perceived_lightness

        return with_perceived_lightness(self, lightness)

    def adjusting_perceived_lightness(self, amount: float) -> Any:
        from .lightness import adjust_perceived_lightness

        return adjust_perceived_lightness(self, amount)


@dataclass(frozen=True)
class RGBAColor(PerceptualColorMixin):
    """Immutable sRGB color with straight alpha, components in [0, 1]."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    def __post_init__(self) -> None:
        # frozen dataclass, so write through object.__setattr__
        for name in ("red", "green", "blue", "alpha"):
            object.__setattr__(self, name, _clamp(getattr(self, name)))

    def to_rgba(self) -> RGBA:
        return (self.red, self.green, self.blue, self.alpha)

    @classmethod
    def from_rgba(
        cls, r: float, g: float, b: float, a: float = 1.0
    ) -> "RGBAColor":
        return cls(r, g, b, a)

    @classmethod
    def from_hsba(
        cls, h: float, s: float, b: float, a: float = 1.0
    ) -> "RGBAColor":
        r, g, bl = hsb_to_rgb(h, s, b)
        return cls(r, g, bl, a)

    @classmethod
    def gray(cls, white: float, alpha: float = 1.0) -> "RGBAColor":
        return cls(white, white, white, alpha)

    @classmethod
    def from_hex(cls, value: str) -> "RGBAColor":
        """Build a color from ``#RRGGBB`` or ``#RRGGBBAA``."""
        from .color_utils import parse_hex_color

        rgba = parse_hex_color(value)
        if rgba is None:
            raise ValueError(f"Invalid hex color: '{value}'")
        return cls(*rgba)

    @property
    def hex(self) -> str:
        from .color_utils import format_color

        return format_color(self, "hex")


def extract_rgba(color: Any) -> Optional[RGBA]:
    """Read sRGB (r, g, b, a) from a color, or None if it cannot be read.

    Components are clamped to [0, 1], matching RGBAColor.
    """
    if isinstance(color, ColorLike):
        try:
            components = color.to_rgba()
        except (TypeError, ValueError) as e:
            logger.debug("to_rgba() failed for %r: %s", color, e)
            return None
    elif isinstance(color, (Sequence, np.ndarray)) and not isinstance(color, _NOT_COLORS):
        components = color
    else:
        return None

    if components is None:
        return None
    try:
        values = [float(c) for c in components]
    except (TypeError, ValueError):
        return None

    if len(values) == 3:
        values.append(1.0)
    if len(values) != 4 or not all(math.isfinite(v) for v in values):
        return None
    r, g, b, a = (_clamp(v) for v in values)
    return (r, g, b, a)


def make_rgba(like: Any, r: float, g: float, b: float, a: float = 1.0) -> Any:
    """Build a color from sRGB components in the representation of ``like``."""
    r, g, b, a = _clamp(r), _clamp(g), _clamp(b), _clamp(a)
    if isinstance(like, type):
        if hasattr(like, "from_rgba"):
            return like.from_rgba(r, g, b, a)
        if like is np.ndarray:
            return np.array([r, g, b, a], dtype=float)
        return like((r, g, b, a))
    if isinstance(like, ColorLike):
        return type(like).from_rgba(r, g, b, a)
    if isinstance(like, np.ndarray):
        values = [r, g, b, a] if like.shape[-1] == 4 else [r, g, b]
        return np.array(values, dtype=float)
    if isinstance(like, list):
        return [r, g, b] if len(like) == 3 else [r, g, b, a]
    if isinstance(like, Sequence) and len(like) == 3:
        return (r, g, b)
    return (r, g, b, a)


def hsb_to_rgb(h: float, s: float, b: float) -> tuple[float, float, float]:
    rgb = colour.HSV_to_RGB(np.array([h, s, b], dtype=float))
    return (_clamp(rgb[0]), _clamp(rgb[1]), _clamp(rgb[2]))


def make_hsba(like: Any, h: float, s: float, b: float, a: float = 1.0) -> Any:
    """Build a color from hue/saturation/brightness in ``like``'s representation."""
    r, g, bl = hsb_to_rgb(h, s, b)
    return make_rgba(like, r, g, bl, a)


def decompose_hsba(color: Any) -> Optional[HSBA]:
    """Split a color into hue, saturation, brightness and alpha."""
    rgba = extract_rgba(color)
    if rgba is None:
        return None
    r, g, b, a = rgba
    h, s, v = colour.RGB_to_HSV(np.array([r, g, b], dtype=float))
    return (float(h), float(s), float(v), a)
