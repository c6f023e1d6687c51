"""lstar - Perceived lightness (CIE L*) and contrast for sRGB colors"""

__version__ = "0.1.0"

from .color_types import ColorLike, ContrastChoice, PerceptualColorMixin, RGBAColor
from .color_utils import format_color_output, parse_color
from .colors import (
    is_dark,
    is_light,
    perceived_contrast,
    perceived_lightness,
    relative_luminance,
    relative_luminance_of,
    to_linear,
)
from .contrast import contrasting_color, find_optimal_contrasting_color
from .contrast_cache import ContrastPairCache, shared_cache
from .lightness import adjust_perceived_lightness, with_perceived_lightness

__all__ = [
    "ColorLike",
    "ContrastChoice",
    "PerceptualColorMixin",
    "RGBAColor",
    "to_linear",
    "relative_luminance",
    "relative_luminance_of",
    "perceived_lightness",
    "is_light",
    "is_dark",
    "perceived_contrast",
    "with_perceived_lightness",
    "adjust_perceived_lightness",
    "find_optimal_contrasting_color",
    "contrasting_color",
    "ContrastPairCache",
    "shared_cache",
    "parse_color",
    "format_color_output",
]
