"""Optimal contrasting color selection.

Contrast here is the absolute difference in CIE L* between two colors, which
is perceptually uniform across the lightness range, unlike luminance ratios.
"""

from typing import Any, Optional, Sequence

from .color_types import extract_rgba
from .colors import perceived_contrast, perceived_lightness_of
from .contrast_cache import ContrastPairCache, shared_cache

__all__ = ["find_optimal_contrasting_color", "contrasting_color"]


def find_optimal_contrasting_color(
    base_color: Any,
    candidates: Sequence[Any],
    cache: ContrastPairCache,
    base_lightness: float,
) -> Any:
    """Pick the color with the largest perceived contrast against a base.

    Args:
        base_color: Color to contrast against
        candidates: Colors to choose from; empty to use the cache's
            dark/light pair
        cache: Contrast pair cache consulted when there are no candidates
        base_lightness: L* of ``base_color``

    Returns:
        The candidate with maximal |L*(base) - L*(candidate)|. Ties go to
        the earliest candidate. With no candidates, the cache's dark color
        for a light base and its light color otherwise.

    Example:
        >>> from lstar.color_types import RGBAColor
        >>> white = RGBAColor(1, 1, 1)
        >>> red, green, blue = RGBAColor(1, 0, 0), RGBAColor(0, 1, 0), RGBAColor(0, 0, 1)
        >>> cache = ContrastPairCache(RGBAColor(0, 0, 0), white)
        >>> find_optimal_contrasting_color(white, [red, green, blue], cache, 100.0) == blue
        True
    """
    if len(candidates) == 0:
        return cache.contrasting_color_for(base_color, base_lightness)

    # max() keeps the first of equal keys
    return max(
        candidates,
        key=lambda c: abs(perceived_contrast(base_lightness, perceived_lightness_of(c))),
    )


def _representation(color: Any) -> type:
    if extract_rgba(color) is None:
        return tuple
    return type(color)


def contrasting_color(
    base_color: Any, *candidates: Any, cache: Optional[ContrastPairCache] = None
) -> Any:
    """Convenience wrapper computing the base lightness itself.

    Without an explicit ``cache``, the shared black/white cache for the base
    color's representation is used.
    """
    if cache is None:
        cache = shared_cache(_representation(base_color))
    return find_optimal_contrasting_color(
        base_color, list(candidates), cache, perceived_lightness_of(base_color)
    )
