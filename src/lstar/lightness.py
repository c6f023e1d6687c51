"""Perceived lightness retargeting.

Finds a color with a requested CIE L* while keeping its hue and alpha. Gray
colors are solved in closed form. Chromatic colors are searched in HSB
space, in two phases:

1. Binary search on brightness alone, holding hue and saturation.
2. If brightness cannot reach the target (saturated hues only span part of
   the L* range at a fixed saturation), a local search over brightness and
   saturation together, starting from the best brightness found.

Results land within ``LIGHTNESS_TOLERANCE`` of the target whenever the
search can reach it; otherwise the closest color found is returned. Colors
that cannot be decomposed come back unchanged.

Complexity: at most MAX_BRIGHTNESS_ITERATIONS + MAX_FINETUNE_ITERATIONS
rounds, each a constant number of conversions.
"""

import logging
import math
from typing import Any

from .color_types import decompose_hsba, extract_rgba, hsb_to_rgb, make_hsba, make_rgba
from .colors import (
    gray_for_lightness,
    perceived_lightness,
    perceived_lightness_of,
    relative_luminance,
)
from .config import (
    LIGHTNESS_TOLERANCE,
    MAX_BRIGHTNESS_ITERATIONS,
    MAX_FINETUNE_ITERATIONS,
)

__all__ = ["with_perceived_lightness", "adjust_perceived_lightness"]

logger = logging.getLogger(__name__)


def _clamp_lightness(value: float) -> float:
    return min(max(value, 0.0), 100.0)


def _lightness_at(hue: float, saturation: float, brightness: float) -> float:
    r, g, b = hsb_to_rgb(hue, saturation, brightness)
    return perceived_lightness(relative_luminance(r, g, b))


def _search_brightness(
    hue: float, saturation: float, brightness: float, target: float
) -> tuple[float, float]:
    """Bisect brightness toward ``target``.

    Returns:
        (best brightness, |L* - target| at that brightness)
    """
    best_brightness = brightness
    best_diff = abs(_lightness_at(hue, saturation, brightness) - target)

    low, high = 0.0, 1.0
    for _ in range(MAX_BRIGHTNESS_ITERATIONS):
        mid = (low + high) / 2
        test_lightness = _lightness_at(hue, saturation, mid)
        diff = abs(test_lightness - target)

        if diff < best_diff:
            best_diff = diff
            best_brightness = mid

        if diff < LIGHTNESS_TOLERANCE:
            break

        if test_lightness < target:
            low = mid
        else:
            high = mid

    return best_brightness, best_diff


def _refine_brightness_saturation(
    hue: float,
    saturation: float,
    brightness: float,
    best_diff: float,
    target: float,
) -> tuple[float, float, float]:
    """Local search over brightness and saturation together.

    Each round scores a 4x4 grid of signed steps around the current point,
    with a step size that shrinks as the error does, plus one
    saturation-only move: halving saturation when too dark, scaling it by
    1.5 when too light. The search moves only to a candidate that beats the
    current point.

    Returns:
        (best brightness, best saturation, |L* - target| at that point)
    """
    best_brightness = brightness
    best_saturation = saturation

    for _ in range(MAX_FINETUNE_ITERATIONS):
        current_lightness = _lightness_at(hue, saturation, brightness)
        current_diff = abs(current_lightness - target)
        if current_diff < LIGHTNESS_TOLERANCE:
            break

        big_step = min(0.1, current_diff / 50.0)
        small_step = big_step / 5.0
        steps = (big_step, small_step, -small_step, -big_step)

        # (diff, brightness, saturation)
        candidates: list[tuple[float, float, float]] = []
        for b_step in steps:
            new_brightness = brightness + b_step
            if not 0.0 <= new_brightness <= 1.0:
                continue
            for s_step in steps:
                new_saturation = saturation + s_step
                if 0.0 <= new_saturation <= 1.0:
                    diff = abs(_lightness_at(hue, new_saturation, new_brightness) - target)
                    candidates.append((diff, new_brightness, new_saturation))

        if current_lightness < target:
            new_saturation = saturation * 0.5
        else:
            new_saturation = min(saturation * 1.5, 1.0)
        diff = abs(_lightness_at(hue, new_saturation, brightness) - target)
        candidates.append((diff, brightness, new_saturation))

        diff, new_brightness, new_saturation = min(candidates, key=lambda c: c[0])
        if diff >= current_diff:
            # Nothing improves, and the next round would score the same grid
            break

        brightness, saturation = new_brightness, new_saturation
        if diff < best_diff:
            best_diff = diff
            best_brightness = new_brightness
            best_saturation = new_saturation

    return best_brightness, best_saturation, best_diff


def with_perceived_lightness(color: Any, lightness: float) -> Any:
    """Return ``color`` with its perceived lightness set to ``lightness``.

    Args:
        color: Any color lstar can read (ColorLike, or 3/4 float sequence)
        lightness: Target L*; clamped to [0, 100]

    Returns:
        A color of the same representation, same hue and alpha, with L*
        within 0.1 of the target when reachable. The input is returned
        unchanged if it cannot be decomposed into sRGB or HSB.

    Example:
        >>> from lstar.color_types import RGBAColor
        >>> adjusted = with_perceived_lightness(RGBAColor(1.0, 0.0, 0.0), 75)
        >>> abs(adjusted.perceived_lightness - 75) < 0.1
        True
    """
    if math.isnan(lightness):
        logger.debug("NaN target lightness, returning %r unchanged", color)
        return color
    target = _clamp_lightness(lightness)

    rgba = extract_rgba(color)
    if rgba is None:
        logger.debug("Cannot read sRGB components of %r, returning it unchanged", color)
        return color

    red, green, blue, alpha = rgba
    if red == green == blue:
        gray = gray_for_lightness(target)
        return make_rgba(color, gray, gray, gray, alpha)

    hsba = decompose_hsba(color)
    if hsba is None:
        return color
    hue, saturation, brightness, alpha = hsba

    best_brightness, best_diff = _search_brightness(hue, saturation, brightness, target)
    if best_diff < LIGHTNESS_TOLERANCE:
        return make_hsba(color, hue, saturation, best_brightness, alpha)

    best_brightness, best_saturation, best_diff = _refine_brightness_saturation(
        hue, saturation, best_brightness, best_diff, target
    )
    if best_diff >= LIGHTNESS_TOLERANCE:
        logger.debug(
            "Lightness search for %r ended %.4f from target %.4f",
            color,
            best_diff,
            target,
        )
    return make_hsba(color, hue, best_saturation, best_brightness, alpha)


def adjust_perceived_lightness(color: Any, amount: float) -> Any:
    """Shift perceived lightness by ``amount`` L* units.

    ``amount`` is clamped to [-100, 100] and the resulting target to
    [0, 100] before delegating to with_perceived_lightness().
    """
    clamped_amount = min(max(amount, -100.0), 100.0)
    current = perceived_lightness_of(color)
    return with_perceived_lightness(color, _clamp_lightness(current + clamped_amount))
