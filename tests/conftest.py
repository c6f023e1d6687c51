"""Test configuration and fixtures for lstar tests."""

import pytest

from lstar.color_types import RGBAColor, decompose_hsba
from lstar.colors import perceived_lightness_of
from lstar.contrast_cache import ContrastPairCache, reset_shared_caches


class Palette:
    """Named colors shared across the test modules."""

    black = RGBAColor(0.0, 0.0, 0.0)
    white = RGBAColor(1.0, 1.0, 1.0)
    red = RGBAColor(1.0, 0.0, 0.0)
    green = RGBAColor(0.0, 1.0, 0.0)
    blue = RGBAColor(0.0, 0.0, 1.0)
    gray = RGBAColor.gray(0.5)

    middle_gray = RGBAColor.gray(0.5)
    just_below_perceptual_middle_gray = RGBAColor.gray(0.466326)
    just_above_perceptual_middle_gray = RGBAColor.gray(0.466327)

    half_alpha_middle_gray = RGBAColor.gray(0.5, 0.5)
    quarter_alpha_middle_gray = RGBAColor.gray(0.5, 0.25)
    eighty_percent_alpha_middle_gray = RGBAColor.gray(0.5, 0.8)
    twenty_percent_alpha_middle_gray = RGBAColor.gray(0.5, 0.2)

    quarter_alpha_red = RGBAColor(1.0, 0.0, 0.0, 0.25)
    half_alpha_red = RGBAColor(1.0, 0.0, 0.0, 0.5)
    eighty_percent_alpha_green = RGBAColor(0.0, 1.0, 0.0, 0.8)


class ColorTestHelpers:
    """Helper class with utility methods for color testing."""

    @staticmethod
    def lightness(color) -> float:
        return perceived_lightness_of(color)

    @staticmethod
    def hue(color) -> float:
        hsba = decompose_hsba(color)
        assert hsba is not None
        return hsba[0]

    @staticmethod
    def hue_distance(h1: float, h2: float) -> float:
        """Circular distance between two hues in [0, 1)."""
        d = abs(h1 - h2) % 1.0
        return min(d, 1.0 - d)

    @staticmethod
    def is_valid_rgba(color) -> bool:
        return all(0.0 <= c <= 1.0 for c in color.to_rgba())


@pytest.fixture
def colors() -> type[Palette]:
    return Palette


@pytest.fixture
def color_helpers() -> ColorTestHelpers:
    """Provide helper methods for color testing."""
    return ColorTestHelpers()


@pytest.fixture
def contrast_cache() -> ContrastPairCache:
    """A fresh black/white cache."""
    return ContrastPairCache(dark_color=Palette.black, light_color=Palette.white)


@pytest.fixture(autouse=True)
def reset_shared():
    """Keep shared caches from leaking decisions between tests."""
    reset_shared_caches()
    yield
    reset_shared_caches()
