"""Tunable constants for lightness search and contrast caching."""

import logging
import os
from typing import Final

logger = logging.getLogger(__name__)


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r, expected an integer", name, raw)
        return default


# Perceived lightness (L*) that separates light from dark colors
MIDDLE_LIGHTNESS: Final = 50.0

# Maximum |L* - target| accepted by the lightness search
LIGHTNESS_TOLERANCE: Final = 0.1
MAX_BRIGHTNESS_ITERATIONS: Final = 20
MAX_FINETUNE_ITERATIONS: Final = 20

# Decimal digits per component in contrast cache keys
CACHE_KEY_PRECISION: Final = 6
DEFAULT_CACHE_SIZE: Final = _env_int("LSTAR_CACHE_SIZE", 100)
