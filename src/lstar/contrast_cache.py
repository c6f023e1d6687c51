"""Cached dark/light contrast decisions.

A :class:`ContrastPairCache` owns a fixed pair of reference colors, one dark
and one light, and remembers which of the two was chosen for each base color
it has seen. Decisions are keyed by the base color's sRGB components at six
decimal places, alpha included, so colors with the same RGB but different
alpha are cached independently.

Thread Safety:
    Every read and write of one cache instance runs under a single lock, so
    concurrent callers never see a partial entry. When the size limit is
    reached the oldest entry is evicted; callers should not rely on which.

Shared caches:
    :func:`shared_cache` returns a process-wide black/white cache per color
    representation, created on first use.

Example:
    >>> from lstar.color_types import ContrastChoice, RGBAColor
    >>> cache = ContrastPairCache(RGBAColor(0, 0, 0), RGBAColor(1, 1, 1))
    >>> cache.contrasting_color_for(RGBAColor.gray(0.5), 53.39)
    RGBAColor(red=0.0, green=0.0, blue=0.0, alpha=1.0)
    >>> cache.get_cached_choice(RGBAColor.gray(0.5))
    <ContrastChoice.DARK: 'dark'>
"""

import logging
import threading
from collections import OrderedDict
from typing import Any, Dict, Optional

import numpy as np

from .color_types import ContrastChoice, RGBAColor, extract_rgba, make_rgba
from .colors import is_light
from .config import CACHE_KEY_PRECISION, DEFAULT_CACHE_SIZE

__all__ = ["ContrastPairCache", "shared_cache", "reset_shared_caches"]

logger = logging.getLogger(__name__)


class _Reference:
    """Snapshot of a reference color, rebuilt on every use.

    The components are read once, so later changes to a mutable color
    (list, numpy array) handed to the cache do not leak into it.
    """

    __slots__ = ("_like", "_rgba")

    def __init__(self, color: Any):
        self._rgba = extract_rgba(color)
        if isinstance(color, (list, np.ndarray)):
            color = color.copy()
        self._like = color

    def build(self) -> Any:
        if self._rgba is None:
            return self._like
        return make_rgba(self._like, *self._rgba)


class ContrastPairCache:
    """Bounded, thread-safe store of dark/light choices per base color.

    Attributes:
        dark_color: Reference color returned for ContrastChoice.DARK
        light_color: Reference color returned for ContrastChoice.LIGHT
        size_limit: Maximum number of cached decisions (at least 1)
    """

    def __init__(
        self,
        dark_color: Any,
        light_color: Any,
        size_limit: int = DEFAULT_CACHE_SIZE,
    ):
        self._dark_reference = _Reference(dark_color)
        self._light_reference = _Reference(light_color)
        self.size_limit = max(1, size_limit)
        self._choices: "OrderedDict[str, ContrastChoice]" = OrderedDict()
        self._lock = threading.Lock()

    @property
    def dark_color(self) -> Any:
        return self._dark_reference.build()

    @property
    def light_color(self) -> Any:
        return self._light_reference.build()

    def __len__(self) -> int:
        with self._lock:
            return len(self._choices)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(dark_color={self.dark_color!r}, "
            f"light_color={self.light_color!r}, size_limit={self.size_limit})"
        )

    def _get_cache_key(self, color: Any) -> str:
        """Fingerprint a color as its RGBA components at fixed precision.

        Colors that cannot be decoded all share the key "0,0,0,0".
        """
        rgba = extract_rgba(color)
        if rgba is None:
            return "0,0,0,0"
        return ",".join(f"{c:.{CACHE_KEY_PRECISION}f}" for c in rgba)

    def get_cached_choice(self, color: Any) -> Optional[ContrastChoice]:
        """Return the cached choice for ``color``, or None if not cached."""
        key = self._get_cache_key(color)
        with self._lock:
            return self._choices.get(key)

    def cache(self, choice: ContrastChoice, color: Any) -> None:
        """Store ``choice`` for ``color``, replacing any previous choice."""
        key = self._get_cache_key(color)
        with self._lock:
            self._choices[key] = choice
            # Evict oldest entries beyond the limit
            while len(self._choices) > self.size_limit:
                evicted, _ = self._choices.popitem(last=False)
                logger.debug("Evicted contrast choice for %s", evicted)

    def clear_cache(self) -> None:
        with self._lock:
            self._choices.clear()

    def get_contrasting_color(self, choice: ContrastChoice) -> Any:
        """Map a choice to a fresh copy of its reference color.

        Never touches the cache. Callers may mutate the result freely.
        """
        if choice is ContrastChoice.DARK:
            return self._dark_reference.build()
        return self._light_reference.build()

    def contrasting_color_for(self, color: Any, perceived_lightness: float) -> Any:
        """Return the reference color that contrasts with ``color``.

        Uses the cached choice when there is one. Otherwise a light base
        (L* > 50) gets the dark reference and anything else the light one;
        the decision is cached before returning.
        """
        choice = self.get_cached_choice(color)
        if choice is not None:
            return self.get_contrasting_color(choice)

        choice = ContrastChoice.DARK if is_light(perceived_lightness) else ContrastChoice.LIGHT
        self.cache(choice, color)
        return self.get_contrasting_color(choice)


# Shared caches, one per color representation
_shared_caches: Dict[type, ContrastPairCache] = {}
_shared_lock = threading.Lock()


def shared_cache(color_type: type = RGBAColor) -> ContrastPairCache:
    """Get or create the process-wide black/white cache for ``color_type``.

    ``color_type`` is a ColorLike class (built with ``from_rgba``) or a
    sequence type such as ``tuple``, whose references are 4-sequences.
    """
    with _shared_lock:
        cache = _shared_caches.get(color_type)
        if cache is None:
            cache = ContrastPairCache(
                dark_color=make_rgba(color_type, 0.0, 0.0, 0.0, 1.0),
                light_color=make_rgba(color_type, 1.0, 1.0, 1.0, 1.0),
            )
            _shared_caches[color_type] = cache
        return cache


def reset_shared_caches() -> None:
    """Drop all shared caches. New ones are created on next use."""
    with _shared_lock:
        _shared_caches.clear()
