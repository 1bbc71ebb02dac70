"""Axis-aligned box regions and cubic neighborhoods.

A :class:`Region` is an ordered sequence of closed intervals ``[lo_i, hi_i]``.
Sampling draws each coordinate independently and uniformly from its interval.
The sampler (the lower/upper bound arrays handed to ``Generator.uniform``) is
built on first use and dropped whenever the bounds change, so a region never
samples from stale bounds.

The canonical empty region is ``Region([])``: dimension 0, no bounds. It is
what :func:`intersect` returns when the two boxes do not overlap in every
dimension.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .core import Array, DimensionMismatchError
from .logging import get_logger
from .vector import as_vector, check_dimension

logger = get_logger(__name__)

Bounds = List[Tuple[float, float]]


class Region:
    """Hyper-rectangle defined by one ``(lower, upper)`` pair per dimension."""

    def __init__(self, bounds: Iterable[Sequence[float]] = ()) -> None:
        self._bounds: Bounds = []
        self._sampler: Optional[Tuple[Array, Array]] = None
        self.set_bounds(bounds)

    @property
    def dim(self) -> int:
        return len(self._bounds)

    @property
    def bounds(self) -> Bounds:
        return list(self._bounds)

    def get_bounds(self) -> Bounds:
        return self.bounds

    @property
    def lower(self) -> Array:
        return np.array([lo for lo, _ in self._bounds], dtype=float)

    @property
    def upper(self) -> Array:
        return np.array([hi for _, hi in self._bounds], dtype=float)

    @property
    def is_empty(self) -> bool:
        return self.dim == 0

    @property
    def sampler_ready(self) -> bool:
        """Whether the per-dimension sampler is built for the current bounds."""
        return self._sampler is not None

    def set_bounds(self, new_bounds: Iterable[Sequence[float]]) -> None:
        """Replace all bounds and invalidate the cached sampler."""
        bounds: Bounds = []
        for pair in new_bounds:
            lo, hi = pair
            bounds.append((float(lo), float(hi)))
        self._bounds = bounds
        self._sampler = None

    change = set_bounds

    def contains(self, point: Sequence[float] | Array) -> bool:
        """Return True if ``point`` lies in every closed interval."""
        x = as_vector(point)
        check_dimension(x, self.dim, "point")
        return all(lo <= xi <= hi for xi, (lo, hi) in zip(x, self._bounds))

    __contains__ = contains

    def sample(self, rng: np.random.Generator) -> Array:
        """Draw a uniformly distributed point. Advances ``rng``."""
        if self._sampler is None:
            self._sampler = (self.lower, self.upper)
        low, high = self._sampler
        return rng.uniform(low, high)

    def clip(self, point: Array) -> Array:
        """Project ``point`` onto the box."""
        x = as_vector(point)
        check_dimension(x, self.dim, "point")
        return np.clip(x, self.lower, self.upper)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Region):
            return NotImplemented
        return self._bounds == other._bounds

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._bounds!r})"


class Neighborhood(Region):
    """Hyper-cube of half-width ``delta`` centred at ``center``.

    The bounds are always re-derived from ``(delta, center)``; use
    :meth:`recenter` to move or resize it.
    """

    def __init__(self, delta: float, center: Sequence[float] | Array) -> None:
        super().__init__()
        self.recenter(delta, center)

    @property
    def delta(self) -> float:
        return self._delta

    @property
    def center(self) -> Array:
        return self._center.copy()

    def recenter(self, delta: float, center: Sequence[float] | Array) -> None:
        self._delta = float(delta)
        self._center = as_vector(center)
        self.set_bounds((c - self._delta, c + self._delta) for c in self._center)

    change = recenter

    def __repr__(self) -> str:
        return f"Neighborhood(delta={self._delta!r}, center={self._center.tolist()!r})"


def intersect(a: Region, b: Region) -> Region:
    """Return the overlap of two regions of equal dimension.

    Each dimension keeps ``[max(lo), min(hi)]``. If any dimension has an
    empty or zero-width overlap the whole result is ``Region([])``.
    """
    if a.dim != b.dim:
        raise DimensionMismatchError(a.dim, b.dim, "region")
    bounds: Bounds = []
    for (alo, ahi), (blo, bhi) in zip(a.bounds, b.bounds):
        left = max(alo, blo)
        right = min(ahi, bhi)
        if not left < right:
            logger.debug("Empty intersection: [%g, %g] in one dimension", left, right)
            return Region()
        bounds.append((left, right))
    return Region(bounds)


__all__ = ["Bounds", "Neighborhood", "Region", "intersect"]
