"""One-dimensional step-length searches."""

from __future__ import annotations

from typing import Callable

import numpy as np

from ..core import Array, DimensionMismatchError
from ..region import Region


def ternary_search(
    phi: Callable[[float], float],
    lo: float,
    hi: float,
    tol: float = 1e-15,
    max_iter: int = 100,
) -> float:
    """Minimise a unimodal ``phi`` on ``[lo, hi]`` by trisection.

    Each iteration compares ``phi`` at the two interior thirds and discards
    the outer third on the larger side. Stops once the bracket is narrower
    than ``tol`` or after ``max_iter`` iterations and returns its midpoint.
    """
    if tol <= 0:
        raise ValueError("tol must be positive")
    if max_iter < 1:
        raise ValueError("max_iter must be >= 1")
    left = float(lo)
    right = float(hi)
    for _ in range(max_iter):
        if right - left <= tol:
            break
        left_third = (2 * left + right) / 3
        right_third = (left + 2 * right) / 3
        if phi(left_third) < phi(right_third):
            right = right_third
        else:
            left = left_third
    return 0.5 * (left + right)


def max_step_to_boundary(region: Region, point: Array, direction: Array) -> float:
    """Largest ``t`` keeping ``point - t * direction`` inside ``region``.

    For each coordinate the distance to the bound that ``-direction`` points
    at is divided by the direction component; the smallest ratio wins.
    Coordinates with a zero component never restrict the step, so a zero
    direction yields ``inf``.
    """
    if len(direction) != len(point):
        raise DimensionMismatchError(len(point), len(direction), "direction")
    with np.errstate(divide="ignore", invalid="ignore"):
        to_lower = (point - region.lower) / direction
        to_upper = (point - region.upper) / direction
    ratios = np.fmax(to_lower, to_upper)
    ratios = np.where(direction == 0.0, np.inf, ratios)
    return float(np.min(ratios))


__all__ = ["max_step_to_boundary", "ternary_search"]
