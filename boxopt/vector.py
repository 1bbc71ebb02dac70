"""Length-checked vector arithmetic on 1-D NumPy arrays.

NumPy broadcasts a length-1 operand against any other length; these helpers
refuse that and raise :class:`~boxopt.core.DimensionMismatchError` instead,
so every vector taking part in one run keeps the function's dimensionality.
"""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from .core import Array, DimensionMismatchError


def check_dimension(x: Array, dim: int, what: str = "vector") -> None:
    """Raise ``DimensionMismatchError`` unless ``len(x) == dim``."""
    if len(x) != dim:
        raise DimensionMismatchError(dim, len(x), what)


def as_vector(x: Sequence[float] | Array, dim: Optional[int] = None) -> Array:
    """Return ``x`` as a fresh 1-D float array, optionally checking its length."""
    vec = np.array(x, dtype=float).reshape(-1)
    if dim is not None:
        check_dimension(vec, dim)
    return vec


def add(u: Array, v: Array) -> Array:
    check_dimension(v, len(u))
    return np.asarray(u, dtype=float) + np.asarray(v, dtype=float)


def subtract(u: Array, v: Array) -> Array:
    check_dimension(v, len(u))
    return np.asarray(u, dtype=float) - np.asarray(v, dtype=float)


def scale(u: Array, s: float) -> Array:
    return np.asarray(u, dtype=float) * float(s)


def norm(u: Array) -> float:
    """Euclidean norm."""
    return float(np.linalg.norm(np.asarray(u, dtype=float)))


__all__ = ["add", "as_vector", "check_dimension", "norm", "scale", "subtract"]
