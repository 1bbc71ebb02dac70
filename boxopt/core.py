"""Core types shared across regions, functions and optimization methods."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

import numpy as np

Array = np.ndarray


class DimensionMismatchError(ValueError):
    """Raised when a vector's length disagrees with an expected dimensionality."""

    def __init__(self, expected: int, actual: int, what: str = "vector") -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{what} must have exactly {expected} elements, got {actual}."
        )


class Status(Enum):
    """Reason an optimization run ended."""

    CONVERGED = "converged"
    MAX_ITER = "max_iter"
    BOUNDARY = "boundary"


@dataclass
class OptimizeResult:
    """Result object returned by every optimization method.

    Attributes:
        x: Best point found (the last element of the trajectory).
        fun: Objective value at ``x``.
        nit: Number of iterations performed.
        status: Why the run ended.
        message: Human-readable description of ``status``.
        history: Every point appended to the trajectory, start point first.
    """

    x: Array
    fun: float
    nit: int
    status: Status
    message: str
    history: List[Array] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.status is not Status.MAX_ITER


__all__ = ["Array", "DimensionMismatchError", "OptimizeResult", "Status"]
