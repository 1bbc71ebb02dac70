"""Stopping criteria evaluated over a :class:`~boxopt.transfer.TransferData`.

Each criterion is an immutable ``(eps, max_iter)`` pair with a stateless
``check``. The difference-based criteria compare the last two trajectory
points and therefore never fire while only the start point is recorded.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from .logging import get_logger
from .transfer import TransferData
from .vector import norm, subtract

logger = get_logger(__name__)


class StopCriterion(ABC):
    """Base class holding the tolerance and the iteration cap."""

    name: str = "StopCriterion"

    def __init__(self, eps: float, max_iter: int) -> None:
        if eps < 0:
            raise ValueError(f"eps must be non-negative, got {eps}.")
        if max_iter < 1:
            raise ValueError(f"max_iter must be >= 1, got {max_iter}.")
        self._eps = float(eps)
        self._max_iter = int(max_iter)

    @property
    def eps(self) -> float:
        return self._eps

    @property
    def max_iter(self) -> int:
        return self._max_iter

    def iterations_exhausted(self, data: TransferData) -> bool:
        return data.iteration_count >= self._max_iter

    @abstractmethod
    def check(self, data: TransferData) -> bool:
        """Return True when the run should stop."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(eps={self._eps!r}, max_iter={self._max_iter!r})"


class GradNormStopCriterion(StopCriterion):
    """Stop on the iteration cap or when ``||grad f(x_k)|| < eps``.

    The gradient test is skipped while only the start point is recorded.
    """

    name = "GradNormStopCriterion"

    def check(self, data: TransferData) -> bool:
        if self.iterations_exhausted(data):
            return True
        if data.point_count < 2:
            return False
        return norm(data.function.gradient(data.current_point)) < self._eps


class DifferenceNormStopCriterion(StopCriterion):
    """Stop on the iteration cap or when ``||x_k - x_{k-1}|| < eps``."""

    name = "DifferenceNormStopCriterion"

    def check(self, data: TransferData) -> bool:
        if data.point_count < 2:
            return False
        if self.iterations_exhausted(data):
            return True
        return norm(subtract(data.current_point, data.previous_point)) < self._eps


class FuncDifferenceNormStopCriterion(StopCriterion):
    """Stop on the iteration cap or when ``|f_k - f_{k-1}| / |f_k| < eps``.

    The ratio is not guarded against ``f_k == 0``: it evaluates to ``inf`` or
    ``nan``, neither of which is below ``eps``, so the run continues until
    another test fires. A warning is logged when that happens.
    """

    name = "FuncDifferenceNormStopCriterion"

    def check(self, data: TransferData) -> bool:
        if data.point_count < 2:
            return False
        if self.iterations_exhausted(data):
            return True
        f = data.function
        current = np.float64(f(data.current_point))
        previous = np.float64(f(data.previous_point))
        with np.errstate(divide="ignore", invalid="ignore"):
            ratio = np.abs((current - previous) / current)
        if not np.isfinite(ratio):
            logger.warning(
                "Relative function change is undefined at f(x)=%g (ratio=%s)",
                current,
                ratio,
            )
        return bool(ratio < self._eps)


__all__ = [
    "DifferenceNormStopCriterion",
    "FuncDifferenceNormStopCriterion",
    "GradNormStopCriterion",
    "StopCriterion",
]
