"""Steepest descent with a bound-respecting exact line search."""

from __future__ import annotations

import numpy as np

from ..core import Status
from ..criteria import StopCriterion
from ..functions import Function
from ..region import Region
from ..transfer import TransferData
from .base import OptimizationMethod
from .line_search import max_step_to_boundary, ternary_search

LINE_SEARCH_TOL = 1e-15
LINE_SEARCH_MAXITER = 100


class ClassicGradientDescent(OptimizationMethod):
    """Steepest descent whose step length never leaves the region.

    At ``x`` with gradient ``g`` the step ``alpha`` is found by ternary search
    of ``f(x - alpha * g)`` on ``[0, alpha_max]``, where ``alpha_max`` is the
    distance to the first bound hit along ``-g``. Every step is accepted.
    """

    name = "ClassicGradientDescent"

    def __init__(
        self,
        line_search_tol: float = LINE_SEARCH_TOL,
        line_search_maxiter: int = LINE_SEARCH_MAXITER,
    ) -> None:
        super().__init__()
        self.line_search_tol = float(line_search_tol)
        self.line_search_maxiter = int(line_search_maxiter)
        self.alpha = 0.0

    def max_alpha(self, region: Region, x: np.ndarray, grad: np.ndarray) -> float:
        return max_step_to_boundary(region, x, grad)

    def optimal_alpha(
        self,
        function: Function,
        x: np.ndarray,
        grad: np.ndarray,
        max_alpha: float,
    ) -> float:
        def phi(alpha: float) -> float:
            return function(x - alpha * grad)

        return ternary_search(
            phi,
            0.0,
            max_alpha,
            tol=self.line_search_tol,
            max_iter=self.line_search_maxiter,
        )

    def _search(
        self,
        region: Region,
        function: Function,
        criterion: StopCriterion,
        data: TransferData,
    ) -> Status | None:
        while not criterion.check(data):
            data.increment()
            x = self.points[-1]
            grad = function.gradient(x)
            max_alpha = self.max_alpha(region, x, grad)
            # Zero gradient: nothing restricts the step and nothing to gain.
            if not np.isfinite(max_alpha):
                self.alpha = 0.0
            else:
                self.alpha = self.optimal_alpha(function, x, grad, max_alpha)
            self._append(region.clip(x - self.alpha * grad), data)
        return None


__all__ = ["ClassicGradientDescent", "LINE_SEARCH_MAXITER", "LINE_SEARCH_TOL"]
