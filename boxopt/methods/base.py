"""Shared driver for box-constrained optimization methods."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Sequence

from ..core import Array, DimensionMismatchError, OptimizeResult, Status
from ..criteria import StopCriterion
from ..functions import Function
from ..logging import get_logger
from ..region import Region
from ..transfer import TransferData
from ..vector import as_vector

logger = get_logger(__name__)

_MESSAGES = {
    Status.CONVERGED: "Stopping criterion satisfied.",
    Status.MAX_ITER: "Maximum iterations reached.",
    Status.BOUNDARY: "Step clamped to the region boundary.",
}


class OptimizationMethod(ABC):
    """Base class for the optimization methods.

    Subclasses implement :meth:`_search`, which runs the main loop over a
    prepared :class:`TransferData` and returns ``Status.BOUNDARY`` if it ended
    on a boundary hit, or ``None`` when the stopping criterion ended it.
    """

    name: str = "OptimizationMethod"

    def __init__(self) -> None:
        self.points: List[Array] = []
        self.iterations = 0

    @property
    def best_point(self) -> Array:
        """Last point of the trajectory."""
        if not self.points:
            raise RuntimeError(f"{self.name} has not been run yet.")
        return self.points[-1].copy()

    def optimise(
        self,
        start_point: Sequence[float] | Array,
        region: Region,
        function: Function,
        criterion: StopCriterion,
    ) -> OptimizeResult:
        """Minimise ``function`` over ``region`` starting from ``start_point``."""
        x0 = as_vector(start_point, function.dim)
        if region.dim != function.dim:
            raise DimensionMismatchError(function.dim, region.dim, "region")
        if not region.contains(x0):
            logger.warning("%s: start point %s lies outside %r", self.name, x0, region)

        self.points = [x0]
        self.iterations = 0
        data = TransferData()
        data.set_function(function)
        data.set_iteration_count(0)
        data.set_points(self.points)

        status = self._search(region, function, criterion, data)
        self.iterations = data.iteration_count
        if status is None:
            status = (
                Status.MAX_ITER
                if criterion.iterations_exhausted(data)
                else Status.CONVERGED
            )

        best = self.best_point
        fun = function(best)
        logger.info(
            "%s finished after %d iterations (%s): f=%g",
            self.name,
            self.iterations,
            status.value,
            fun,
        )
        return OptimizeResult(
            x=best,
            fun=fun,
            nit=self.iterations,
            status=status,
            message=_MESSAGES[status],
            history=[p.copy() for p in self.points],
        )

    def _append(self, point: Array, data: TransferData) -> None:
        self.points.append(point)
        data.set_points(self.points)
        logger.debug(
            "%s iter %d: x=%s", self.name, data.iteration_count, point
        )

    @abstractmethod
    def _search(
        self,
        region: Region,
        function: Function,
        criterion: StopCriterion,
        data: TransferData,
    ) -> Status | None:
        """Run the method loop until the criterion fires."""

    def get_name(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


__all__ = ["OptimizationMethod"]
