"""Randomised local/global search over a box."""

from __future__ import annotations

import numpy as np

from ..core import Status
from ..criteria import StopCriterion
from ..functions import Function
from ..logging import get_logger
from ..region import Neighborhood, Region, intersect
from ..transfer import TransferData
from .base import OptimizationMethod

logger = get_logger(__name__)

DEFAULT_SEED = 228


class RandomSearch(OptimizationMethod):
    """Accept-if-better random search mixing local and global draws.

    With probability ``p`` a candidate is drawn from the part of the region
    within ``delta`` of the neighborhood centre, otherwise from the whole
    region. A candidate is kept only if it strictly improves the objective.
    A local improvement shrinks ``delta`` by ``alpha`` and recentres the
    neighborhood on the new point; a global improvement leaves it in place.
    Local draws are therefore centred on the last locally accepted point (or
    the start point), not on the current best point. The neighborhood of the
    latest run is kept in ``neighborhood``.

    The generator is created once from ``seed`` and reused, so consecutive
    runs on one instance continue the same random stream.

    Args:
        alpha: Neighborhood shrink factor, in ``(0, 1]``.
        p: Probability of a local draw, in ``[0, 1]``.
        delta: Initial neighborhood half-width. Must be positive.
        seed: Seed for ``numpy.random.default_rng``.
    """

    name = "RandomSearch"

    def __init__(
        self,
        alpha: float = 0.9,
        p: float = 0.5,
        delta: float = 0.1,
        seed: int | None = DEFAULT_SEED,
    ) -> None:
        super().__init__()
        if not 0.0 < alpha <= 1.0:
            raise ValueError(f"alpha must lie in (0, 1], got {alpha}.")
        if not 0.0 <= p <= 1.0:
            raise ValueError(f"p must lie in [0, 1], got {p}.")
        if delta <= 0:
            raise ValueError(f"delta must be positive, got {delta}.")
        self.alpha = float(alpha)
        self.p = float(p)
        self.delta = float(delta)
        self.seed = seed
        self.rng = np.random.default_rng(seed)
        self.neighborhood: Neighborhood | None = None

    def _search(
        self,
        region: Region,
        function: Function,
        criterion: StopCriterion,
        data: TransferData,
    ) -> Status | None:
        delta = self.delta
        neighborhood = Neighborhood(delta, self.points[-1])
        self.neighborhood = neighborhood
        best_value = function(self.points[-1])
        while not criterion.check(data):
            # Difference criteria never fire on a one-point trajectory.
            if data.point_count == 1 and criterion.iterations_exhausted(data):
                break
            data.increment()
            local = self.rng.random() <= self.p
            if local:
                search_area = intersect(region, neighborhood)
                if search_area.is_empty:
                    logger.debug(
                        "%s: neighborhood of width %g is empty, skipping draw",
                        self.name,
                        delta,
                    )
                    continue
            else:
                search_area = region
            candidate = search_area.sample(self.rng)
            value = function(candidate)
            if not value < best_value:
                continue
            best_value = value
            self._append(candidate, data)
            if local:
                delta *= self.alpha
                neighborhood.recenter(delta, candidate)
        return None

    def __repr__(self) -> str:
        return (
            f"RandomSearch(alpha={self.alpha!r}, p={self.p!r}, "
            f"delta={self.delta!r}, seed={self.seed!r})"
        )


__all__ = ["DEFAULT_SEED", "RandomSearch"]
