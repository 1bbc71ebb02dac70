"""Adam-style adaptive moment descent with a terminal boundary clamp."""

from __future__ import annotations

import numpy as np

from ..core import Status
from ..criteria import StopCriterion
from ..functions import Function
from ..logging import get_logger
from ..region import Region
from ..transfer import TransferData
from .base import OptimizationMethod
from .line_search import max_step_to_boundary

logger = get_logger(__name__)


class AdamGradientDescent(OptimizationMethod):
    """Adaptive moment estimation (Kingma & Ba, 2015) inside a box.

    Each iteration updates the running moments

        m = beta1 * m + (1 - beta1) * g
        v = beta2 * v + (1 - beta2) * g**2

    and proposes ``x - alpha * m_hat / (sqrt(v_hat) + epsilon)`` with the
    bias-corrected ``m_hat``, ``v_hat``. A proposal outside the region is
    replaced by the furthest point along the same direction that stays
    inside, and the run ends there.

    Args:
        alpha: Learning rate. Must be positive.
        beta1: Decay rate of the first moment, in ``[0, 1)``.
        beta2: Decay rate of the second moment, in ``[0, 1)``.
        epsilon: Denominator floor. Must be positive.
    """

    name = "AdamGradientDescent"

    def __init__(
        self,
        alpha: float = 1e-3,
        beta1: float = 0.9,
        beta2: float = 0.999,
        epsilon: float = 1e-8,
    ) -> None:
        super().__init__()
        if alpha <= 0:
            raise ValueError(f"alpha must be positive, got {alpha}.")
        for label, beta in (("beta1", beta1), ("beta2", beta2)):
            if not 0.0 <= beta < 1.0:
                raise ValueError(f"{label} must lie in [0, 1), got {beta}.")
        if epsilon <= 0:
            raise ValueError(f"epsilon must be positive, got {epsilon}.")
        self.alpha = float(alpha)
        self.beta1 = float(beta1)
        self.beta2 = float(beta2)
        self.epsilon = float(epsilon)

    def _search(
        self,
        region: Region,
        function: Function,
        criterion: StopCriterion,
        data: TransferData,
    ) -> Status | None:
        m = np.zeros(function.dim)
        v = np.zeros(function.dim)
        t = 0
        while not criterion.check(data):
            data.increment()
            x = self.points[-1]
            grad = function.gradient(x)
            t += 1
            m = self.beta1 * m + (1 - self.beta1) * grad
            v = self.beta2 * v + (1 - self.beta2) * grad**2
            m_hat = m / (1 - self.beta1**t)
            v_hat = v / (1 - self.beta2**t)
            direction = m_hat / (np.sqrt(v_hat) + self.epsilon)
            candidate = x - self.alpha * direction
            if region.contains(candidate):
                self._append(candidate, data)
                continue
            step = max_step_to_boundary(region, x, direction)
            clamped = region.clip(x - step * direction)
            self._append(clamped, data)
            logger.info(
                "%s: step left the region at iteration %d, clamped by %g",
                self.name,
                data.iteration_count,
                step,
            )
            return Status.BOUNDARY
        return None

    def __repr__(self) -> str:
        return (
            f"AdamGradientDescent(alpha={self.alpha!r}, beta1={self.beta1!r}, "
            f"beta2={self.beta2!r}, epsilon={self.epsilon!r})"
        )


__all__ = ["AdamGradientDescent"]
