"""Factories building methods and stopping criteria from configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Type

from .criteria import (
    DifferenceNormStopCriterion,
    FuncDifferenceNormStopCriterion,
    GradNormStopCriterion,
    StopCriterion,
)
from .methods import (
    AdamGradientDescent,
    ClassicGradientDescent,
    OptimizationMethod,
    RandomSearch,
)
from .methods.random_search import DEFAULT_SEED

SUPPORTED_METHODS = ("adam", "classic", "random")

CRITERIA: Dict[str, Type[StopCriterion]] = {
    "grad_norm": GradNormStopCriterion,
    "difference_norm": DifferenceNormStopCriterion,
    "func_difference_norm": FuncDifferenceNormStopCriterion,
}


@dataclass(frozen=True)
class MethodConfig:
    """
    Configuration for creating an optimization method.

    Fields a method does not use are ignored by it.

    Args:
        name: Method name. Supported values: "adam", "classic", "random".
        alpha: Learning rate for "adam", neighborhood shrink factor for
            "random". Defaults to None, which uses the method default.
        beta1: First-moment decay rate for "adam". Defaults to 0.9.
        beta2: Second-moment decay rate for "adam". Defaults to 0.999.
        epsilon: Denominator floor for "adam". Defaults to 1e-8.
        p: Probability of a local draw for "random". Defaults to 0.5.
        delta: Initial neighborhood half-width for "random". Defaults to 0.1.
        seed: Generator seed for "random". Defaults to 228.
    """

    name: str
    alpha: float | None = None
    beta1: float = 0.9
    beta2: float = 0.999
    epsilon: float = 1e-8
    p: float = 0.5
    delta: float = 0.1
    seed: int | None = DEFAULT_SEED

    def __post_init__(self) -> None:
        if self.name.lower() not in SUPPORTED_METHODS:
            raise ValueError(
                f"Unsupported method name '{self.name}'. "
                f"Supported names: {list(SUPPORTED_METHODS)}"
            )
        if self.alpha is not None and self.alpha <= 0:
            raise ValueError(f"alpha must be positive, got {self.alpha}.")


@dataclass(frozen=True)
class CriterionConfig:
    """
    Configuration for creating a stopping criterion.

    Args:
        name: Criterion name. Supported values: "grad_norm",
            "difference_norm", "func_difference_norm".
        eps: Tolerance. Must be non-negative.
        max_iter: Iteration cap. Must be >= 1.
    """

    name: str
    eps: float
    max_iter: int

    def __post_init__(self) -> None:
        if self.name.lower() not in CRITERIA:
            raise ValueError(
                f"Unsupported criterion name '{self.name}'. "
                f"Supported names: {list(CRITERIA)}"
            )
        if self.eps < 0:
            raise ValueError(f"eps must be non-negative, got {self.eps}.")
        if self.max_iter < 1:
            raise ValueError(f"max_iter must be >= 1, got {self.max_iter}.")


def create_method(config: MethodConfig) -> OptimizationMethod:
    """
    Create an optimization method from a configuration.

    Raises:
        ValueError: If the method name is not supported or a hyperparameter
            is out of range.
    """
    name_lower = config.name.lower()

    if name_lower == "adam":
        return AdamGradientDescent(
            alpha=config.alpha if config.alpha is not None else 1e-3,
            beta1=config.beta1,
            beta2=config.beta2,
            epsilon=config.epsilon,
        )
    elif name_lower == "classic":
        return ClassicGradientDescent()
    elif name_lower == "random":
        return RandomSearch(
            alpha=config.alpha if config.alpha is not None else 0.9,
            p=config.p,
            delta=config.delta,
            seed=config.seed,
        )
    else:
        raise ValueError(
            f"Unsupported method name '{config.name}'. "
            f"Supported names: {list(SUPPORTED_METHODS)}"
        )


def create_criterion(config: CriterionConfig) -> StopCriterion:
    """Create a stopping criterion from a configuration."""
    try:
        cls = CRITERIA[config.name.lower()]
    except KeyError:
        raise ValueError(
            f"Unsupported criterion name '{config.name}'. "
            f"Supported names: {list(CRITERIA)}"
        ) from None
    return cls(config.eps, config.max_iter)


__all__ = [
    "CRITERIA",
    "CriterionConfig",
    "MethodConfig",
    "SUPPORTED_METHODS",
    "create_criterion",
    "create_method",
]
