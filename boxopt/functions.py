"""Objective functions with analytic gradients.

Every objective implements :class:`Function`: a fixed ``name`` and ``dim``,
``evaluate``/``gradient`` that reject points of the wrong length, and
``duplicate`` returning an independent copy (the transfer record keeps its own
copy of the function in use).

Example
-------
>>> import numpy as np
>>> from boxopt.functions import CallableFunction
>>> sphere = CallableFunction(
...     name="x^2 + y^2",
...     dim=2,
...     fun=lambda x: float(x @ x),
...     grad=lambda x: 2 * x,
... )
>>> sphere(np.array([1.0, 2.0]))
5.0
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Sequence, Type

import numpy as np

from .core import Array
from .vector import as_vector, check_dimension

Objective = Callable[[Array], float]
Gradient = Callable[[Array], Array]


class Function(ABC):
    """Scalar objective on ``R^dim`` with an analytic gradient."""

    name: str = ""
    dim: int = 0

    def evaluate(self, x: Sequence[float] | Array) -> float:
        point = as_vector(x)
        check_dimension(point, self.dim, "point")
        return float(self._value(point))

    def gradient(self, x: Sequence[float] | Array) -> Array:
        point = as_vector(x)
        check_dimension(point, self.dim, "point")
        return np.asarray(self._gradient(point), dtype=float)

    def __call__(self, x: Sequence[float] | Array) -> float:
        return self.evaluate(x)

    def duplicate(self) -> "Function":
        """Return an independent copy of this function."""
        return copy.deepcopy(self)

    @abstractmethod
    def _value(self, x: Array) -> float:
        """Objective value at a point already checked for length."""

    @abstractmethod
    def _gradient(self, x: Array) -> Array:
        """Gradient at a point already checked for length."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, dim={self.dim})"


class CallableFunction(Function):
    """Adapter turning a pair of plain callables into a :class:`Function`."""

    def __init__(self, name: str, dim: int, fun: Objective, grad: Gradient) -> None:
        if dim < 1:
            raise ValueError(f"dim must be >= 1, got {dim}.")
        self.name = name
        self.dim = int(dim)
        self.fun = fun
        self.grad = grad

    def _value(self, x: Array) -> float:
        return self.fun(x)

    def _gradient(self, x: Array) -> Array:
        return self.grad(x)

    def duplicate(self) -> "CallableFunction":
        # Callables may close over state that cannot be deep-copied.
        return copy.copy(self)


class SquareSine(Function):
    name = "x^2*sin(y)"
    dim = 2

    def _value(self, x: Array) -> float:
        return x[0] ** 2 * np.sin(x[1])

    def _gradient(self, x: Array) -> Array:
        return np.array([2 * x[0] * np.sin(x[1]), x[0] ** 2 * np.cos(x[1])])


class SineCosineSine(Function):
    name = "sin(x)cos(y)sin(z)"
    dim = 3

    def _value(self, x: Array) -> float:
        return np.sin(x[0]) * np.cos(x[1]) * np.sin(x[2])

    def _gradient(self, x: Array) -> Array:
        sx, cx = np.sin(x[0]), np.cos(x[0])
        sy, cy = np.sin(x[1]), np.cos(x[1])
        sz, cz = np.sin(x[2]), np.cos(x[2])
        return np.array([cx * cy * sz, -sx * sy * sz, sx * cy * cz])


class QuarticValley(Function):
    name = "(0.1x - y)^4 + y^2"
    dim = 2

    def _value(self, x: Array) -> float:
        return (0.1 * x[0] - x[1]) ** 4 + x[1] ** 2

    def _gradient(self, x: Array) -> Array:
        d3 = (0.1 * x[0] - x[1]) ** 3
        return np.array([0.4 * d3, -4 * d3 + 2 * x[1]])


class Rosenbrock(Function):
    name = "(1 - x)^2 + 100(y - x^2)^2"
    dim = 2

    def _value(self, x: Array) -> float:
        return (1 - x[0]) ** 2 + 100 * (x[1] - x[0] ** 2) ** 2

    def _gradient(self, x: Array) -> Array:
        return np.array(
            [
                -2 * (1 - x[0]) - 400 * x[0] * (x[1] - x[0] ** 2),
                200 * (x[1] - x[0] ** 2),
            ]
        )


class Himmelblau(Function):
    name = "(x^2 + y - 11)^2 + (x + y^2 - 7)^2"
    dim = 2

    def _value(self, x: Array) -> float:
        return (x[0] ** 2 + x[1] - 11) ** 2 + (x[0] + x[1] ** 2 - 7) ** 2

    def _gradient(self, x: Array) -> Array:
        a = x[0] ** 2 + x[1] - 11
        b = x[0] + x[1] ** 2 - 7
        return np.array([4 * x[0] * a + 2 * b, 2 * a + 4 * x[1] * b])


class WeightedSphere(Function):
    name = "x1^2 + 2x2^2 + 3x3^2 + 4x4^2"
    dim = 4

    _weights = np.arange(1.0, 5.0)

    def _value(self, x: Array) -> float:
        return float(np.sum(self._weights * x**2))

    def _gradient(self, x: Array) -> Array:
        return 2 * self._weights * x


FUNCTIONS: Dict[str, Type[Function]] = {
    "square_sine": SquareSine,
    "sine_cosine_sine": SineCosineSine,
    "quartic_valley": QuarticValley,
    "rosenbrock": Rosenbrock,
    "himmelblau": Himmelblau,
    "weighted_sphere": WeightedSphere,
}


def available_functions() -> List[str]:
    return list(FUNCTIONS)


def get_function(key: str) -> Function:
    """Instantiate a catalogue function by key.

    Raises:
        ValueError: If ``key`` is not in :data:`FUNCTIONS`.
    """
    try:
        cls = FUNCTIONS[key.lower()]
    except KeyError:
        raise ValueError(
            f"Unsupported function '{key}'. Supported names: {available_functions()}"
        ) from None
    return cls()


__all__ = [
    "CallableFunction",
    "FUNCTIONS",
    "Function",
    "Gradient",
    "Himmelblau",
    "Objective",
    "QuarticValley",
    "Rosenbrock",
    "SineCosineSine",
    "SquareSine",
    "WeightedSphere",
    "available_functions",
    "get_function",
]
