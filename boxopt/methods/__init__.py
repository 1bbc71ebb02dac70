"""Box-constrained optimization methods.

Example
-------
>>> from boxopt.criteria import DifferenceNormStopCriterion
>>> from boxopt.functions import QuarticValley
>>> from boxopt.methods import ClassicGradientDescent
>>> from boxopt.region import Region
>>> method = ClassicGradientDescent()
>>> res = method.optimise(
...     [2.0, 1.9],
...     Region([(-5, 5), (-5, 5)]),
...     QuarticValley(),
...     DifferenceNormStopCriterion(1e-8, 1000),
... )
>>> res.fun < 1e-3
True
"""

from .adam import AdamGradientDescent
from .base import OptimizationMethod
from .classic import ClassicGradientDescent
from .line_search import max_step_to_boundary, ternary_search
from .random_search import RandomSearch

__all__ = [
    "AdamGradientDescent",
    "ClassicGradientDescent",
    "OptimizationMethod",
    "RandomSearch",
    "max_step_to_boundary",
    "ternary_search",
]
