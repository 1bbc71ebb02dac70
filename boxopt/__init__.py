"""boxopt - minimise smooth test functions over axis-aligned boxes."""

__version__ = "0.1.0"

from .config import CriterionConfig, MethodConfig, create_criterion, create_method
from .core import Array, DimensionMismatchError, OptimizeResult, Status
from .criteria import (
    DifferenceNormStopCriterion,
    FuncDifferenceNormStopCriterion,
    GradNormStopCriterion,
    StopCriterion,
)
from .functions import (
    FUNCTIONS,
    CallableFunction,
    Function,
    Himmelblau,
    QuarticValley,
    Rosenbrock,
    SineCosineSine,
    SquareSine,
    WeightedSphere,
    available_functions,
    get_function,
)
from .logging import configure_logging, get_logger, set_log_level
from .methods import (
    AdamGradientDescent,
    ClassicGradientDescent,
    OptimizationMethod,
    RandomSearch,
    ternary_search,
)
from .region import Neighborhood, Region, intersect
from .runner import RunReport, format_report, run_optimization
from .transfer import TransferData

__all__ = [
    "__version__",
    # Core types
    "Array",
    "DimensionMismatchError",
    "OptimizeResult",
    "Status",
    # Geometry
    "Neighborhood",
    "Region",
    "intersect",
    # Functions
    "FUNCTIONS",
    "CallableFunction",
    "Function",
    "Himmelblau",
    "QuarticValley",
    "Rosenbrock",
    "SineCosineSine",
    "SquareSine",
    "WeightedSphere",
    "available_functions",
    "get_function",
    # Stopping
    "TransferData",
    "StopCriterion",
    "GradNormStopCriterion",
    "DifferenceNormStopCriterion",
    "FuncDifferenceNormStopCriterion",
    # Methods
    "OptimizationMethod",
    "AdamGradientDescent",
    "ClassicGradientDescent",
    "RandomSearch",
    "ternary_search",
    # Configuration and running
    "CriterionConfig",
    "MethodConfig",
    "create_criterion",
    "create_method",
    "RunReport",
    "format_report",
    "run_optimization",
    # Logging
    "configure_logging",
    "get_logger",
    "set_log_level",
]
