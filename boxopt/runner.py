"""Run one optimization and summarise it."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from .core import Array, Status
from .criteria import StopCriterion
from .functions import Function
from .logging import get_logger
from .methods import OptimizationMethod
from .region import Region
from .vector import as_vector

logger = get_logger(__name__)


@dataclass(frozen=True)
class RunReport:
    """Outcome of :func:`run_optimization`."""

    method_name: str
    function_name: str
    start_point: Array
    best_point: Array
    value: float
    iterations: int
    elapsed: float
    status: Status


def run_optimization(
    method: OptimizationMethod,
    function: Function,
    region: Region,
    start_point: Sequence[float] | Array,
    criterion: StopCriterion,
) -> RunReport:
    """Run ``method`` once and return a timed report."""
    x0 = as_vector(start_point)
    start = time.perf_counter()
    result = method.optimise(x0, region, function, criterion)
    elapsed = time.perf_counter() - start
    logger.info("%s on %s took %.6f s", method.name, function.name, elapsed)
    return RunReport(
        method_name=method.name,
        function_name=function.name,
        start_point=x0,
        best_point=result.x,
        value=result.fun,
        iterations=result.nit,
        elapsed=elapsed,
        status=result.status,
    )


def _format_point(x: Array) -> str:
    return np.array2string(np.asarray(x), separator=", ", precision=8)


def format_report(report: RunReport) -> str:
    """Render a report as the multi-line block printed after each run."""
    lines = [
        "OPTIMIZATION",
        report.method_name,
        f"Start point: {_format_point(report.start_point)}",
        f"Best point: {_format_point(report.best_point)}",
        f"Value of {report.function_name} function: {report.value:.10g}",
        f"{report.iterations} iterations made",
        f"Execution time: {report.elapsed:.6f} seconds",
        "OPTIMIZATION",
    ]
    return "\n".join(lines) + "\n"


__all__ = ["RunReport", "format_report", "run_optimization"]
