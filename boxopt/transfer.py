"""Trajectory record handed to stopping criteria."""

from __future__ import annotations

from typing import List, Optional, Sequence

from .core import Array
from .functions import Function


class TransferData:
    """Snapshot of an optimization run as seen by a stopping criterion.

    ``set_points`` stores a copy of the trajectory list, so the criterion's
    view does not change while the method keeps appending to its own buffer.
    The method re-synchronizes the record after every append.
    """

    def __init__(self) -> None:
        self._points: List[Array] = []
        self._function: Optional[Function] = None
        self._iteration_count = 0

    def set_points(self, points: Sequence[Array]) -> None:
        self._points = list(points)

    def set_function(self, function: Function) -> None:
        self._function = function.duplicate()

    def set_iteration_count(self, count: int) -> None:
        self._iteration_count = int(count)

    def increment(self) -> int:
        self._iteration_count += 1
        return self._iteration_count

    @property
    def points(self) -> List[Array]:
        return self._points

    @property
    def point_count(self) -> int:
        return len(self._points)

    @property
    def current_point(self) -> Array:
        if not self._points:
            raise IndexError("No points recorded yet.")
        return self._points[-1]

    @property
    def previous_point(self) -> Array:
        if len(self._points) < 2:
            raise IndexError("A previous point needs at least two recorded points.")
        return self._points[-2]

    @property
    def function(self) -> Function:
        if self._function is None:
            raise RuntimeError("No function set on this record.")
        return self._function

    @property
    def iteration_count(self) -> int:
        return self._iteration_count


__all__ = ["TransferData"]
