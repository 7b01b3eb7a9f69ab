"""
Base classes for resumable maze computations.

Maze generation, the diameter sweep, the shortest-path search and the wall
follower can all run for a long time on large grids. Each is written as an
explicit step-state object: every piece of state needed to resume lives on
the instance, so a caller can drive the work in bounded slices, inspect the
partial state in between, and cancel without corrupting anything.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from maze_routes.utils.exceptions import ComputationCancelledError, ComputationNotFinishedError

ResultT = TypeVar("ResultT")


class ResumableComputation(ABC, Generic[ResultT]):
    """
    Abstract base class for computations that advance one bounded step at a time.

    Subclasses implement ``_advance`` (one unit of work) and set
    ``self._finished`` and ``self._result`` when the work is complete.

    Example:
        >>> search = DiameterSearch(grid)
        >>> while not search.run(time_budget=0.01):
        ...     redraw_progress(search)
        >>> origin, destination = search.result()
    """

    name = "computation"

    def __init__(self) -> None:
        self.steps_taken = 0
        self._finished = False
        self._cancelled = False
        self._result: ResultT | None = None

    @abstractmethod
    def _advance(self) -> None:
        """Perform one bounded unit of work."""

    def step(self) -> bool:
        """
        Advance the computation by one step.

        Returns:
            True while more work remains, False once finished or cancelled
        """
        if self._finished or self._cancelled:
            return False
        self._advance()
        self.steps_taken += 1
        return not self._finished

    def is_done(self) -> bool:
        return self._finished

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        """Stop the computation; the partial state stays available for inspection."""
        self._cancelled = True

    def run(self, max_steps: int | None = None, time_budget: float | None = None) -> bool:
        """
        Drive the computation for one time slice.

        Args:
            max_steps: Maximum number of steps in this slice (None = unbounded)
            time_budget: Wall-clock budget for this slice in seconds (None = unbounded)

        Returns:
            True if the computation has finished
        """
        deadline = None if time_budget is None else time.perf_counter() + time_budget
        taken = 0
        while not self._finished and not self._cancelled:
            if max_steps is not None and taken >= max_steps:
                break
            if deadline is not None and taken > 0 and time.perf_counter() >= deadline:
                break
            self.step()
            taken += 1
        return self._finished

    def run_to_completion(self) -> ResultT:
        """Run every remaining step and return the result."""
        self.run()
        return self.result()

    def result(self) -> ResultT:
        """
        Get the computed result.

        Raises:
            ComputationCancelledError: If cancel() was called before completion
            ComputationNotFinishedError: If the computation is still running
        """
        if self._finished:
            return self._result
        if self._cancelled:
            raise ComputationCancelledError("result", component=self.name, steps_taken=self.steps_taken)
        raise ComputationNotFinishedError("result", component=self.name, steps_taken=self.steps_taken)
