"""
Standardized result objects for maze routes.

A route is an ordered list of edges forming a contiguous walk from a start
cell. Routes from the wall follower may stop before the goal; the
termination reason says why, so a partial route is a defined outcome rather
than an error.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from maze_routes.geometry.mazes.maze_grid import Edge, Position


class RouteTermination(Enum):
    """Why a route stopped."""

    REACHED_GOAL = "reached_goal"
    LOOP_DETECTED = "loop_detected"
    LEFT_GRID = "left_grid"
    NO_EXIT = "no_exit"


@dataclass
class Route:
    """
    Result object for shortest-path and wall-follower routes.

    Attributes:
        start: Cell the route starts from
        goal: Cell the route was asked to reach
        edges: Ordered steps; each edge's destination is the next edge's position
        termination: Why the route stopped
        algorithm: Name of the algorithm that produced the route
        metadata: Additional algorithm-specific information
    """

    start: Position
    goal: Position
    edges: list[Edge] = field(default_factory=list)
    termination: RouteTermination = RouteTermination.REACHED_GOAL
    algorithm: str = "unknown"
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Validate that the edges form a contiguous walk from start."""
        position = self.start
        for index, edge in enumerate(self.edges):
            if edge.position != position:
                raise ValueError(f"Route is not contiguous at edge {index}: expected {position}, got {edge.position}")
            position = edge.leads_to()

    def __len__(self):
        return len(self.edges)

    def __iter__(self):
        return iter(self.edges)

    @property
    def end(self) -> Position:
        """Cell reached after the last edge (the start for an empty route)."""
        return self.edges[-1].leads_to() if self.edges else self.start

    @property
    def reached_goal(self) -> bool:
        return self.termination == RouteTermination.REACHED_GOAL and self.end == self.goal

    @property
    def is_partial(self) -> bool:
        return not self.reached_goal

    def positions(self) -> list[Position]:
        """Every cell visited, start included."""
        return [self.start] + [edge.leads_to() for edge in self.edges]

    def directions(self) -> list:
        return [edge.direction for edge in self.edges]

    def to_dict(self) -> dict[str, Any]:
        return {
            "start": list(self.start),
            "goal": list(self.goal),
            "edges": [[list(edge.position), edge.direction.name] for edge in self.edges],
            "termination": self.termination.value,
            "algorithm": self.algorithm,
            "metadata": dict(self.metadata),
        }
