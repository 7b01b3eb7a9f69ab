"""
Enhanced exception classes for maze_routes with helpful error messages and user guidance.

This module provides specialized exception classes that give users clear,
actionable error messages with suggested solutions.
"""

from __future__ import annotations

import numbers
from typing import Any


class MazeError(Exception):
    """
    Base exception for maze generation and routing errors.

    This exception class provides structured error information including:
    - Clear error description
    - Component context information
    - Suggested actions for resolution
    - Optional diagnostic data
    """

    def __init__(
        self,
        message: str,
        component: str | None = None,
        suggested_action: str | None = None,
        error_code: str | None = None,
        diagnostic_data: dict[str, Any] | None = None,
    ):
        self.component = component or "maze_routes"
        self.suggested_action = suggested_action
        self.error_code = error_code
        self.diagnostic_data = diagnostic_data or {}

        # Format comprehensive error message
        full_message = f"[{self.component}] {message}"

        if self.suggested_action:
            full_message += f"\nSuggestion: {self.suggested_action}"

        if self.error_code:
            full_message += f"\nError Code: {self.error_code}"

        if self.diagnostic_data:
            full_message += "\nDiagnostic Information:"
            for key, value in self.diagnostic_data.items():
                full_message += f"\n   - {key}: {value}"

        super().__init__(full_message)


class InvalidDimensionsError(MazeError, ValueError):
    """Exception raised when a maze is requested with a width or length below one."""

    def __init__(self, width: Any, length: Any, component: str | None = None):
        diagnostic_data = {
            "width": width,
            "length": length,
            "minimum": 1,
        }

        too_small = [name for name, value in (("width", width), ("length", length)) if value < 1]
        suggested_action = " | ".join(f"Increase {name} to at least 1" for name in too_small)

        super().__init__(
            message=f"Invalid maze dimensions {width}x{length}",
            component=component,
            suggested_action=suggested_action or None,
            error_code="INVALID_DIMENSIONS",
            diagnostic_data=diagnostic_data,
        )
        self.width = width
        self.length = length


class ConfigurationError(MazeError, ValueError):
    """Exception raised when a generation or routing parameter is invalid."""

    def __init__(
        self,
        parameter_name: str,
        provided_value: Any,
        expected_type: type | None = None,
        valid_range: tuple | None = None,
        component: str | None = None,
    ):
        diagnostic_data = {
            "parameter": parameter_name,
            "provided_value": str(provided_value),
            "provided_type": type(provided_value).__name__,
        }

        if expected_type:
            diagnostic_data["expected_type"] = expected_type.__name__

        if valid_range:
            diagnostic_data["valid_range"] = f"[{valid_range[0]}, {valid_range[1]}]"

        suggested_action = _generate_configuration_suggestions(
            parameter_name, provided_value, expected_type, valid_range
        )

        super().__init__(
            message=f"Invalid configuration for parameter '{parameter_name}'",
            component=component,
            suggested_action=suggested_action,
            error_code="INVALID_CONFIGURATION",
            diagnostic_data=diagnostic_data,
        )
        self.parameter_name = parameter_name
        self.provided_value = provided_value


class UnreachableError(MazeError):
    """Exception raised when no route exists between two cells."""

    def __init__(
        self,
        start: tuple[int, int],
        goal: tuple[int, int],
        expanded_cells: int | None = None,
        component: str | None = None,
    ):
        diagnostic_data: dict[str, Any] = {"start": start, "goal": goal}
        if expanded_cells is not None:
            diagnostic_data["expanded_cells"] = expanded_cells

        super().__init__(
            message=f"No route from {start} to {goal}",
            component=component,
            suggested_action="Check that the grid was produced by build_maze and both cells lie inside it",
            error_code="UNREACHABLE",
            diagnostic_data=diagnostic_data,
        )
        self.start = start
        self.goal = goal


class ComputationNotFinishedError(MazeError):
    """Exception raised when trying to access a result before the computation completed."""

    def __init__(self, operation_attempted: str, component: str | None = None, steps_taken: int = 0):
        super().__init__(
            message=f"Cannot perform '{operation_attempted}' - computation has not finished",
            component=component,
            suggested_action="Call run() or step() until is_done() returns True",
            error_code="RESULT_NOT_AVAILABLE",
            diagnostic_data={"attempted_operation": operation_attempted, "steps_taken": steps_taken},
        )


class ComputationCancelledError(MazeError):
    """Exception raised when trying to access the result of a cancelled computation."""

    def __init__(self, operation_attempted: str, component: str | None = None, steps_taken: int = 0):
        super().__init__(
            message=f"Cannot perform '{operation_attempted}' - computation was cancelled",
            component=component,
            suggested_action="Start a new computation instead of resuming a cancelled one",
            error_code="CANCELLED",
            diagnostic_data={"attempted_operation": operation_attempted, "steps_taken": steps_taken},
        )


# Helper functions for generating specific suggestions


def _generate_configuration_suggestions(
    parameter_name: str,
    provided_value: Any,
    expected_type: type | None,
    valid_range: tuple | None,
) -> str:
    """Generate specific suggestions for configuration errors."""

    suggestions = []

    if expected_type and not isinstance(provided_value, expected_type):
        suggestions.append(f"Convert {parameter_name} to {expected_type.__name__}")

    if valid_range and isinstance(provided_value, (int, float)):
        if provided_value < valid_range[0]:
            suggestions.append(f"Increase {parameter_name} to at least {valid_range[0]}")
        elif provided_value > valid_range[1]:
            suggestions.append(f"Decrease {parameter_name} to at most {valid_range[1]}")

    if "bias" in parameter_name.lower():
        suggestions.append("Wall bias is a percentage: 0 carves the most passages, 100 the fewest")

    return " | ".join(suggestions) if suggestions else f"Check {parameter_name} value and try again"


# Convenience functions for common error scenarios


def validate_dimensions(width: int, length: int, component: str | None = None) -> None:
    """Validate that a maze has at least one cell along each axis."""
    validate_parameter_value(width, "width", numbers.Integral, component=component)
    validate_parameter_value(length, "length", numbers.Integral, component=component)
    if width < 1 or length < 1:
        raise InvalidDimensionsError(width, length, component=component)


def validate_parameter_value(
    value: Any,
    parameter_name: str,
    expected_type: type | tuple[type, ...] | None = None,
    valid_range: tuple | None = None,
    component: str | None = None,
):
    """Validate parameter value and type."""
    if expected_type and (not isinstance(value, expected_type) or isinstance(value, bool)):
        raise ConfigurationError(
            parameter_name=parameter_name,
            provided_value=value,
            expected_type=expected_type if isinstance(expected_type, type) else expected_type[0],
            component=component,
        )

    if valid_range and isinstance(value, (int, float)):
        if not (valid_range[0] <= value <= valid_range[1]):
            raise ConfigurationError(
                parameter_name=parameter_name,
                provided_value=value,
                valid_range=valid_range,
                component=component,
            )


def validate_position(
    position: tuple[int, int],
    width: int,
    length: int,
    parameter_name: str = "position",
    component: str | None = None,
):
    """Validate that a position lies inside a width x length grid."""
    x, y = position
    if not (0 <= x < width and 0 <= y < length):
        raise ConfigurationError(
            parameter_name=parameter_name,
            provided_value=(x, y),
            valid_range=((0, 0), (width - 1, length - 1)),
            component=component,
        )
