"""
MOEA/D exception hierarchy.

Provides user-friendly exceptions with helpful error messages and suggestions.
All package exceptions inherit from MOEADError for easy catching.

Example:
    try:
        optimizer.optimize(objectives, x0)
    except MOEADError as e:
        print(f"Optimization failed: {e}")
        print(f"Suggestion: {e.suggestion}")
"""

from __future__ import annotations

from typing import Any


class MOEADError(Exception):
    """
    Base exception for all MOEA/D errors.

    Attributes:
        message: Human-readable error description
        suggestion: Optional suggestion for fixing the error
        details: Optional dict with additional context
    """

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the full error message with suggestion."""
        msg = self.message
        if self.suggestion:
            msg += f"\n\nSuggestion: {self.suggestion}"
        return msg


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(MOEADError):
    """Raised when configuration is invalid or incomplete."""

    pass


class BoundsError(ConfigurationError):
    """Raised when bounds are invalid or inconsistent."""

    def __init__(self, message: str, n_var: int | None = None) -> None:
        suggestion = "Pass bounds of length 1 or of the variable-space dimension, with lower <= upper"
        super().__init__(message, suggestion, {"n_var": n_var})


class NeighbourhoodSizeError(ConfigurationError):
    """Raised when the neighbourhood does not fit in the population."""

    def __init__(self, neighbourhood_size: int, population_size: int) -> None:
        message = (
            f"neighbourhood_size={neighbourhood_size} is out of range for "
            f"population_size={population_size}."
        )
        suggestion = "Use 1 <= neighbourhood_size <= population_size"
        super().__init__(
            message,
            suggestion,
            {"neighbourhood_size": neighbourhood_size, "population_size": population_size},
        )


class ObjectiveCountError(ConfigurationError):
    """Raised when no objective functions are supplied."""

    def __init__(self, n_obj: int = 0) -> None:
        message = f"At least one objective function is required (got {n_obj})."
        suggestion = "Pass a non-empty sequence of callables mapping a point to a float"
        super().__init__(message, suggestion, {"n_obj": n_obj})


# =============================================================================
# Runtime Errors
# =============================================================================


class OptimizationError(MOEADError):
    """Raised when optimization fails during execution."""

    pass


class EvaluationError(OptimizationError):
    """Raised when objective evaluation fails."""

    def __init__(self, message: str, solution: Any = None, details: dict[str, Any] | None = None) -> None:
        suggestion = "Check your objective functions for errors"
        payload = {"solution": solution}
        payload.update(details or {})
        super().__init__(message, suggestion, payload)


class NumericAnomalyError(EvaluationError):
    """Raised when an objective returns a non-finite value."""

    def __init__(self, objective_index: int, value: float, solution: Any = None) -> None:
        self.objective_index = objective_index
        self.value = value
        message = f"Objective {objective_index} returned a non-finite value ({value!r})."
        super().__init__(message, solution, {"objective_index": objective_index, "value": value})


class RunStateError(MOEADError):
    """Raised when an operation is not valid in the current run state."""

    def __init__(self, operation: str, state: str) -> None:
        message = f"Cannot {operation} while the run is {state}."
        super().__init__(message, None, {"operation": operation, "state": state})


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Base
    "MOEADError",
    # Configuration
    "ConfigurationError",
    "BoundsError",
    "NeighbourhoodSizeError",
    "ObjectiveCountError",
    # Runtime
    "OptimizationError",
    "EvaluationError",
    "NumericAnomalyError",
    "RunStateError",
]
