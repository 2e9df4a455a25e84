"""
Population of one candidate per subproblem.

Keeps the decision vectors ``X`` (pop_size, n_var), their cached objective
vectors ``F`` (pop_size, n_obj) and the running ideal point.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence

import numpy as np

from .exceptions import EvaluationError, NumericAnomalyError, ObjectiveCountError

ObjectiveFn = Callable[[np.ndarray], float]
EvaluationCallback = Callable[[np.ndarray, np.ndarray], None]


def evaluate_objectives(objectives: Sequence[ObjectiveFn], point: np.ndarray) -> np.ndarray:
    """
    Evaluate every objective on ``point``.

    Raises
    ------
    NumericAnomalyError
        If an objective returns NaN or an infinite value.
    EvaluationError
        If an objective returns something that is not a real scalar.
    """
    if len(objectives) == 0:
        raise ObjectiveCountError(0)
    values = np.empty(len(objectives), dtype=float)
    for k, objective in enumerate(objectives):
        raw = objective(point)
        try:
            value = float(raw)
        except (TypeError, ValueError) as exc:
            raise EvaluationError(
                f"Objective {k} returned {type(raw).__name__}, expected a real scalar.",
                solution=point,
                details={"objective_index": k},
            ) from exc
        if not np.isfinite(value):
            raise NumericAnomalyError(k, value, solution=np.array(point, copy=True))
        values[k] = value
    return values


class Population:
    """Candidate points, their objective vectors and the ideal point."""

    def __init__(self, X: np.ndarray, n_obj: int) -> None:
        self.X = np.array(X, dtype=float)
        if self.X.ndim != 2:
            raise ValueError("Population points must have shape (pop_size, n_var).")
        self.F = np.full((self.X.shape[0], n_obj), np.nan)
        self.ideal = np.full(n_obj, np.inf)
        self.evaluated = False

    @classmethod
    def initialize(
        cls,
        iterate: np.ndarray,
        lower: np.ndarray,
        upper: np.ndarray,
        pop_size: int,
        n_obj: int,
        rng: np.random.Generator,
    ) -> "Population":
        """Sample ``pop_size`` points around ``iterate`` and clip them to the bounds."""
        x0 = np.asarray(iterate, dtype=float).ravel()
        noise = rng.uniform(-0.5, 0.5, size=(pop_size, x0.shape[0]))
        X = np.clip(x0[None, :] + noise, lower, upper)
        return cls(X, n_obj)

    @property
    def size(self) -> int:
        return int(self.X.shape[0])

    @property
    def n_var(self) -> int:
        return int(self.X.shape[1])

    @property
    def n_obj(self) -> int:
        return int(self.F.shape[1])

    def evaluate(
        self,
        objectives: Sequence[ObjectiveFn],
        on_evaluation: Optional[EvaluationCallback] = None,
    ) -> np.ndarray:
        """Evaluate every point, refresh ``F`` and fold the results into the ideal point."""
        for i in range(self.size):
            f = evaluate_objectives(objectives, self.X[i])
            self.F[i] = f
            self._update_ideal(f)
            if on_evaluation is not None:
                on_evaluation(self.X[i], f)
        self.evaluated = True
        return self.F

    def evaluate_candidate(
        self,
        point: np.ndarray,
        objectives: Sequence[ObjectiveFn],
        on_evaluation: Optional[EvaluationCallback] = None,
    ) -> np.ndarray:
        """Evaluate a candidate that is not (yet) part of the population."""
        f = evaluate_objectives(objectives, point)
        self._update_ideal(f)
        if on_evaluation is not None:
            on_evaluation(point, f)
        return f

    def replace(self, idx: int, point: np.ndarray, objectives: np.ndarray) -> None:
        """Overwrite slot ``idx`` with a new point and its objective vector."""
        x = np.asarray(point, dtype=float)
        f = np.asarray(objectives, dtype=float)
        if x.shape != (self.n_var,) or f.shape != (self.n_obj,):
            raise ValueError(
                f"Replacement shapes {x.shape}/{f.shape} do not match "
                f"({self.n_var},)/({self.n_obj},)."
            )
        self.X[idx] = x
        self.F[idx] = f

    def _update_ideal(self, f: np.ndarray) -> None:
        np.minimum(self.ideal, f, out=self.ideal)


__all__ = ["Population", "evaluate_objectives"]
