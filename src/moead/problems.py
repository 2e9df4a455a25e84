"""
Benchmark objective sets.

Each problem bundles its objective callables, box bounds and a starting
point so it can be handed straight to ``MOEAD.optimize``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Sequence

import numpy as np

from .exceptions import ConfigurationError

Objective = Callable[[np.ndarray], float]


@dataclass(frozen=True)
class BenchmarkProblem:
    name: str
    objectives: Sequence[Objective]
    lower: float
    upper: float
    initial_point: np.ndarray

    @property
    def n_var(self) -> int:
        return int(self.initial_point.shape[0])

    @property
    def n_obj(self) -> int:
        return len(self.objectives)


def schaffer_n1() -> BenchmarkProblem:
    """Schaffer function N.1: f1 = x^2, f2 = (x - 2)^2 on [-1000, 1000]."""
    return BenchmarkProblem(
        name="schaffer_n1",
        objectives=(lambda x: float(x[0] ** 2), lambda x: float((x[0] - 2.0) ** 2)),
        lower=-1000.0,
        upper=1000.0,
        initial_point=np.zeros(1),
    )


def two_parabolas() -> BenchmarkProblem:
    """Same objectives as Schaffer N.1 on the narrower box [-10, 10]."""
    return BenchmarkProblem(
        name="two_parabolas",
        objectives=(lambda x: float(x[0] ** 2), lambda x: float((x[0] - 2.0) ** 2)),
        lower=-10.0,
        upper=10.0,
        initial_point=np.ones(1),
    )


def fonseca_fleming(n_var: int = 3) -> BenchmarkProblem:
    """Fonseca-Fleming function on [-4, 4]^n; the Pareto set is x_i = t, t in [-1/sqrt(n), 1/sqrt(n)]."""
    shift = 1.0 / np.sqrt(n_var)

    def f1(x: np.ndarray) -> float:
        return float(1.0 - np.exp(-np.sum((x - shift) ** 2)))

    def f2(x: np.ndarray) -> float:
        return float(1.0 - np.exp(-np.sum((x + shift) ** 2)))

    return BenchmarkProblem(
        name="fonseca_fleming",
        objectives=(f1, f2),
        lower=-4.0,
        upper=4.0,
        initial_point=np.zeros(n_var),
    )


PROBLEMS: Dict[str, Callable[[], BenchmarkProblem]] = {
    "schaffer_n1": schaffer_n1,
    "two_parabolas": two_parabolas,
    "fonseca_fleming": fonseca_fleming,
}


def available_problem_names() -> list[str]:
    return sorted(PROBLEMS)


def get_problem(name: str) -> BenchmarkProblem:
    key = name.lower().replace("-", "_")
    if key not in PROBLEMS:
        raise ConfigurationError(
            f"Unknown problem '{name}'.",
            suggestion=f"Available problems: {', '.join(available_problem_names())}",
        )
    return PROBLEMS[key]()


__all__ = [
    "BenchmarkProblem",
    "available_problem_names",
    "fonseca_fleming",
    "get_problem",
    "schaffer_n1",
    "two_parabolas",
]
