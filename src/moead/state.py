"""
MOEA/D run state.

This module provides the MOEADState dataclass that holds all mutable state
of a single ``MOEAD.optimize`` call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Sequence

import numpy as np

from .archive import ParetoArchive
from .config import MOEADConfigData
from .hooks import CallbackList
from .population import Population
from .variation import VariationOperator
from .weights import WeightVectorSet


class RunStatus(str, Enum):
    UNINITIALIZED = "uninitialized"
    INITIALIZED = "initialized"
    RUNNING = "running"
    TERMINATED = "terminated"


@dataclass
class MOEADState:
    """
    Mutable state container for one MOEA/D run.

    Attributes
    ----------
    config : MOEADConfigData
        Configuration the run was started with.
    objectives : Sequence[Callable]
        Objective functions, one per objective.
    weight_set : WeightVectorSet
        Weight vectors and neighbourhoods (immutable).
    population : Population
        One point per subproblem plus the ideal point.
    archive : ParetoArchive
        Non-dominated solutions found so far.
    variation : VariationOperator
        Crossover + mutation pipeline.
    rng : np.random.Generator
        Random stream shared by mating, crossover and mutation.
    lower, upper : np.ndarray
        Bounds broadcast to the variable-space dimension.
    callbacks : CallbackList
        Progress hooks.
    """

    config: MOEADConfigData
    objectives: Sequence[Callable[[np.ndarray], float]]
    weight_set: WeightVectorSet
    population: Population
    archive: ParetoArchive
    variation: VariationOperator
    rng: np.random.Generator
    lower: np.ndarray
    upper: np.ndarray
    callbacks: CallbackList = field(default_factory=CallbackList)
    generation: int = 0
    n_eval: int = 0
    status: RunStatus = RunStatus.INITIALIZED
    stopped_early: bool = False

    @property
    def n_obj(self) -> int:
        return len(self.objectives)

    def count_evaluation(self, point: np.ndarray, objectives: np.ndarray) -> None:
        self.n_eval += 1
        self.callbacks.on_evaluation(point, objectives)

    def stats(self) -> dict[str, object]:
        return {
            "evaluations": self.n_eval,
            "ideal": self.population.ideal.copy(),
            "archive_size": len(self.archive),
        }


__all__ = ["MOEADState", "RunStatus"]
