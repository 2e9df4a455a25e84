"""
Setup helpers for MOEA/D.

Validates the configuration against the supplied problem, then builds
weight vectors, neighbourhoods, the initial population and the archive.
Configuration errors are raised before any objective is evaluated.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Sequence

import numpy as np

from .archive import ParetoArchive
from .config import MOEADConfigData
from .exceptions import ConfigurationError, ObjectiveCountError
from .hooks import CallbackList, RunContext
from .population import Population
from .state import MOEADState, RunStatus
from .variation import VariationOperator, resolve_bounds
from .weights import WeightVectorSet


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


def _check_objectives(objectives: Sequence[Callable[[np.ndarray], float]]) -> tuple:
    objectives = tuple(objectives)
    if not objectives:
        raise ObjectiveCountError(0)
    for k, objective in enumerate(objectives):
        if not callable(objective):
            raise ConfigurationError(f"Objective {k} is not callable ({type(objective).__name__}).")
    return objectives


def initialize_moead_run(
    cfg: MOEADConfigData,
    objectives: Sequence[Callable[[np.ndarray], float]],
    initial_point: Any,
    callbacks: Sequence[Any] = (),
) -> MOEADState:
    """Initialize all components for a MOEA/D run.

    Parameters
    ----------
    cfg : MOEADConfigData
        Algorithm configuration.
    objectives : Sequence[Callable]
        Objective functions mapping a point to a float.
    initial_point : array-like
        Point around which the initial population is sampled.
    callbacks : Sequence
        Progress hooks (see ``moead.hooks``).

    Returns
    -------
    MOEADState
        State in the ``INITIALIZED`` status, population evaluated and the
        archive seeded.
    """
    objectives = _check_objectives(objectives)
    x0 = np.asarray(initial_point, dtype=float).ravel()
    if x0.size == 0:
        raise ConfigurationError("initial_point must have at least one coordinate.")
    cfg.validate()
    n_var = int(x0.size)
    n_obj = len(objectives)
    lower, upper = resolve_bounds(cfg.lower_bound, cfg.upper_bound, n_var)

    rng = np.random.default_rng(cfg.seed)
    weight_set = WeightVectorSet.build(
        cfg.population_size,
        n_obj,
        cfg.neighbourhood_size,
        rng=rng,
        path=cfg.weight_vectors_path,
    )
    variation = VariationOperator.build(
        cfg.crossover_prob, cfg.mutation_prob, cfg.mutation_strength, lower, upper
    )
    population = Population.initialize(x0, lower, upper, cfg.population_size, n_obj, rng)

    state = MOEADState(
        config=cfg,
        objectives=objectives,
        weight_set=weight_set,
        population=population,
        archive=ParetoArchive(),
        variation=variation,
        rng=rng,
        lower=lower,
        upper=upper,
        callbacks=CallbackList(callbacks),
        status=RunStatus.INITIALIZED,
    )
    state.callbacks.on_start(RunContext(n_var=n_var, n_obj=n_obj, config=cfg))

    population.evaluate(objectives, on_evaluation=state.count_evaluation)
    inserted = state.archive.seed(population.X, population.F)
    _logger().debug(
        "MOEA/D initialized: pop_size=%d, n_var=%d, n_obj=%d, archive=%d.",
        cfg.population_size,
        n_var,
        n_obj,
        inserted,
    )
    return state


__all__ = ["initialize_moead_run"]
