"""
MOEA/D evolutionary algorithm core.

This module contains the main MOEAD class with the generational loop.
- Setup logic: initialization.py
- State: state.py
- Scalarization: decomposition.py

References:
    Q. Zhang and H. Li, "MOEA/D: A Multiobjective Evolutionary Algorithm Based on
    Decomposition," IEEE Trans. Evolutionary Computation, vol. 11, no. 6, 2007.
"""

from __future__ import annotations

import logging
from dataclasses import fields, replace
from typing import Any, Callable, Sequence

import numpy as np

from .archive import ArchiveSnapshot
from .config import MOEADConfigData
from .decomposition import tchebycheff
from .exceptions import ConfigurationError, RunStateError
from .initialization import initialize_moead_run
from .state import MOEADState, RunStatus


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


def _empty_front() -> ArchiveSnapshot:
    return ArchiveSnapshot(X=np.empty((0, 0)), F=np.empty((0, 0)))


def _config_property(name: str, doc: str) -> property:
    def getter(self: "MOEAD") -> Any:
        return getattr(self.cfg, name)

    def setter(self: "MOEAD", value: Any) -> None:
        if self.status is RunStatus.RUNNING:
            raise RunStateError(f"change {name}", self.status.value)
        self.cfg = replace(self.cfg, **{name: value})

    return property(getter, setter, doc=doc)


class MOEAD:
    """
    Multi-Objective Evolutionary Algorithm based on Decomposition.

    MOEA/D decomposes a multi-objective problem into scalar subproblems using
    weight vectors and optimizes them collaboratively via neighborhood-based
    mating and replacement. Every child is also offered to an unbounded
    Pareto archive, whose contents are the result of the run.

    Parameters
    ----------
    config : MOEADConfigData, optional
        Algorithm configuration; defaults to ``MOEADConfigData()``.
    **overrides
        Individual configuration fields overriding ``config``.

    Examples
    --------
    >>> opt = MOEAD(population_size=20, neighbourhood_size=5,
    ...             lower_bound=-10.0, upper_bound=10.0, max_generations=50, seed=1)
    >>> value = opt.optimize([lambda x: x[0] ** 2, lambda x: (x[0] - 2) ** 2], [1.0])
    >>> front = opt.front
    """

    population_size = _config_property("population_size", "Number of subproblems / population members.")
    crossover_prob = _config_property("crossover_prob", "Probability of taking a gene from the first parent.")
    mutation_prob = _config_property("mutation_prob", "Per-coordinate mutation probability.")
    mutation_strength = _config_property("mutation_strength", "Standard deviation of the Gaussian mutation.")
    neighbourhood_size = _config_property("neighbourhood_size", "Number of nearest weight vectors per subproblem.")
    lower_bound = _config_property("lower_bound", "Lower bound of the variable space.")
    upper_bound = _config_property("upper_bound", "Upper bound of the variable space.")
    max_generations = _config_property("max_generations", "Generation budget.")
    global_mating_prob = _config_property(
        "global_mating_prob", "Probability of mating from the whole population instead of the neighbourhood."
    )
    seed = _config_property("seed", "Seed of the random stream.")
    weight_vectors_path = _config_property("weight_vectors_path", "Optional CSV file with weight vectors.")

    def __init__(self, config: MOEADConfigData | None = None, **overrides: Any) -> None:
        base = config if config is not None else MOEADConfigData()
        unknown = sorted(set(overrides) - {f.name for f in fields(MOEADConfigData)})
        if unknown:
            raise ConfigurationError(f"Unknown MOEA/D parameters: {', '.join(unknown)}.")
        self.cfg = replace(base, **overrides) if overrides else base
        self.status = RunStatus.UNINITIALIZED
        self._st: MOEADState | None = None
        self._front = _empty_front()

    @property
    def state(self) -> MOEADState | None:
        """State of the current or last run; None before ``optimize``."""
        return self._st

    @property
    def front(self) -> list[np.ndarray]:
        """Points of the best front; empty until a generation has completed."""
        return [row.copy() for row in self._front.X]

    @property
    def front_objectives(self) -> list[np.ndarray]:
        """Objective vectors matching ``front`` element-wise."""
        return [row.copy() for row in self._front.F]

    def front_snapshot(self) -> ArchiveSnapshot:
        return ArchiveSnapshot(X=self._front.X.copy(), F=self._front.F.copy())

    def optimize(
        self,
        objectives: Sequence[Callable[[np.ndarray], float]],
        initial_point: Any,
        *callbacks: Any,
    ) -> float:
        """
        Run MOEA/D on ``objectives`` starting around ``initial_point``.

        Parameters
        ----------
        objectives : Sequence[Callable]
            Objective functions, each mapping a point to a float (minimized).
        initial_point : array-like
            Reference point for sampling the initial population; its length
            fixes the variable-space dimension.
        *callbacks
            Progress hooks; see ``moead.hooks.MOEADCallback``.

        Returns
        -------
        float
            The smallest sum of objective values over the final front, or
            over the evaluated population when the run stopped before the
            first generation (the front is then empty). The front itself is
            available from ``front`` / ``front_objectives``.

        Raises
        ------
        ConfigurationError
            On invalid bounds, neighbourhood size or objective list, before
            any evaluation takes place.
        NumericAnomalyError
            If an objective returns a non-finite value.
        """
        if self.status is RunStatus.RUNNING:
            raise RunStateError("start a new run", self.status.value)
        self._st = None
        self.status = RunStatus.UNINITIALIZED
        self._front = _empty_front()

        st = initialize_moead_run(self.cfg, objectives, initial_point, callbacks)
        self._st = st
        self.status = RunStatus.INITIALIZED
        _logger().info(
            "MOEA/D: optimizing %d objective(s) with population %d for up to %d generation(s).",
            st.n_obj,
            self.cfg.population_size,
            self.cfg.max_generations,
        )

        self.status = st.status = RunStatus.RUNNING
        try:
            while st.generation < self.cfg.max_generations:
                if st.callbacks.should_stop():
                    st.stopped_early = True
                    _logger().info("MOEA/D: stop requested after %d generation(s).", st.generation)
                    break
                self._run_generation(st)
                st.generation += 1
                self._front = st.archive.snapshot()
                _logger().debug(
                    "MOEA/D: generation %d, evaluations %d, front size %d.",
                    st.generation,
                    st.n_eval,
                    len(self._front),
                )
                st.callbacks.on_generation(st.generation, F=self._front.F, X=self._front.X, stats=st.stats())
        finally:
            self.status = st.status = RunStatus.TERMINATED

        # The front is only published once a generation has completed.
        if st.generation > 0:
            self._front = st.archive.snapshot()
        scored = self._front.F if len(self._front) else st.population.F
        st.callbacks.on_end(final_F=self._front.F, final_stats=st.stats())
        _logger().info(
            "MOEA/D: finished after %d generation(s), %d evaluations, front size %d.",
            st.generation,
            st.n_eval,
            len(self._front),
        )
        return float(np.min(scored.sum(axis=1)))

    def _run_generation(self, st: MOEADState) -> None:
        """Sweep every subproblem once, in index order."""
        for i in range(st.weight_set.size):
            self._evolve_subproblem(st, i)

    @staticmethod
    def _select_parents(st: MOEADState, idx: int) -> tuple[int, int]:
        pop_size = st.population.size
        use_global = st.rng.random() < st.config.global_mating_prob
        mating_pool = np.arange(pop_size) if use_global else st.weight_set.neighborhood(idx)
        if mating_pool.size < 2:
            mating_pool = np.arange(pop_size)
        a, b = st.rng.choice(mating_pool, size=2, replace=False)
        return int(a), int(b)

    def _evolve_subproblem(self, st: MOEADState, idx: int) -> None:
        pop = st.population
        a, b = self._select_parents(st, idx)
        child = st.variation(pop.X[a], pop.X[b], st.rng)
        child_f = pop.evaluate_candidate(child, st.objectives, on_evaluation=st.count_evaluation)

        # Scores use the ideal point as updated by this child.
        neighbor_idx = st.weight_set.neighborhood(idx)
        local_weights = st.weight_set.weights[neighbor_idx]
        current_vals = tchebycheff(pop.F[neighbor_idx], local_weights, pop.ideal)
        child_vals = tchebycheff(child_f[None, :], local_weights, pop.ideal)
        for j in neighbor_idx[child_vals <= current_vals]:
            pop.replace(int(j), child, child_f)

        st.archive.update(child, child_f)


__all__ = ["MOEAD"]
