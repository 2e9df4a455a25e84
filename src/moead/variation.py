"""Real-valued variation operators: uniform crossover and Gaussian mutation."""

from __future__ import annotations

from typing import Tuple, Union

import numpy as np

from .exceptions import BoundsError

ArrayLike = Union[np.ndarray, list, tuple, float]


def resolve_bounds(lower: ArrayLike, upper: ArrayLike, n_var: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Validate bounds and broadcast them to the variable-space dimension.

    Bounds of length 1 (or scalars) apply to every variable.
    """
    lower_arr = np.atleast_1d(np.asarray(lower, dtype=float)).ravel()
    upper_arr = np.atleast_1d(np.asarray(upper, dtype=float)).ravel()
    for name, arr in (("lower", lower_arr), ("upper", upper_arr)):
        if arr.shape[0] not in (1, n_var):
            raise BoundsError(
                f"{name} bound has {arr.shape[0]} entries; expected 1 or {n_var}.", n_var=n_var
            )
    lower_arr = np.broadcast_to(lower_arr, (n_var,)).copy()
    upper_arr = np.broadcast_to(upper_arr, (n_var,)).copy()
    if np.any(lower_arr > upper_arr):
        raise BoundsError("Each lower bound must be <= corresponding upper bound.", n_var=n_var)
    return lower_arr, upper_arr


def _check_nvars(n_vars: int, bounds: np.ndarray) -> None:
    """Ensure that a bounds array matches the provided dimensionality."""
    if bounds.shape[0] != n_vars:
        raise ValueError("Bounds dimensionality does not match the individual size.")


class UniformCrossover:
    """Binary (uniform) crossover between two parents.

    Each coordinate comes from the first parent with probability ``prob`` and
    from the second parent otherwise.
    """

    def __init__(self, prob: float) -> None:
        self.prob = float(prob)

    def __call__(self, parent_a: ArrayLike, parent_b: ArrayLike, rng: np.random.Generator) -> np.ndarray:
        a = np.asarray(parent_a, dtype=float)
        b = np.asarray(parent_b, dtype=float)
        if a.shape != b.shape:
            raise ValueError("Parents must have the same shape.")
        mask = rng.random(a.shape) < self.prob
        return np.where(mask, a, b)


class GaussianMutation:
    """Gaussian mutation with bounds clamping."""

    def __init__(
        self,
        prob: float,
        strength: float,
        *,
        lower: np.ndarray,
        upper: np.ndarray,
    ) -> None:
        self.prob = float(prob)
        self.strength = float(strength)
        self.lower = np.asarray(lower, dtype=float)
        self.upper = np.asarray(upper, dtype=float)

    def __call__(self, child: ArrayLike, rng: np.random.Generator) -> np.ndarray:
        x = np.array(child, dtype=float)
        _check_nvars(x.shape[-1], self.lower)
        mask = rng.random(x.shape) < self.prob
        noise = rng.normal(0.0, 1.0, size=x.shape)
        x[mask] += self.strength * noise[mask]
        return np.clip(x, self.lower, self.upper)


class VariationOperator:
    """Crossover followed by mutation; produces one child from two parents."""

    def __init__(self, crossover: UniformCrossover, mutation: GaussianMutation) -> None:
        self.crossover = crossover
        self.mutation = mutation

    @classmethod
    def build(
        cls,
        crossover_prob: float,
        mutation_prob: float,
        mutation_strength: float,
        lower: np.ndarray,
        upper: np.ndarray,
    ) -> "VariationOperator":
        return cls(
            UniformCrossover(crossover_prob),
            GaussianMutation(mutation_prob, mutation_strength, lower=lower, upper=upper),
        )

    def __call__(self, parent_a: ArrayLike, parent_b: ArrayLike, rng: np.random.Generator) -> np.ndarray:
        return self.mutation(self.crossover(parent_a, parent_b, rng), rng)


__all__ = [
    "GaussianMutation",
    "UniformCrossover",
    "VariationOperator",
    "resolve_bounds",
]
