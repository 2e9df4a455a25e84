"""
Weight vectors and neighbourhoods for decomposition.

Each subproblem owns one weight vector on the objective simplex. The
neighbourhood of subproblem ``i`` is the set of subproblems whose weight
vectors are closest to ``w_i``; it restricts both mating and replacement.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from math import comb
from pathlib import Path
from typing import Optional

import numpy as np

from .exceptions import ConfigurationError, NeighbourhoodSizeError


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


def generate_weight_vectors(
    pop_size: int,
    n_obj: int,
    *,
    rng: Optional[np.random.Generator] = None,
    divisions: Optional[int] = None,
) -> np.ndarray:
    """
    Generate ``pop_size`` weight vectors spanning the ``n_obj`` simplex.

    Parameters
    ----------
    pop_size : int
        Number of subproblems.
    n_obj : int
        Number of objectives.
    rng : np.random.Generator, optional
        Used to pick a subset of the lattice when it has more points than
        ``pop_size`` (three or more objectives).
    divisions : int, optional
        Lattice divisions for ``n_obj > 2``; raised automatically when too
        small to provide ``pop_size`` vectors.

    Returns
    -------
    np.ndarray
        Weight matrix, shape (pop_size, n_obj).
    """
    if pop_size < 1:
        raise ConfigurationError(f"pop_size must be >= 1 (got {pop_size}).")
    if n_obj < 1:
        raise ConfigurationError(f"n_obj must be >= 1 (got {n_obj}).")
    if n_obj == 1:
        # Degenerate single-objective: every subproblem is the same.
        return np.ones((pop_size, 1), dtype=float)
    if n_obj == 2:
        if pop_size == 1:
            return np.array([[0.5, 0.5]])
        w1 = np.arange(pop_size, dtype=float) / (pop_size - 1)
        return np.column_stack([w1, 1.0 - w1])

    min_divisions = _choose_min_divisions(pop_size, n_obj)
    divisions = min_divisions if divisions is None else max(int(divisions), min_divisions)
    lattice = _simplex_lattice(n_obj, divisions)
    if lattice.shape[0] == pop_size:
        return lattice

    rng = rng if rng is not None else np.random.default_rng()
    # Keep the simplex corners so every objective has an extreme subproblem.
    corners = np.flatnonzero(np.isclose(lattice.max(axis=1), 1.0))
    others = np.setdiff1d(np.arange(lattice.shape[0]), corners)
    n_corners = min(corners.size, pop_size)
    picked = rng.choice(others, size=pop_size - n_corners, replace=False)
    keep = np.sort(np.concatenate([corners[:n_corners], picked]))
    _logger().debug(
        "Sampled %d of %d lattice weight vectors (divisions=%d).", pop_size, lattice.shape[0], divisions
    )
    return lattice[keep]


def load_weight_vectors(path: str | Path, pop_size: int, n_obj: int) -> np.ndarray:
    """Load weight vectors from a CSV file and keep the first ``pop_size`` rows."""
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(
            f"Weight file '{path}' does not exist.",
            suggestion="Check weight_vectors_path or leave it unset to generate weights",
        )
    weights = np.atleast_2d(np.loadtxt(path, delimiter=",")).astype(float, copy=False)
    if n_obj == 1 and weights.shape[0] == 1 and weights.shape[1] != 1:
        weights = weights.T
    _assert_valid_weights(weights, n_obj)
    if weights.shape[0] < pop_size:
        raise ConfigurationError(
            f"Weight file '{path}' contains {weights.shape[0]} vectors "
            f"but pop_size={pop_size} requires at least that many."
        )
    return weights[:pop_size]


def _assert_valid_weights(weights: np.ndarray, n_obj: int) -> None:
    if weights.ndim != 2:
        raise ConfigurationError("Weight matrix must be 2D.")
    if weights.shape[1] != n_obj:
        raise ConfigurationError(
            f"Expected weight vectors with {n_obj} columns, got {weights.shape[1]}."
        )
    if np.any(weights < 0.0):
        raise ConfigurationError("Weight vectors must be non-negative.")
    rows_sum = weights.sum(axis=1)
    if np.any(np.abs(rows_sum - 1.0) > 1e-6):
        raise ConfigurationError("Each weight vector must sum to 1.")


def _choose_min_divisions(pop_size: int, n_obj: int) -> int:
    divisions = 1
    while _count_lattice_points(n_obj, divisions) < pop_size:
        divisions += 1
    return divisions


def _count_lattice_points(n_obj: int, divisions: int) -> int:
    return comb(divisions + n_obj - 1, n_obj - 1)


def _simplex_lattice(n_obj: int, divisions: int) -> np.ndarray:
    coords: list[tuple[int, ...]] = []

    def rec(remaining: int, depth: int, current: list[int]) -> None:
        if depth == n_obj - 1:
            coords.append(tuple(current + [remaining]))
            return
        for value in range(remaining + 1):
            current.append(value)
            rec(remaining - value, depth + 1, current)
            current.pop()

    rec(divisions, 0, [])
    arr = np.asarray(coords, dtype=float) / divisions
    # Keep rows summing to exactly 1
    arr /= arr.sum(axis=1, keepdims=True)
    return arr


def compute_neighbors(weights: np.ndarray, neighbor_size: int) -> np.ndarray:
    """Compute neighbourhood indices based on weight vector distances.

    Row ``i`` starts with ``i`` itself, followed by the closest other
    subproblems; equal distances are ordered by index.

    Parameters
    ----------
    weights : np.ndarray
        Weight vectors, shape (pop_size, n_obj).
    neighbor_size : int
        Neighbourhood size (T parameter).

    Returns
    -------
    np.ndarray
        Neighbourhood indices, shape (pop_size, neighbor_size).
    """
    pop_size = weights.shape[0]
    if not 1 <= neighbor_size <= pop_size:
        raise NeighbourhoodSizeError(neighbor_size, pop_size)
    dist = np.linalg.norm(weights[:, None, :] - weights[None, :, :], axis=2)
    np.fill_diagonal(dist, -1.0)
    order = np.argsort(dist, axis=1, kind="stable")
    return order[:, :neighbor_size]


@dataclass(frozen=True)
class WeightVectorSet:
    """Weight vectors plus the precomputed neighbourhood of every subproblem."""

    weights: np.ndarray
    neighbors: np.ndarray

    @classmethod
    def build(
        cls,
        pop_size: int,
        n_obj: int,
        neighbor_size: int,
        *,
        rng: Optional[np.random.Generator] = None,
        path: Optional[str | Path] = None,
    ) -> "WeightVectorSet":
        if neighbor_size > pop_size:
            raise NeighbourhoodSizeError(neighbor_size, pop_size)
        if path is not None:
            weights = load_weight_vectors(path, pop_size, n_obj)
        else:
            weights = generate_weight_vectors(pop_size, n_obj, rng=rng)
        neighbors = compute_neighbors(weights, neighbor_size)
        weights.setflags(write=False)
        neighbors.setflags(write=False)
        return cls(weights=weights, neighbors=neighbors)

    @property
    def size(self) -> int:
        return int(self.weights.shape[0])

    def neighborhood(self, idx: int) -> np.ndarray:
        return self.neighbors[idx]


__all__ = [
    "WeightVectorSet",
    "compute_neighbors",
    "generate_weight_vectors",
    "load_weight_vectors",
]
