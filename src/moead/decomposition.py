"""
Tchebycheff scalarization.

Turns an objective vector into the scalar fitness of one subproblem:
``g(f | w, z*) = max_k w_k * |f_k - z*_k|``. Lower is better.
"""

from __future__ import annotations

import numpy as np


def tchebycheff(fvals: np.ndarray, weights: np.ndarray, ideal: np.ndarray) -> np.ndarray:
    """Tchebycheff aggregation: max(w * |f - z*|).

    Parameters
    ----------
    fvals : np.ndarray
        Objective values, shape (N, n_obj) or (n_obj,).
    weights : np.ndarray
        Weight vectors, shape (N, n_obj) or (n_obj,).
    ideal : np.ndarray
        Ideal point (minimum objectives seen), shape (n_obj,).

    Returns
    -------
    np.ndarray
        Aggregated scalar values, shape (N,) or scalar.

    Raises
    ------
    ValueError
        If the objective dimension differs between the inputs.
    """
    fvals = np.asarray(fvals, dtype=float)
    weights = np.asarray(weights, dtype=float)
    ideal = np.asarray(ideal, dtype=float)
    n_obj = fvals.shape[-1] if fvals.ndim else 0
    if weights.shape[-1:] != (n_obj,) or ideal.shape != (n_obj,):
        raise ValueError(
            "weights, ideal point and objective values must share the objective dimension "
            f"(got {weights.shape}, {ideal.shape}, {fvals.shape})."
        )
    diff = np.abs(fvals - ideal)
    return np.max(weights * diff, axis=-1)


def decomposed_single_objective(weights: np.ndarray, ideal: np.ndarray, candidate: np.ndarray) -> float:
    """Scalar fitness of one evaluated candidate for one weight vector."""
    return float(tchebycheff(candidate, weights, ideal))


__all__ = ["decomposed_single_objective", "tchebycheff"]
