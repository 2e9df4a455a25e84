"""
Pareto dominance for minimization problems.

``dominates`` compares two objective vectors; ``nondominated_mask`` picks the
first front out of a whole objective matrix and is what the archive uses to
screen a batch of candidates before inserting them one by one.
"""

from __future__ import annotations

import numpy as np


def dominates(first: np.ndarray, second: np.ndarray) -> bool:
    """
    Return True when ``first`` Pareto-dominates ``second`` (minimization).

    ``first`` must be no worse in every objective and strictly better in at
    least one.
    """
    a = np.asarray(first, dtype=float)
    b = np.asarray(second, dtype=float)
    if a.shape != b.shape:
        raise ValueError(f"Cannot compare objective vectors of shapes {a.shape} and {b.shape}.")
    return bool(np.all(a <= b) and np.any(a < b))


def dominance_matrix(F: np.ndarray) -> np.ndarray:
    """Boolean matrix ``D`` with ``D[i, j]`` True when row ``i`` dominates row ``j``."""
    F = np.atleast_2d(np.asarray(F, dtype=float))
    no_worse = (F[:, None, :] <= F[None, :, :]).all(axis=-1)
    better = (F[:, None, :] < F[None, :, :]).any(axis=-1)
    return no_worse & better


def nondominated_mask(F: np.ndarray) -> np.ndarray:
    """
    Flag the rows of ``F`` that no other row dominates.

    Parameters
    ----------
    F : np.ndarray
        Objective matrix, shape (n, m).

    Returns
    -------
    np.ndarray
        Boolean mask of shape (n,). Rows with identical objective vectors
        do not dominate each other, so all copies are kept.
    """
    F = np.asarray(F, dtype=float)
    if F.shape[0] == 0:
        return np.zeros(0, dtype=bool)
    return ~dominance_matrix(F).any(axis=0)


__all__ = ["dominance_matrix", "dominates", "nondominated_mask"]
