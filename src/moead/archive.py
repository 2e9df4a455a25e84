"""
Unbounded Pareto archive.

Holds the best front seen so far as parallel ``X`` / ``F`` arrays. Every
update keeps the contents an antichain under Pareto dominance.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .dominance import dominates, nondominated_mask


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


@dataclass(frozen=True)
class ArchiveSnapshot:
    """Copy of the archive contents at one point in time."""

    X: np.ndarray
    F: np.ndarray

    def __len__(self) -> int:
        return int(self.F.shape[0])


class ParetoArchive:
    """
    Stores (X, F) pairs such that no member dominates another.
    Minimization assumed.
    """

    def __init__(self) -> None:
        self.X: Optional[np.ndarray] = None
        self.F: Optional[np.ndarray] = None
        self.total_inserted = 0
        self.total_removed = 0

    def __len__(self) -> int:
        return 0 if self.F is None else int(self.F.shape[0])

    def update(self, point: np.ndarray, objectives: np.ndarray) -> bool:
        """
        Offer a candidate to the archive.

        The candidate is rejected when a member dominates it or already has
        the same objective vector. Otherwise every member it dominates is
        removed and the candidate is appended.

        Returns
        -------
        bool
            True if the candidate was inserted.
        """
        x = np.array(point, dtype=float).ravel()
        f = np.array(objectives, dtype=float).ravel()
        if self.F is None or self.X is None:
            self.X = x[None, :]
            self.F = f[None, :]
            self.total_inserted += 1
            return True
        if f.shape[0] != self.F.shape[1] or x.shape[0] != self.X.shape[1]:
            raise ValueError("Candidate shape does not match the archive contents.")

        for member in self.F:
            if dominates(member, f) or np.array_equal(member, f):
                return False

        keep = np.array([not dominates(f, member) for member in self.F], dtype=bool)
        removed = int(keep.size - np.count_nonzero(keep))
        if removed:
            _logger().debug("Archive: candidate removes %d dominated member(s).", removed)
            self.total_removed += removed
        self.X = np.vstack([self.X[keep], x])
        self.F = np.vstack([self.F[keep], f])
        self.total_inserted += 1
        return True

    def seed(self, X: np.ndarray, F: np.ndarray) -> int:
        """
        Offer a whole population; return the number of points inserted.

        Rows dominated within the batch are screened out up front, the rest
        go through ``update`` in order.
        """
        X = np.atleast_2d(np.asarray(X, dtype=float))
        F = np.atleast_2d(np.asarray(F, dtype=float))
        if X.shape[0] != F.shape[0]:
            raise ValueError("X and F must have the same number of rows.")
        front = nondominated_mask(F)
        _logger().debug("Archive: seeding with %d of %d candidate(s).", int(front.sum()), F.shape[0])
        return sum(self.update(x, f) for x, f in zip(X[front], F[front]))

    def snapshot(self) -> ArchiveSnapshot:
        if self.F is None or self.X is None:
            return ArchiveSnapshot(X=np.empty((0, 0)), F=np.empty((0, 0)))
        return ArchiveSnapshot(X=self.X.copy(), F=self.F.copy())

    @property
    def points(self) -> list[np.ndarray]:
        return [] if self.X is None else [row.copy() for row in self.X]

    @property
    def objectives(self) -> list[np.ndarray]:
        return [] if self.F is None else [row.copy() for row in self.F]


__all__ = ["ArchiveSnapshot", "ParetoArchive"]
