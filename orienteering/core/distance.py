"""Pairwise distance matrix over the points of interest."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from orienteering.logging_config import get_logger

from .astar import shortest_distance
from .grid import Cell, Grid

logger = get_logger(__name__)

# Marker for a pair with no connecting path in externally supplied matrices.
UNREACHABLE = -1


@dataclass(frozen=True, eq=False)
class DistanceMatrix:
    """
    Symmetric (k+2) x (k+2) matrix of shortest distances.

    Ids 0..k-1 are checkpoints, k is the start and k+1 the goal.
    """

    distances: np.ndarray
    points: tuple[Cell, ...]

    @property
    def size(self) -> int:
        return int(self.distances.shape[0])

    @property
    def checkpoint_count(self) -> int:
        return self.size - 2

    @property
    def start_index(self) -> int:
        return self.size - 2

    @property
    def goal_index(self) -> int:
        return self.size - 1

    def __getitem__(self, ij: tuple[int, int]) -> int:
        return int(self.distances[ij])


@dataclass
class DistanceMatrixResult:
    matrix: Optional[DistanceMatrix]
    reachable: bool
    reason: Optional[str]
    unreachable_pair: Optional[tuple[int, int]] = None


def matrix_from_array(distances: np.ndarray | Sequence[Sequence[int]], points: Sequence[Cell] = ()) -> DistanceMatrix:
    """Wrap a precomputed square distance array as a read-only ``DistanceMatrix``."""
    arr = np.array(distances, dtype=np.int64)
    if arr.ndim != 2 or arr.shape[0] != arr.shape[1] or arr.shape[0] < 2:
        raise ValueError(f"distance matrix must be square with at least 2 rows, got shape {arr.shape}")
    arr.flags.writeable = False
    return DistanceMatrix(distances=arr, points=tuple(points))


def build_distance_matrix(grid: Grid, points: Sequence[tuple[int, int]]) -> DistanceMatrixResult:
    """
    Run the pathfinder for every pair of ``points``.

    ``points`` is ordered ``[checkpoint_0, ..., checkpoint_{k-1}, start, goal]``.
    The first unreachable pair aborts the build; a single disconnected
    checkpoint already makes the course unsolvable.
    """
    cells = tuple(Cell(*p) for p in points)
    n = len(cells)
    distances = np.zeros((n, n), dtype=np.int64)

    for i in range(n - 1):
        for j in range(i + 1, n):
            d = shortest_distance(grid, cells[i], cells[j])
            if d is None:
                logger.info(f"points {cells[i]} and {cells[j]} are not connected")
                return DistanceMatrixResult(None, False, "unreachable", (i, j))
            distances[i, j] = d
            distances[j, i] = d

    logger.debug(f"distance matrix built for {n} points")
    distances.flags.writeable = False
    return DistanceMatrixResult(DistanceMatrix(distances=distances, points=cells), True, None)


__all__ = [
    "UNREACHABLE",
    "DistanceMatrix",
    "DistanceMatrixResult",
    "matrix_from_array",
    "build_distance_matrix",
]
