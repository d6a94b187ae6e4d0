"""
End-to-end orienteering pipeline.

grid -> points of interest -> pairwise A* distances -> checkpoint DP -> answer.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Optional, Sequence

from orienteering.exceptions import InvalidInputError
from orienteering.logging_config import get_logger
from orienteering.settings import settings

from .distance import build_distance_matrix
from .grid import Cell, Grid, GridCellKind, build_grid
from .route import solve_route_with_info

logger = get_logger(__name__)


@dataclass
class PointsOfInterest:
    start: Cell
    goal: Cell
    checkpoints: list[Cell]

    def as_matrix_order(self) -> list[Cell]:
        """Checkpoints first, then start, then goal."""
        return [*self.checkpoints, self.start, self.goal]


@dataclass
class CourseResult:
    total: Optional[int]
    order: list[Cell] = field(default_factory=list)
    reachable: bool = True
    reason: Optional[str] = None
    points: Optional[PointsOfInterest] = None


def find_points_of_interest(grid: Grid) -> Optional[PointsOfInterest]:
    """
    Locate start, goal and checkpoints (row-major order).

    Returns None when the map has no start or no goal.
    """
    starts = grid.cells_of_kind(GridCellKind.START)
    goals = grid.cells_of_kind(GridCellKind.GOAL)

    if len(starts) > 1:
        raise InvalidInputError("duplicate_start", "map has more than one start", ", ".join(map(str, starts)))
    if len(goals) > 1:
        raise InvalidInputError("duplicate_goal", "map has more than one goal", ", ".join(map(str, goals)))
    if not starts or not goals:
        return None

    return PointsOfInterest(starts[0], goals[0], grid.cells_of_kind(GridCellKind.CHECKPOINT))


def solve_course(grid: Grid) -> CourseResult:
    t0 = time.perf_counter()

    points = find_points_of_interest(grid)
    if points is None:
        logger.info("map has no start or no goal")
        return CourseResult(None, [], False, "missing_endpoint")

    if len(points.checkpoints) > settings.MAX_CHECKPOINTS:
        raise InvalidInputError(
            "too_many_checkpoints",
            "too many checkpoints for the exact solver",
            f"{len(points.checkpoints)} > {settings.MAX_CHECKPOINTS}",
        )

    res = build_distance_matrix(grid, points.as_matrix_order())
    if not res.reachable or res.matrix is None:
        return CourseResult(None, [], False, res.reason, points)

    k = len(points.checkpoints)
    route = solve_route_with_info(res.matrix, k)
    if not route.reachable:
        return CourseResult(None, [], False, route.reason, points)

    order = [points.checkpoints[i] for i in route.order]
    logger.info(
        f"course solved: {k} checkpoints, total={route.total}, "
        f"{grid.height}x{grid.width} grid in {time.perf_counter() - t0:.3f}s"
    )
    return CourseResult(route.total, order, True, None, points)


def solve_orienteering(rows: Sequence[str], width: int, height: int) -> Optional[int]:
    """Build the grid and return the optimal route length, or None when unsolvable."""
    return solve_course(build_grid(rows, width, height)).total


__all__ = [
    "PointsOfInterest",
    "CourseResult",
    "find_points_of_interest",
    "solve_course",
    "solve_orienteering",
]
