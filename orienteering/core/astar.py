"""
A* shortest-distance search on the orienteering grid.

4-connected moves, uniform step cost 1. The heuristic is the Euclidean
distance to the target truncated to an integer, which never exceeds the
4-connected distance, so the first time the target is popped its g-score
is optimal.
"""

from __future__ import annotations

import heapq
import math
from dataclasses import dataclass
from typing import Optional

from orienteering.logging_config import get_logger

from .grid import Cell, Grid

logger = get_logger(__name__)

DIRECTIONS = [(-1, 0), (0, -1), (0, 1), (1, 0)]


@dataclass
class SearchNode:
    cell: Cell
    g_score: int
    h_estimate: int
    parent: Optional["SearchNode"] = None

    @property
    def f_score(self) -> int:
        return self.g_score + self.h_estimate


@dataclass
class AStarResult:
    distance: Optional[int]
    path: list[Cell]
    reachable: bool
    reason: Optional[str]
    expanded: int


def heuristic(current: tuple[int, int], target: tuple[int, int]) -> int:
    """Euclidean distance truncated toward zero."""
    return int(math.hypot(target[0] - current[0], target[1] - current[1]))


def shortest_distance(grid: Grid, source: tuple[int, int], target: tuple[int, int]) -> Optional[int]:
    """
    Shortest 4-connected distance between two non-wall cells.

    Returns ``None`` when ``target`` cannot be reached. Calling with a wall
    cell as either endpoint is not supported.
    """
    return grid_astar_with_info(grid, source, target).distance


def grid_astar_with_info(grid: Grid, source: tuple[int, int], target: tuple[int, int]) -> AStarResult:
    """
    A* from ``source`` to ``target`` returning distance, path and diagnostics.

    Failure reasons:
      - no_path (open set exhausted)
    """
    source = Cell(*source)
    target = Cell(*target)
    walls = grid.wall_mask
    ny, nx = grid.shape()

    start_node = SearchNode(source, 0, heuristic(source, target))
    # heap entries are (f, h, cell); equal f prefers the smaller h
    open_set: list[tuple[int, int, Cell]] = [(start_node.f_score, start_node.h_estimate, source)]
    visited: dict[Cell, SearchNode] = {source: start_node}
    closed_set: set[Cell] = set()

    expanded = 0

    while open_set:
        _, _, current = heapq.heappop(open_set)

        if current in closed_set:
            continue

        node = visited[current]
        if current == target:
            path = _reconstruct_path(node)
            logger.debug(f"A* {source} -> {target}: distance={node.g_score}, expanded={expanded}")
            return AStarResult(node.g_score, path, True, None, expanded)

        closed_set.add(current)
        expanded += 1

        ci, cj = current
        for di, dj in DIRECTIONS:
            ni, nj = ci + di, cj + dj

            if not (0 <= ni < ny and 0 <= nj < nx):
                continue

            if walls[ni, nj]:
                continue

            neighbor = Cell(ni, nj)
            if neighbor in closed_set:
                continue

            tentative_g = node.g_score + 1
            known = visited.get(neighbor)
            if known is None:
                known = SearchNode(neighbor, tentative_g, heuristic(neighbor, target), node)
                visited[neighbor] = known
            elif tentative_g < known.g_score:
                known.g_score = tentative_g
                known.parent = node
            else:
                continue
            # older entries for this cell stay in the heap and are skipped once it is closed
            heapq.heappush(open_set, (known.f_score, known.h_estimate, neighbor))

    logger.debug(f"A* {source} -> {target}: unreachable after expanding {expanded} cells")
    return AStarResult(None, [], False, "no_path", expanded)


def _reconstruct_path(node: SearchNode) -> list[Cell]:
    path: list[Cell] = []
    current: Optional[SearchNode] = node
    while current is not None:
        path.append(current.cell)
        current = current.parent
    path.reverse()
    return path


__all__ = [
    "AStarResult",
    "SearchNode",
    "heuristic",
    "shortest_distance",
    "grid_astar_with_info",
]
