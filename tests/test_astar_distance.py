"""
A* shortest distance tests, checked against an independent BFS.
"""

from __future__ import annotations

import itertools

import pytest

from helpers.grid_oracle import bfs_distances, open_cells
from orienteering.core.astar import grid_astar_with_info, heuristic, shortest_distance
from orienteering.core.grid import Cell, build_grid

MAZES = {
    "open_4x5": [
        ".....",
        ".....",
        ".....",
        ".....",
    ],
    "spiral": [
        ".......",
        ".#####.",
        ".#...#.",
        ".#.#.#.",
        ".#.#...",
        ".#.####",
        ".......",
    ],
    "comb": [
        "........",
        ".#.#.#.#",
        ".#.#.#.#",
        ".#.#.#.#",
        "...#...#",
    ],
    "split": [
        "..#..",
        "..#..",
        "..#..",
    ],
    "u_turn": [
        "......",
        "####..",
        "......",
        "..####",
        "......",
    ],
}


def _grid(rows):
    return build_grid(rows, len(rows[0]), len(rows))


@pytest.mark.parametrize("name", sorted(MAZES))
def test_astar_matches_bfs_for_all_pairs(name):
    """Every connected pair must agree with BFS; every disconnected pair must report None."""
    grid = _grid(MAZES[name])
    cells = open_cells(grid)

    for a in cells:
        truth = bfs_distances(grid, a)
        for b in cells:
            got = shortest_distance(grid, a, b)
            assert got == truth.get(b), f"{name}: {a}->{b} got {got}, bfs {truth.get(b)}"


def test_astar_is_symmetric():
    grid = _grid(MAZES["spiral"])
    cells = open_cells(grid)

    for a, b in itertools.combinations(cells, 2):
        assert shortest_distance(grid, a, b) == shortest_distance(grid, b, a)


def test_identity_distance_is_zero_not_unreachable():
    """A same-cell query returns 0, which must stay distinct from the unreachable marker."""
    grid = _grid(["S.G"])

    res = grid_astar_with_info(grid, (0, 1), (0, 1))

    assert res.distance == 0
    assert res.reachable is True
    assert res.path == [Cell(0, 1)]


def test_isolated_region_is_unreachable():
    grid = _grid(
        [
            "...#...",
            "...#.#.",
            "####.#.",
            ".....#.",
        ]
    )

    assert shortest_distance(grid, (0, 0), (0, 4)) is None
    assert shortest_distance(grid, (0, 4), (0, 0)) is None
    assert shortest_distance(grid, (0, 0), (1, 2)) == 3

    res = grid_astar_with_info(grid, (0, 0), (3, 0))
    assert not res.reachable
    assert res.reason == "no_path"
    assert res.path == []
    assert res.expanded == 6, "the whole 2x3 pocket should be exhausted"


def test_path_is_contiguous_and_avoids_walls():
    grid = _grid(MAZES["u_turn"])

    res = grid_astar_with_info(grid, (0, 0), (4, 0))

    assert res.reachable
    assert res.path[0] == (0, 0) and res.path[-1] == (4, 0)
    assert len(res.path) == res.distance + 1
    for a, b in zip(res.path, res.path[1:]):
        assert abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1, f"non-adjacent step {a}->{b}"
        assert not grid.is_wall(b), f"path crosses wall at {b}"


def test_heuristic_is_truncated_euclidean_and_admissible():
    assert heuristic((0, 0), (3, 4)) == 5
    assert heuristic((0, 0), (1, 1)) == 1
    assert heuristic((2, 2), (2, 2)) == 0

    for dr in range(6):
        for dc in range(6):
            assert heuristic((0, 0), (dr, dc)) <= dr + dc


def test_astar_walks_straight_along_open_row(open_grid):
    """With an exact heuristic along the row, only the row itself is expanded."""
    grid = open_grid(20, 20)

    res = grid_astar_with_info(grid, (0, 0), (0, 19))

    assert res.distance == 19
    assert res.expanded == 19
    assert all(cell.row == 0 for cell in res.path)


def test_queries_are_repeatable():
    grid = _grid(MAZES["comb"])

    first = grid_astar_with_info(grid, (0, 0), (4, 6))
    second = grid_astar_with_info(grid, (0, 0), (4, 6))

    assert first == second
