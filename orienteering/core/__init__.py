"""
Orienteering core.

Grid model, A* shortest distances, the pairwise distance matrix and the
bitmask DP route solver.
"""

from .astar import AStarResult, grid_astar_with_info, shortest_distance
from .course import CourseResult, PointsOfInterest, find_points_of_interest, solve_course, solve_orienteering
from .distance import UNREACHABLE, DistanceMatrix, DistanceMatrixResult, build_distance_matrix, matrix_from_array
from .grid import Cell, Grid, GridCellKind, build_grid
from .route import RouteResult, build_dp_table, solve_route, solve_route_with_info

__all__ = [
    "Cell",
    "Grid",
    "GridCellKind",
    "build_grid",
    "AStarResult",
    "shortest_distance",
    "grid_astar_with_info",
    "UNREACHABLE",
    "DistanceMatrix",
    "DistanceMatrixResult",
    "build_distance_matrix",
    "matrix_from_array",
    "RouteResult",
    "build_dp_table",
    "solve_route",
    "solve_route_with_info",
    "PointsOfInterest",
    "CourseResult",
    "find_points_of_interest",
    "solve_course",
    "solve_orienteering",
]
