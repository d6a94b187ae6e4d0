"""
Exact checkpoint ordering by bitmask dynamic programming.

dp[S, i] is the length of the shortest start-rooted route that visits exactly
the checkpoints in bitmask S and stands on checkpoint i (i in S):

    dp[{i}, i] = D[start, i]
    dp[S, i]   = min_{j in S, j != i} dp[S - {i}, j] + D[j, i]

Subsets are filled in ascending integer order. S - {i} is numerically smaller
than S, so every row a subset reads has already been finalised. The answer is
min_i dp[Full, i] + D[i, goal].

Time O(k^2 * 2^k), memory O(k * 2^k); the number of checkpoints is capped by
``settings.MAX_CHECKPOINTS``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from orienteering.exceptions import InvalidInputError
from orienteering.logging_config import get_logger
from orienteering.settings import settings

from .distance import UNREACHABLE, DistanceMatrix

logger = get_logger(__name__)

# Marks dp entries whose checkpoint is not in the subset. Small enough that
# UNSET + any distance stays inside int64.
UNSET = np.iinfo(np.int64).max // 4


@dataclass
class RouteResult:
    total: Optional[int]
    order: list[int] = field(default_factory=list)
    reachable: bool = True
    reason: Optional[str] = None


def _check_problem_size(matrix: DistanceMatrix, checkpoint_count: int) -> None:
    if checkpoint_count != matrix.checkpoint_count:
        raise InvalidInputError(
            "checkpoint_count_mismatch",
            "checkpoint count does not match the distance matrix",
            f"matrix holds {matrix.checkpoint_count} checkpoints, got {checkpoint_count}",
        )
    if checkpoint_count > settings.MAX_CHECKPOINTS:
        raise InvalidInputError(
            "too_many_checkpoints",
            "too many checkpoints for the exact solver",
            f"{checkpoint_count} > {settings.MAX_CHECKPOINTS}",
        )


def build_dp_table(matrix: DistanceMatrix, checkpoint_count: int) -> np.ndarray:
    """
    Fill the (2^k, k) DP table.

    Entries ``[S, i]`` with ``i`` not in ``S`` hold ``UNSET``. The matrix must
    not contain ``UNREACHABLE`` entries between required points.
    """
    _check_problem_size(matrix, checkpoint_count)
    k = checkpoint_count
    dist = matrix.distances
    start = matrix.start_index

    dp = np.full((1 << k, k), UNSET, dtype=np.int64)
    ids = np.arange(k, dtype=np.int64)
    bits = 1 << ids
    between = dist[:k, :k]

    for mask in range(1, 1 << k):
        if mask & (mask - 1) == 0:
            i = mask.bit_length() - 1
            dp[mask, i] = dist[start, i]
            continue

        members = ids[(mask & bits) != 0]
        prev = mask ^ bits[members]
        # row r: dp[S - {members[r]}, j] + D[j, members[r]] over all j; j outside the
        # predecessor subset (including members[r] itself) is UNSET and never wins
        candidates = dp[prev] + between[:, members].T
        dp[mask, members] = candidates.min(axis=1)

    dp.flags.writeable = False
    return dp


def solve_route(distance_matrix: DistanceMatrix, checkpoint_count: int) -> Optional[int]:
    """Minimal start -> all checkpoints -> goal length, or ``None`` if unreachable."""
    return solve_route_with_info(distance_matrix, checkpoint_count).total


def solve_route_with_info(distance_matrix: DistanceMatrix, checkpoint_count: int) -> RouteResult:
    """Solve the ordering problem and reconstruct the optimal checkpoint order."""
    _check_problem_size(distance_matrix, checkpoint_count)
    k = checkpoint_count
    dist = distance_matrix.distances
    goal = distance_matrix.goal_index

    if np.any(dist == UNREACHABLE):
        return RouteResult(None, [], False, "unreachable")

    if k == 0:
        return RouteResult(int(dist[distance_matrix.start_index, goal]), [])

    dp = build_dp_table(distance_matrix, k)
    full = (1 << k) - 1
    finals = dp[full] + dist[:k, goal]
    last = int(np.argmin(finals))
    total = int(finals[last])

    order = _reconstruct_order(dp, dist, full, last)
    logger.debug(f"route over {k} checkpoints: total={total}, order={order}")
    return RouteResult(total, order)


def _reconstruct_order(dp: np.ndarray, dist: np.ndarray, mask: int, last: int) -> list[int]:
    k = dp.shape[1]
    order = [last]
    current = last
    while mask & (mask - 1):
        prev = mask ^ (1 << current)
        candidates = dp[prev] + dist[:k, current]
        current = int(np.argmin(candidates))
        order.append(current)
        mask = prev
    order.reverse()
    return order


__all__ = [
    "UNSET",
    "RouteResult",
    "build_dp_table",
    "solve_route",
    "solve_route_with_info",
]
