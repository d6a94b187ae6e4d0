"""
Grid and cell model.

A map is given as ``height`` rows of ``width`` symbols:

  - ``#`` wall
  - ``@`` checkpoint
  - ``S`` start
  - ``G`` goal
  - anything else is open ground

The grid is built once and never mutated afterwards; the backing numpy array
is flagged read-only so concurrent queries can share it without locking.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import NamedTuple, Sequence

import numpy as np

from orienteering.exceptions import InvalidInputError


class Cell(NamedTuple):
    """Grid coordinate. Compares and sorts lexicographically by (row, col)."""

    row: int
    col: int

    def __str__(self) -> str:
        return f"P({self.row}, {self.col})"


class GridCellKind(IntEnum):
    OPEN = 0
    WALL = 1
    CHECKPOINT = 2
    START = 3
    GOAL = 4


SYMBOL_TO_KIND = {
    "#": GridCellKind.WALL,
    "@": GridCellKind.CHECKPOINT,
    "S": GridCellKind.START,
    "G": GridCellKind.GOAL,
}

KIND_TO_SYMBOL = {
    GridCellKind.OPEN: ".",
    GridCellKind.WALL: "#",
    GridCellKind.CHECKPOINT: "@",
    GridCellKind.START: "S",
    GridCellKind.GOAL: "G",
}


def kind_for_symbol(symbol: str) -> GridCellKind:
    return SYMBOL_TO_KIND.get(symbol, GridCellKind.OPEN)


@dataclass(frozen=True, eq=False)
class Grid:
    """Immutable 2D grid of ``GridCellKind`` values, shape (height, width)."""

    kinds: np.ndarray

    @property
    def height(self) -> int:
        return int(self.kinds.shape[0])

    @property
    def width(self) -> int:
        return int(self.kinds.shape[1])

    def shape(self) -> tuple[int, int]:
        """Return (height, width)."""
        return self.kinds.shape

    @property
    def wall_mask(self) -> np.ndarray:
        """Read-only bool array, True = wall."""
        mask = self.kinds == GridCellKind.WALL
        mask.flags.writeable = False
        return mask

    def in_bounds(self, cell: tuple[int, int]) -> bool:
        r, c = cell
        return 0 <= r < self.height and 0 <= c < self.width

    def cell_kind_at(self, cell: tuple[int, int]) -> GridCellKind:
        """O(1) lookup; the caller guarantees ``cell`` is in bounds."""
        return GridCellKind(int(self.kinds[cell[0], cell[1]]))

    def is_wall(self, cell: tuple[int, int]) -> bool:
        return self.kinds[cell[0], cell[1]] == GridCellKind.WALL

    def cells_of_kind(self, kind: GridCellKind) -> list[Cell]:
        """All cells of ``kind`` in row-major order."""
        rows, cols = np.nonzero(self.kinds == kind)
        return [Cell(int(r), int(c)) for r, c in zip(rows, cols)]

    def to_rows(self) -> list[str]:
        """Render back to symbol rows (open cells become ``.``)."""
        return [
            "".join(KIND_TO_SYMBOL[GridCellKind(int(v))] for v in row)
            for row in self.kinds
        ]


def build_grid(rows: Sequence[str], width: int, height: int) -> Grid:
    """
    Build an immutable grid from ``height`` rows of ``width`` symbols.

    Raises:
        InvalidInputError: non-positive dimensions, wrong row count or a row
            whose length differs from ``width``.
    """
    if width <= 0 or height <= 0:
        raise InvalidInputError(
            "bad_dimensions", "grid dimensions must be positive", f"width={width}, height={height}"
        )
    if len(rows) != height:
        raise InvalidInputError(
            "row_count_mismatch", "row count does not match height", f"expected {height}, got {len(rows)}"
        )

    kinds = np.empty((height, width), dtype=np.int8)
    for r, row in enumerate(rows):
        if len(row) != width:
            raise InvalidInputError(
                "row_length_mismatch",
                "row length does not match width",
                f"row {r}: expected {width}, got {len(row)}",
            )
        kinds[r, :] = [kind_for_symbol(ch) for ch in row]

    kinds.flags.writeable = False
    return Grid(kinds=kinds)


__all__ = [
    "Cell",
    "GridCellKind",
    "Grid",
    "SYMBOL_TO_KIND",
    "KIND_TO_SYMBOL",
    "kind_for_symbol",
    "build_grid",
]
