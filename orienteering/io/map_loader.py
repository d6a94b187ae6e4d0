"""
Text map loader.

Format (whitespace separated, as read from standard input)::

    <width> <height>
    <row 1>
    ...
    <row height>
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from orienteering.core.grid import Grid, build_grid
from orienteering.exceptions import InvalidInputError


@dataclass
class MapData:
    width: int
    height: int
    rows: list[str]

    def build_grid(self) -> Grid:
        return build_grid(self.rows, self.width, self.height)


def _parse_dimension(token: str, name: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise InvalidInputError("bad_map_text", f"{name} is not an integer", repr(token)) from None


def parse_map_text(text: str) -> MapData:
    tokens = text.split()
    if len(tokens) < 2:
        raise InvalidInputError("bad_map_text", "map text must start with width and height")

    width = _parse_dimension(tokens[0], "width")
    height = _parse_dimension(tokens[1], "height")
    if width <= 0 or height <= 0:
        raise InvalidInputError("bad_dimensions", "grid dimensions must be positive", f"width={width}, height={height}")

    rows = tokens[2:]
    if len(rows) < height:
        raise InvalidInputError("bad_map_text", "not enough map rows", f"expected {height}, got {len(rows)}")

    # anything after the declared rows is ignored, like a stream reader would
    return MapData(width=width, height=height, rows=rows[:height])


def load_map_file(path: str | Path) -> MapData:
    """Read a map file; unreadable or non UTF-8 files are ``bad_map_text``."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as err:
        raise InvalidInputError("bad_map_text", "cannot read map file", f"{path}: {err}") from err
    return parse_map_text(text)


__all__ = ["MapData", "parse_map_text", "load_map_file"]
