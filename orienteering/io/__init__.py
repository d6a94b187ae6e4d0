"""Input adapters that turn external map sources into grids."""

from .map_loader import MapData, load_map_file, parse_map_text

__all__ = ["MapData", "load_map_file", "parse_map_text"]
