"""Orienteering route planner: A* grid distances plus exact checkpoint ordering."""

from __future__ import annotations

from .settings import settings  # noqa: F401

__version__ = "1.0.0"

__all__ = ["settings", "__version__"]
