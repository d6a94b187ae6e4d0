"""
Exceptions raised for invalid input.

Every error carries a stable ``code``:

  - ``bad_dimensions``, ``row_count_mismatch``, ``row_length_mismatch``: grid shape
  - ``bad_map_text``: unreadable map file or malformed map text
  - ``duplicate_start``, ``duplicate_goal``: more than one S or G on the map
  - ``too_many_checkpoints``, ``checkpoint_count_mismatch``: route solver limits
  - ``unknown_course``, ``bad_course_file``: preset course lookup and loading

An unreachable course is not an error; it is reported through result records.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class OrienteeringError(Exception):
    """Business-level exception carrying a stable error code."""

    code: str
    message: str
    detail: Optional[str] = None

    def __post_init__(self) -> None:
        super().__init__(self.__str__())

    def __str__(self) -> str:  # pragma: no cover - trivial
        base = f"[{self.code}] {self.message}"
        if self.detail:
            return f"{base}: {self.detail}"
        return base

    def to_dict(self) -> dict[str, Optional[str]]:
        return {"code": self.code, "message": self.message, "detail": self.detail}


@dataclass(eq=False)
class InvalidInputError(OrienteeringError):
    """Malformed map, dimensions or problem size. Not recoverable."""


__all__ = ["OrienteeringError", "InvalidInputError"]
