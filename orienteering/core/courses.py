"""Course preset loading helpers."""

from __future__ import annotations

from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from orienteering.exceptions import InvalidInputError
from orienteering.settings import settings

from .grid import Grid, build_grid

# Shipped as package data so installed copies find it too.
DEFAULT_COURSES_PATH = Path(str(resources.files("orienteering") / "data" / "courses.yaml"))


@dataclass
class CourseConfig:
    id: str
    title: str
    description: str
    rows: List[str]
    expected: Optional[int] = None
    solvable: bool = True
    reserved: Dict[str, Any] | None = None

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    def build_grid(self) -> Grid:
        return build_grid(self.rows, self.width, self.height)


def _resolve_path(config_path: str | Path | None) -> Path:
    if config_path is not None:
        return Path(config_path)
    if settings.COURSES_PATH:
        return Path(settings.COURSES_PATH)
    return DEFAULT_COURSES_PATH


def load_all_courses(config_path: str | Path | None = None) -> dict[str, CourseConfig]:
    """Load all courses from the preset YAML file and return a mapping of id -> CourseConfig."""
    path = _resolve_path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Course config not found: {path}")

    payload = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(payload, dict):
        raise ValueError(f"Course config must be a mapping at top level: {path}")

    raw_courses = payload.get("courses") or {}
    if not isinstance(raw_courses, dict):
        raise ValueError(f"'courses' must be a mapping of id -> config in {path}")

    required_fields = ["title", "description", "rows"]
    optional_fields = ["expected", "solvable"]

    courses: dict[str, CourseConfig] = {}
    for course_id, raw in raw_courses.items():
        if not isinstance(raw, dict):
            raise ValueError(f"Course '{course_id}' must be a mapping of fields")

        missing = [key for key in required_fields if key not in raw]
        if missing:
            raise ValueError(f"Course '{course_id}' is missing required fields: {missing}")

        rows = raw["rows"]
        if not isinstance(rows, list) or not rows or not all(isinstance(r, str) for r in rows):
            raise ValueError(f"Course '{course_id}' rows must be a non-empty list of strings")

        solvable = bool(raw.get("solvable", True))
        expected = raw.get("expected")
        if expected is not None and not solvable:
            raise ValueError(f"Course '{course_id}' cannot have an expected length when solvable is false")

        known_keys = set(required_fields + optional_fields)
        reserved = {k: v for k, v in raw.items() if k not in known_keys}

        courses[str(course_id)] = CourseConfig(
            id=str(course_id),
            title=str(raw["title"]),
            description=str(raw["description"]),
            rows=[str(r) for r in rows],
            expected=int(expected) if expected is not None else None,
            solvable=solvable,
            reserved=reserved or None,
        )

    return courses


def get_course(name: str, config_path: str | Path | None = None) -> CourseConfig:
    courses = load_all_courses(config_path)
    if name not in courses:
        raise InvalidInputError("unknown_course", f"no course named '{name}'", f"available: {sorted(courses)}")
    return courses[name]


def get_course_ids(config_path: str | Path | None = None) -> List[str]:
    """Return all course IDs from the config file."""
    return list(load_all_courses(config_path).keys())


__all__ = [
    "DEFAULT_COURSES_PATH",
    "CourseConfig",
    "load_all_courses",
    "get_course",
    "get_course_ids",
]
