#!/usr/bin/env python
"""
Command line front end.

    orienteering < map.txt
    orienteering --map map.txt --show-order
    orienteering --course split_corridor

Prints the optimal route length, or the no-solution sentinel (-1 by default).
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

import yaml

from orienteering.core.course import solve_course
from orienteering.core.courses import get_course, load_all_courses
from orienteering.exceptions import InvalidInputError, OrienteeringError
from orienteering.io.map_loader import load_map_file, parse_map_text
from orienteering.logging_config import get_logger, set_level, set_run_id
from orienteering.settings import settings

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="orienteering",
        description="Shortest route from S through every @ checkpoint to G on a grid map",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--map", dest="map_path", help="read the map from a file instead of stdin")
    source.add_argument("--course", help="solve a preset course by id")
    source.add_argument("--list-courses", action="store_true", help="list preset course ids and exit")
    parser.add_argument("--courses-file", help="alternative course preset file")
    parser.add_argument("--show-order", action="store_true", help="also print the checkpoint visiting order")
    parser.add_argument("--verbose", "-v", action="store_true", help="debug logging")
    return parser


# Raised by the preset loader for a missing file, bad YAML or malformed entries.
_COURSE_FILE_ERRORS = (OSError, ValueError, yaml.YAMLError)


def _load_courses(path: Optional[str]):
    try:
        return load_all_courses(path)
    except _COURSE_FILE_ERRORS as err:
        raise InvalidInputError("bad_course_file", "cannot load course presets", str(err)) from err


def _load_grid(args: argparse.Namespace):
    if args.course:
        set_run_id(args.course)
        try:
            course = get_course(args.course, args.courses_file)
        except _COURSE_FILE_ERRORS as err:
            raise InvalidInputError("bad_course_file", "cannot load course presets", str(err)) from err
        return course.build_grid()
    if args.map_path:
        set_run_id(args.map_path)
        return load_map_file(args.map_path).build_grid()
    return parse_map_text(sys.stdin.read()).build_grid()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        set_level("DEBUG")

    try:
        if args.list_courses:
            for course_id, course in _load_courses(args.courses_file).items():
                print(f"{course_id}\t{course.title}")
            return 0

        grid = _load_grid(args)
        result = solve_course(grid)
    except OrienteeringError as err:
        print(f"error: {err}", file=sys.stderr)
        return 2

    if result.total is None:
        logger.info(f"no solution ({result.reason})")
        print(settings.NO_SOLUTION_SENTINEL)
        return 0

    print(result.total)
    if args.show_order:
        print(" -> ".join(["S", *(str(c) for c in result.order), "G"]))
    return 0


if __name__ == "__main__":
    sys.exit(main())
