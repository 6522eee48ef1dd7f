"""
Shared helpers for the daily puzzle scripts.

Every puzzle module (probN.py) imports its error types, compass directions,
input loading and the two-answer command line wrapper from here.
"""
from __future__ import annotations

import argparse
import enum
import logging
import os
import sys
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple, TypeVar

logger = logging.getLogger(__name__)

# Coordinates are (row, col)
Coordinate = Tuple[int, int]

T = TypeVar('T')

INPUT_DIR = Path(__file__).resolve().parent / 'inputs'


class AdventError(ValueError):
    """Malformed puzzle input."""


class InvalidCoordinateError(AdventError):
    def __init__(self, row: int, col: int):
        super().__init__(f"Invalid coordinate: ({row}, {col})")
        self.row = row
        self.col = col


class CardinalDirection(enum.Enum):
    NORTH = (-1, 0)
    SOUTH = (1, 0)
    EAST = (0, 1)
    WEST = (0, -1)

    @property
    def offset(self) -> Tuple[int, int]:
        return self.value

    def opposite(self) -> 'CardinalDirection':
        return _OPPOSITES[self]

    def __repr__(self):
        return f"CardinalDirection.{self.name}"


_OPPOSITES = {
    CardinalDirection.NORTH: CardinalDirection.SOUTH,
    CardinalDirection.SOUTH: CardinalDirection.NORTH,
    CardinalDirection.EAST: CardinalDirection.WEST,
    CardinalDirection.WEST: CardinalDirection.EAST,
}


def input_path(name: str) -> Path:
    """Default input file for a puzzle: inputs/<name>.txt.

    ADVENT_INPUT_DIR overrides the directory. Installed scripts, whose
    modules live outside a checkout, fall back to ./inputs.
    """
    base = os.getenv('ADVENT_INPUT_DIR')
    if base:
        directory = Path(base)
    elif INPUT_DIR.is_dir():
        directory = INPUT_DIR
    else:
        directory = Path.cwd() / 'inputs'
    return directory / f'{name}.txt'


def read_input(path) -> str:
    with open(path, 'r', encoding='utf-8') as f:
        text = f.read()
    logger.debug("Read %d bytes from %s", len(text), path)
    return text


def parse_grid(text: str, parse_cell: Callable[[str], T]) -> List[List[T]]:
    """Parse a rectangular grid of single-character cells.

    Blank trailing lines are ignored. Raises AdventError on an empty input or
    a row whose width differs from the first row.
    """
    lines = text.strip('\n').splitlines()
    if not lines or not lines[0]:
        raise AdventError("Empty grid")

    width = len(lines[0])
    grid = []
    for row, line in enumerate(lines):
        if len(line) != width:
            raise AdventError(f"Row {row} has {len(line)} cells, expected {width}")
        grid.append([parse_cell(c) for c in line])
    return grid


def configure_logging(verbose: bool = False) -> None:
    debug = verbose or os.getenv('ADVENT_DEBUG') is not None
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )


def print_answer(part: int, value) -> None:
    print(f"## Part {part}")
    print(f" > {value}")


def run(name: str, part1: Callable[[str], object], part2: Callable[[str], object],
        argv: Optional[Sequence[str]] = None) -> int:
    """Command line wrapper shared by every puzzle.

    Reads the puzzle input, runs the requested parts and prints the answers.
    Returns a process exit code.
    """
    parser = argparse.ArgumentParser(
        prog=name,
        description=f'Solve puzzle {name}',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s
  %(prog)s --input test.txt
  %(prog)s --part 2 --verbose
        """
    )
    parser.add_argument('--input', '-i', metavar='FILE', default=None,
                        help=f'Puzzle input (default: inputs/{name}.txt, or $ADVENT_INPUT_DIR/{name}.txt)')
    parser.add_argument('--part', type=int, choices=(1, 2), default=None,
                        help='Only solve one part')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Log debug output to stderr')
    args = parser.parse_args(argv)

    configure_logging(args.verbose)
    path = args.input or input_path(name)

    try:
        text = read_input(path)
        if args.part in (None, 1):
            print_answer(1, part1(text))
        if args.part in (None, 2):
            print_answer(2, part2(text))
    except FileNotFoundError:
        print(f"Error: Input not found: {path}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0
