#!/usr/bin/env python3
"""
Engine schematic: numbers next to symbols are part numbers.

Part 1 sums the part numbers; part 2 sums the gear ratios of every '*'
touching exactly two numbers.
"""
from __future__ import annotations

import enum
import logging
import sys
from dataclasses import dataclass
from typing import Iterator, List, Optional

from advent import parse_grid, run

logger = logging.getLogger(__name__)


def is_digit(c: str) -> bool:
    return '0' <= c <= '9'


def is_symbol(c: str) -> bool:
    return not is_digit(c) and c != '.'


class Direction(enum.Enum):
    ABOVE = (-1, 0)
    BELOW = (1, 0)
    RIGHT = (0, 1)
    LEFT = (0, -1)
    ABOVE_LEFT = (-1, -1)
    ABOVE_RIGHT = (-1, 1)
    BELOW_LEFT = (1, -1)
    BELOW_RIGHT = (1, 1)


@dataclass(frozen=True)
class PartNumber:
    value: int
    row: int
    start: int  # first column of the digits
    end: int    # last column of the digits

    def touches(self, row: int, col: int) -> bool:
        """True when (row, col) is in the ring of cells around the digits."""
        return abs(row - self.row) <= 1 and self.start - 1 <= col <= self.end + 1


class Schematic:
    def __init__(self, rows: List[str]):
        self.rows = rows
        self.height = len(rows)
        self.width = len(rows[0]) if rows else 0

    @classmethod
    def from_str(cls, text: str) -> 'Schematic':
        return cls([''.join(row) for row in parse_grid(text, str)])

    def get_char(self, direction: Direction, row: int, col: int) -> Optional[str]:
        """The character adjacent to (row, col) in `direction`, None past the edge."""
        dr, dc = direction.value
        r, c = row + dr, col + dc
        if 0 <= r < self.height and 0 <= c < self.width:
            return self.rows[r][c]
        return None

    def is_adjacent_to_symbol(self, row: int, col: int) -> bool:
        for direction in Direction:
            c = self.get_char(direction, row, col)
            if c is not None and is_symbol(c):
                return True
        return False

    def numbers(self) -> Iterator[PartNumber]:
        """Every run of digits in the schematic, in reading order."""
        for row, line in enumerate(self.rows):
            start = None
            value = 0
            for col, c in enumerate(line):
                if is_digit(c):
                    if start is None:
                        start = col
                    value = value * 10 + int(c)
                elif start is not None:
                    yield PartNumber(value, row, start, col - 1)
                    start = None
                    value = 0
            # Numbers ending at the right edge
            if start is not None:
                yield PartNumber(value, row, start, len(line) - 1)

    def get_part_numbers(self) -> List[int]:
        """Numbers with at least one digit adjacent to a symbol."""
        part_numbers = []
        for number in self.numbers():
            if any(self.is_adjacent_to_symbol(number.row, col)
                   for col in range(number.start, number.end + 1)):
                part_numbers.append(number.value)
        return part_numbers

    def gear_ratios(self) -> List[int]:
        """Product of the two numbers around each '*' that touches exactly two."""
        numbers = list(self.numbers())
        ratios = []
        for row, line in enumerate(self.rows):
            for col, c in enumerate(line):
                if c != '*':
                    continue
                touching = [n.value for n in numbers if n.touches(row, col)]
                if len(touching) == 2:
                    ratios.append(touching[0] * touching[1])
                else:
                    logger.debug("'*' at (%d, %d) touches %d numbers, not a gear",
                                 row, col, len(touching))
        return ratios


def part1(text: str) -> int:
    schematic = Schematic.from_str(text)
    return sum(schematic.get_part_numbers())


def part2(text: str) -> int:
    schematic = Schematic.from_str(text)
    return sum(schematic.gear_ratios())


def main(argv=None):
    return run('prob3', part1, part2, argv)


if __name__ == '__main__':
    sys.exit(main())
