#!/usr/bin/env python3
"""
Light beams bouncing through a contraption of mirrors and splitters.

Part 1 counts the tiles energized by a beam entering the top-left corner
heading right; part 2 finds the best entry point along any edge.
"""
from __future__ import annotations

import enum
import logging
import sys
from collections import deque
from typing import Iterator, List, Set, Tuple

from advent import AdventError, Coordinate, parse_grid, run

logger = logging.getLogger(__name__)


class Node(enum.Enum):
    EMPTY = '.'
    HORIZONTAL = '-'
    VERTICAL = '|'
    UP = '/'
    DOWN = '\\'

    @classmethod
    def from_char(cls, c: str) -> 'Node':
        try:
            return cls(c)
        except ValueError:
            raise AdventError(f"Unknown node type: {c}") from None


class Direction(enum.Enum):
    UP = (-1, 0)
    LEFT = (0, -1)
    DOWN = (1, 0)
    RIGHT = (0, 1)


# The tile a beam is on and the direction it leaves that tile in
Beam = Tuple[Coordinate, Direction]

_HORIZONTAL = (Direction.LEFT, Direction.RIGHT)
_VERTICAL = (Direction.UP, Direction.DOWN)

# '/' sends a rightward beam up, '\' sends it down
_MIRRORS = {
    Node.UP: {
        Direction.RIGHT: Direction.UP,
        Direction.DOWN: Direction.LEFT,
        Direction.LEFT: Direction.DOWN,
        Direction.UP: Direction.RIGHT,
    },
    Node.DOWN: {
        Direction.RIGHT: Direction.DOWN,
        Direction.DOWN: Direction.RIGHT,
        Direction.LEFT: Direction.UP,
        Direction.UP: Direction.LEFT,
    },
}


def deflect(node: Node, direction: Direction) -> Tuple[Direction, ...]:
    """Directions a beam travelling in `direction` leaves `node` in."""
    if node is Node.EMPTY:
        return (direction,)
    if node is Node.HORIZONTAL:
        return (direction,) if direction in _HORIZONTAL else _HORIZONTAL
    if node is Node.VERTICAL:
        return (direction,) if direction in _VERTICAL else _VERTICAL
    return (_MIRRORS[node][direction],)


def next_coordinate(beam: Beam) -> Coordinate:
    (row, col), direction = beam
    dr, dc = direction.value
    return (row + dr, col + dc)


class Layout:
    def __init__(self, grid: List[List[Node]]):
        self.grid = grid
        self.height = len(grid)
        self.width = len(grid[0]) if grid else 0

    @classmethod
    def from_str(cls, text: str) -> 'Layout':
        return cls(parse_grid(text, Node.from_char))

    def __eq__(self, other):
        return isinstance(other, Layout) and self.grid == other.grid

    def beam_going_off_grid(self, beam: Beam) -> bool:
        (row, col), direction = beam
        if direction is Direction.DOWN:
            return row >= self.height - 1
        if direction is Direction.RIGHT:
            return col >= self.width - 1
        if direction is Direction.UP:
            return row == 0
        return col == 0

    def energized(self, start: Coordinate, heading: Direction) -> Set[Coordinate]:
        """Tiles a beam entering `start` while travelling `heading` passes through.

        Beams are followed breadth first. Each (tile, direction) state is only
        followed once, so beams caught in a loop stop.
        """
        queue = deque()
        row, col = start
        for direction in deflect(self.grid[row][col], heading):
            queue.append((start, direction))

        paths_taken: Set[Beam] = set()
        while queue:
            beam = queue.popleft()
            if beam in paths_taken:
                continue
            paths_taken.add(beam)

            if self.beam_going_off_grid(beam):
                continue

            coord = next_coordinate(beam)
            node = self.grid[coord[0]][coord[1]]
            for direction in deflect(node, beam[1]):
                queue.append((coord, direction))

        tiles = {coord for coord, _ in paths_taken}
        logger.debug("Beam into %s heading %s: %d states, %d tiles",
                     start, heading.name, len(paths_taken), len(tiles))
        return tiles

    def beam(self) -> int:
        """Energized tile count for a beam entering the top-left corner heading right."""
        return len(self.energized((0, 0), Direction.RIGHT))

    def edge_beams(self) -> Iterator[Beam]:
        """Every beam that can enter the layout from outside."""
        for col in range(self.width):
            yield (0, col), Direction.DOWN
            yield (self.height - 1, col), Direction.UP
        for row in range(self.height):
            yield (row, 0), Direction.RIGHT
            yield (row, self.width - 1), Direction.LEFT

    def best_beam(self) -> int:
        return max(len(self.energized(start, heading)) for start, heading in self.edge_beams())

    def render(self, tiles=None) -> str:
        """The layout as text, with energized tiles drawn as '#'."""
        lines = []
        for row, nodes in enumerate(self.grid):
            if tiles is None:
                lines.append(''.join(node.value for node in nodes))
            else:
                lines.append(''.join('#' if (row, col) in tiles else '.'
                                     for col in range(len(nodes))))
        return '\n'.join(lines)


def part1(text: str) -> int:
    return Layout.from_str(text).beam()


def part2(text: str) -> int:
    return Layout.from_str(text).best_beam()


def main(argv=None):
    return run('prob16', part1, part2, argv)


if __name__ == '__main__':
    sys.exit(main())
