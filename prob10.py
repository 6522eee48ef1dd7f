#!/usr/bin/env python3
"""
Pipe maze: find the loop through the start tile.

Part 1 is the distance to the farthest tile of the loop, part 2 the number of
tiles enclosed by it.
"""
from __future__ import annotations

import enum
import logging
import sys
from typing import FrozenSet, List, Optional, Set, Tuple

from advent import (
    AdventError,
    CardinalDirection,
    Coordinate,
    InvalidCoordinateError,
    parse_grid,
    run,
)

logger = logging.getLogger(__name__)

N = CardinalDirection.NORTH
S = CardinalDirection.SOUTH
E = CardinalDirection.EAST
W = CardinalDirection.WEST


class Pipe(enum.Enum):
    HORIZONTAL = '-'
    VERTICAL = '|'
    CORNER_NORTH_EAST = 'L'
    CORNER_NORTH_WEST = 'J'
    CORNER_SOUTH_EAST = 'F'
    CORNER_SOUTH_WEST = '7'
    START = 'S'
    NONE = '.'

    @classmethod
    def from_char(cls, c: str) -> 'Pipe':
        try:
            return cls(c)
        except ValueError:
            raise AdventError(f"Invalid pipe: {c}") from None

    def connects_to(self) -> FrozenSet[CardinalDirection]:
        return _CONNECTIONS.get(self, frozenset())

    @classmethod
    def from_connections(cls, directions) -> 'Pipe':
        wanted = frozenset(directions)
        for pipe, connections in _CONNECTIONS.items():
            if connections == wanted:
                return pipe
        raise AdventError(f"No pipe connects {sorted(d.name for d in wanted)}")


_CONNECTIONS = {
    Pipe.HORIZONTAL: frozenset((E, W)),
    Pipe.VERTICAL: frozenset((N, S)),
    Pipe.CORNER_NORTH_EAST: frozenset((N, E)),
    Pipe.CORNER_NORTH_WEST: frozenset((N, W)),
    Pipe.CORNER_SOUTH_EAST: frozenset((S, E)),
    Pipe.CORNER_SOUTH_WEST: frozenset((S, W)),
}


class PipeMap:
    def __init__(self, nodes: List[List[Pipe]]):
        self.nodes = nodes
        self.height = len(nodes)
        self.width = len(nodes[0]) if nodes else 0

    @classmethod
    def from_str(cls, text: str) -> 'PipeMap':
        return cls(parse_grid(text, Pipe.from_char))

    @classmethod
    def empty(cls, height: int, width: int) -> 'PipeMap':
        return cls([[Pipe.NONE] * width for _ in range(height)])

    def find_start(self) -> Coordinate:
        """Return the coordinate of the 'S' node."""
        for row, nodes in enumerate(self.nodes):
            for col, node in enumerate(nodes):
                if node is Pipe.START:
                    return (row, col)
        raise AdventError("Start node not found")

    def get_node(self, coord: Coordinate) -> Pipe:
        row, col = coord
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise InvalidCoordinateError(row, col)
        return self.nodes[row][col]

    def shift_coord(self, coord: Coordinate, direction: CardinalDirection) -> Optional[Coordinate]:
        """Neighbouring coordinate in `direction`, or None past the edge."""
        dr, dc = direction.offset
        row, col = coord[0] + dr, coord[1] + dc
        if 0 <= row < self.height and 0 <= col < self.width:
            return (row, col)
        return None

    def get_next_node(self, coord: Coordinate,
                      came_from: CardinalDirection) -> Tuple[Coordinate, CardinalDirection]:
        """Follow the pipe at `coord` out of the side it was not entered from.

        Returns the next coordinate and the side of that node the walk enters
        through.
        """
        node = self.get_node(coord)
        if node in (Pipe.NONE, Pipe.START):
            raise AdventError(f"Invalid node: {node.name} at {coord}")

        exits = node.connects_to() - {came_from}
        if len(exits) != 1:
            raise AdventError(f"No next direction found for {node.name} at {coord}")
        direction = next(iter(exits))

        next_coord = self.shift_coord(coord, direction)
        if next_coord is None:
            raise AdventError(f"Pipe at {coord} leads off the map going {direction.name}")

        next_node = self.get_node(next_coord)
        if next_node is Pipe.NONE:
            raise AdventError(f"Pipe at {coord} leads into empty ground at {next_coord}")

        return next_coord, direction.opposite()

    def get_start_directions(self) -> List[CardinalDirection]:
        """The two directions out of 'S' whose neighbours connect back to it."""
        start = self.find_start()
        directions = []
        for direction in (N, S, W, E):
            neighbour = self.shift_coord(start, direction)
            if neighbour is None:
                continue
            if direction.opposite() in self.get_node(neighbour).connects_to():
                directions.append(direction)

        if len(directions) != 2:
            raise AdventError(
                f"Invalid number of directions found: {[d.name for d in directions]} - expected 2!")
        return directions

    def start_pipe(self) -> Pipe:
        """The pipe shape hidden under the 'S' tile."""
        return Pipe.from_connections(self.get_start_directions())

    def loop_tiles(self) -> Set[Coordinate]:
        """Every coordinate on the loop through 'S', the start included."""
        start = self.find_start()
        direction = self.get_start_directions()[0]

        tiles = {start}
        coord = self.shift_coord(start, direction)
        came_from = direction.opposite()
        while coord != start:
            tiles.add(coord)
            coord, came_from = self.get_next_node(coord, came_from)

        logger.debug("Loop through %s has %d tiles", start, len(tiles))
        return tiles

    def internal_tiles(self) -> Set[Coordinate]:
        """The tiles enclosed by the loop.

        Scans each row left to right from outside the loop, flipping between
        outside and inside every time the row crosses the loop. A vertical
        pipe is a crossing; a run of corners is one only when it enters and
        leaves on opposite sides (F..J or L..7).

        Assumes every tile not on the loop is Pipe.NONE. A remaining 'S' is
        read as a vertical pipe.
        """
        tiles = set()
        for r, row in enumerate(self.nodes):
            inside = False
            prev_corner = None
            for c, node in enumerate(row):
                if node in (Pipe.VERTICAL, Pipe.START):
                    inside = not inside
                elif node in (Pipe.CORNER_NORTH_EAST, Pipe.CORNER_SOUTH_EAST):
                    prev_corner = node
                elif node is Pipe.CORNER_NORTH_WEST:
                    if prev_corner is Pipe.CORNER_SOUTH_EAST:
                        inside = not inside
                elif node is Pipe.CORNER_SOUTH_WEST:
                    if prev_corner is Pipe.CORNER_NORTH_EAST:
                        inside = not inside
                elif node is Pipe.NONE and inside:
                    tiles.add((r, c))
        return tiles

    def count_internal_tiles(self) -> int:
        return len(self.internal_tiles())

    def loop_only(self) -> 'PipeMap':
        """A copy holding just the loop, with 'S' swapped for its real pipe."""
        clean = PipeMap.empty(self.height, self.width)
        for row, col in self.loop_tiles():
            clean.nodes[row][col] = self.nodes[row][col]

        start_row, start_col = self.find_start()
        clean.nodes[start_row][start_col] = self.start_pipe()
        logger.debug("Start tile is %s", clean.nodes[start_row][start_col].name)
        return clean

    def __str__(self):
        return '\n'.join(''.join(node.value for node in row) for row in self.nodes)


def part1(text: str) -> int:
    pipes = PipeMap.from_str(text)
    start = pipes.find_start()
    first, second = pipes.get_start_directions()
    logger.debug("Start at %s heading %s and %s", start, first.name, second.name)

    a_coord = pipes.shift_coord(start, first)
    a_from = first.opposite()
    b_coord = pipes.shift_coord(start, second)
    b_from = second.opposite()
    steps = 1

    # Step both ways round the loop until the walkers meet
    while a_coord != b_coord:
        a_coord, a_from = pipes.get_next_node(a_coord, a_from)
        b_coord, b_from = pipes.get_next_node(b_coord, b_from)
        steps += 1

    return steps


def part2(text: str) -> int:
    return PipeMap.from_str(text).loop_only().count_internal_tiles()


def main(argv=None):
    return run('prob10', part1, part2, argv)


if __name__ == '__main__':
    sys.exit(main())
