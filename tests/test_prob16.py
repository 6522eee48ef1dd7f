"""Tests for the light beam puzzle."""

from __future__ import annotations

import pytest

from advent import AdventError
from prob16 import Direction, Layout, Node, deflect, next_coordinate, part1, part2


@pytest.fixture()
def example(read_data) -> str:
    return read_data('prob16_test.txt')


def test_part1(example):
    assert part1(example) == 46


def test_part2(example):
    assert part2(example) == 51


def test_layout_from_str():
    layout = Layout.from_str(".|.\n-..\n/\\.")

    assert layout == Layout([
        [Node.EMPTY, Node.VERTICAL, Node.EMPTY],
        [Node.HORIZONTAL, Node.EMPTY, Node.EMPTY],
        [Node.UP, Node.DOWN, Node.EMPTY],
    ])


def test_layout_unknown_node():
    with pytest.raises(AdventError, match="Unknown node type: x"):
        Layout.from_str("..\n.x")


def test_layout_beam_going_off_grid():
    layout = Layout.from_str("...\n...\n...")

    assert layout.beam_going_off_grid(((0, 0), Direction.UP))
    assert layout.beam_going_off_grid(((0, 0), Direction.LEFT))
    assert layout.beam_going_off_grid(((0, 2), Direction.RIGHT))
    assert layout.beam_going_off_grid(((2, 0), Direction.DOWN))
    assert not layout.beam_going_off_grid(((1, 1), Direction.RIGHT))
    assert not layout.beam_going_off_grid(((0, 0), Direction.DOWN))


def test_next_coordinate():
    assert next_coordinate(((1, 1), Direction.UP)) == (0, 1)
    assert next_coordinate(((1, 1), Direction.RIGHT)) == (1, 2)


@pytest.mark.parametrize("node, direction, expected", [
    (Node.EMPTY, Direction.LEFT, (Direction.LEFT,)),
    (Node.HORIZONTAL, Direction.RIGHT, (Direction.RIGHT,)),
    (Node.HORIZONTAL, Direction.DOWN, (Direction.LEFT, Direction.RIGHT)),
    (Node.VERTICAL, Direction.LEFT, (Direction.UP, Direction.DOWN)),
    (Node.UP, Direction.RIGHT, (Direction.UP,)),
    (Node.UP, Direction.DOWN, (Direction.LEFT,)),
    (Node.DOWN, Direction.RIGHT, (Direction.DOWN,)),
    (Node.DOWN, Direction.UP, (Direction.LEFT,)),
])
def test_deflect(node, direction, expected):
    assert deflect(node, direction) == expected


def test_beam_empty_layout():
    layout = Layout.from_str("...\n...\n...")

    # Should just pass straight through
    assert layout.beam() == 3


def test_beam_simple_mirror():
    layout = Layout.from_str("..\\\n...\n...")

    # Redirected down in the corner
    assert layout.beam() == 5


def test_beam_more_complex():
    layout = Layout.from_str(".\\.\n.-.\n...")

    # Redirected down in the middle, then split to left and right
    assert layout.beam() == 5


def test_loops():
    layout = Layout.from_str(".\\.\n/-.\n\\/.")

    # The beam splits in the middle and goes round in a loop
    assert layout.beam() == 7


def test_immediate_mirror():
    layout = Layout.from_str("\\/.\n...\n\\..")

    # Down straight away, then right again in the corner
    assert layout.beam() == 5


def test_immediate_exit():
    layout = Layout.from_str("/..\n...\n...")

    assert layout.beam() == 1


def test_edge_beams():
    layout = Layout.from_str("...\n...")
    beams = list(layout.edge_beams())

    assert len(beams) == 2 * 3 + 2 * 2
    assert ((0, 2), Direction.DOWN) in beams
    assert ((1, 2), Direction.LEFT) in beams


def test_energized_from_best_edge(example):
    layout = Layout.from_str(example)

    assert len(layout.energized((0, 3), Direction.DOWN)) == 51


def test_render(example):
    layout = Layout.from_str(example)
    rendered = layout.render(layout.energized((0, 0), Direction.RIGHT))

    assert rendered.splitlines()[0] == "######...."
    assert rendered.count('#') == 46
    assert layout.render().splitlines()[0] == ".|...\\...."
