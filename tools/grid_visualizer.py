#!/usr/bin/env python3
"""
Grid Visualizer for the puzzle inputs

Renders a puzzle grid in human-readable form, marking the cells that make up
the answer: the pipe loop and the tiles it encloses (prob10), the energized
tiles (prob16) or the part number digits (prob3).
"""

import argparse
import os
import sys

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.colors import ListedColormap

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
import prob3
import prob10
import prob16
from advent import configure_logging, read_input


# Cell marks
MARK_NONE = 0
MARK_PATH = 1    # loop / energized / part number
MARK_INSIDE = 2  # enclosed by the loop / digits of non-part numbers
MARK_START = 3

# Box-drawing characters for the pipes
PIPE_CHARS = {
    prob10.Pipe.HORIZONTAL: '─',
    prob10.Pipe.VERTICAL: '│',
    prob10.Pipe.CORNER_NORTH_EAST: '└',
    prob10.Pipe.CORNER_NORTH_WEST: '┘',
    prob10.Pipe.CORNER_SOUTH_EAST: '┌',
    prob10.Pipe.CORNER_SOUTH_WEST: '┐',
    prob10.Pipe.START: 'S',
    prob10.Pipe.NONE: ' ',
}

MIRROR_CHARS = {
    prob16.Node.EMPTY: ' ',
    prob16.Node.HORIZONTAL: '─',
    prob16.Node.VERTICAL: '│',
    prob16.Node.UP: '╱',
    prob16.Node.DOWN: '╲',
}

COLOURS = ['#f4f4f4', '#e8a33d', '#3d7be8', '#d62828']

PUZZLES = ('prob3', 'prob10', 'prob16')


def mark_pipes(text):
    """Chars and marks for a pipe maze: loop, enclosed tiles and start."""
    pipes = prob10.PipeMap.from_str(text)
    clean = pipes.loop_only()
    inside = clean.internal_tiles()
    start = pipes.find_start()

    # Junk pipes off the loop are drawn as ground
    chars = [[node.value for node in row] for row in clean.nodes]
    chars[start[0]][start[1]] = prob10.Pipe.START.value
    marks = [[MARK_NONE] * pipes.width for _ in range(pipes.height)]
    for r in range(pipes.height):
        for c in range(pipes.width):
            if clean.nodes[r][c] is not prob10.Pipe.NONE:
                marks[r][c] = MARK_PATH
            elif (r, c) in inside:
                marks[r][c] = MARK_INSIDE
    marks[start[0]][start[1]] = MARK_START
    return chars, marks


def mark_beams(text):
    """Chars and marks for a mirror layout: energized tiles from the top-left."""
    layout = prob16.Layout.from_str(text)
    tiles = layout.energized((0, 0), prob16.Direction.RIGHT)

    chars = [[node.value for node in row] for row in layout.grid]
    marks = [[MARK_PATH if (r, c) in tiles else MARK_NONE for c in range(layout.width)]
             for r in range(layout.height)]
    return chars, marks


def mark_schematic(text):
    """Chars and marks for an engine schematic: part numbers and other numbers."""
    schematic = prob3.Schematic.from_str(text)
    chars = [list(row) for row in schematic.rows]
    marks = [[MARK_NONE] * schematic.width for _ in range(schematic.height)]

    for number in schematic.numbers():
        cols = range(number.start, number.end + 1)
        is_part = any(schematic.is_adjacent_to_symbol(number.row, c) for c in cols)
        for c in cols:
            marks[number.row][c] = MARK_PATH if is_part else MARK_INSIDE
    return chars, marks


MARKERS = {
    'prob3': mark_schematic,
    'prob10': mark_pipes,
    'prob16': mark_beams,
}


def visualize_grid_ascii(chars, marks):
    """Plain text: marked cells keep their symbol, the rest become '.'.

    Tiles enclosed by a loop are drawn as 'I'.
    """
    output = []
    for row_chars, row_marks in zip(chars, marks):
        row = []
        for ch, mark in zip(row_chars, row_marks):
            if mark in (MARK_PATH, MARK_START):
                row.append(ch)
            elif mark == MARK_INSIDE:
                row.append('I' if ch == '.' else ch)
            else:
                row.append('.')
        output.append(''.join(row))
    return '\n'.join(output)


def visualize_grid_unicode(puzzle, chars, marks):
    """Box-drawing rendering for pipes and mirrors, '·' for unmarked cells."""
    if puzzle == 'prob10':
        table = {pipe.value: ch for pipe, ch in PIPE_CHARS.items()}
    elif puzzle == 'prob16':
        table = {node.value: ch for node, ch in MIRROR_CHARS.items()}
    else:
        table = {}

    output = []
    for row_chars, row_marks in zip(chars, marks):
        row = []
        for ch, mark in zip(row_chars, row_marks):
            if mark == MARK_START:
                row.append('S')
            elif mark == MARK_INSIDE and ch == '.':
                row.append('■')
            elif mark == MARK_PATH and puzzle == 'prob16' and ch == '.':
                row.append('#')
            elif mark != MARK_NONE:
                row.append(table.get(ch, ch))
            else:
                row.append('·')
        output.append(''.join(row))
    return '\n'.join(output)


def plot_grid(marks, title='', output=None):
    """Draw the marks as a coloured image. Saves to `output` or opens a window."""
    image = np.array(marks, dtype=int)
    height, width = image.shape

    fig = plt.figure(figsize=(max(4, width / 10), max(4, height / 10)))
    ax = fig.add_subplot(111)
    ax.imshow(image, cmap=ListedColormap(COLOURS), vmin=0, vmax=len(COLOURS) - 1,
              interpolation='nearest')
    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_title(title)
    plt.tight_layout()

    if output:
        fig.savefig(output)
        plt.close(fig)
    else:
        plt.show()


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Visualize puzzle grids',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s prob10 inputs/prob10.txt
  %(prog)s prob16 inputs/prob16.txt --ascii
  %(prog)s prob3 inputs/prob3.txt --info
  %(prog)s prob10 inputs/prob10.txt --plot --output loop.png
        """
    )
    parser.add_argument('puzzle', choices=PUZZLES, help='Which puzzle the input belongs to')
    parser.add_argument('filename', help='Puzzle input to visualize')
    parser.add_argument('--ascii', action='store_true',
                        help='Use plain ASCII instead of Unicode')
    parser.add_argument('--info', action='store_true',
                        help='Show grid information only (no visualization)')
    parser.add_argument('--plot', action='store_true',
                        help='Draw the grid with matplotlib')
    parser.add_argument('--output', '-o', metavar='FILE',
                        help='Save the plot to FILE instead of opening a window')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Log debug output to stderr')

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.output and not args.plot:
        print("Error: --output requires --plot", file=sys.stderr)
        return 1

    try:
        text = read_input(args.filename)
        chars, marks = MARKERS[args.puzzle](text)

        marked = sum(1 for row in marks for mark in row if mark == MARK_PATH)
        print(f"Grid: {args.filename}")
        print(f"Dimensions: {len(chars[0])}x{len(chars)}")
        print(f"Marked cells: {marked}")
        print()

        if args.info:
            return 0

        if args.plot:
            plot_grid(marks, title=f'{args.puzzle}: {args.filename}', output=args.output)
            if args.output:
                print(f"Saved to: {args.output}")
        elif args.ascii:
            print(visualize_grid_ascii(chars, marks))
        else:
            print(visualize_grid_unicode(args.puzzle, chars, marks))

    except FileNotFoundError:
        print(f"Error: File not found: {args.filename}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
