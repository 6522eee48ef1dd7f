#!/usr/bin/env python3
"""Create the files for a new daily puzzle.

Writes probN.py at the repository root, tests/test_probN.py and an empty
tests/data/probN_test.txt for the example input. Existing files are never
overwritten unless --force is given.
"""
from __future__ import annotations

import argparse
import os
import sys
from typing import List, Tuple

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

SOLUTION_TEMPLATE = '''#!/usr/bin/env python3
"""
{title}
"""
from __future__ import annotations

import logging
import sys

from advent import run

logger = logging.getLogger(__name__)


def part1(text: str) -> int:
    return 0


def part2(text: str) -> int:
    return 0


def main(argv=None):
    return run('{name}', part1, part2, argv)


if __name__ == '__main__':
    sys.exit(main())
'''

TEST_TEMPLATE = '''from {name} import part1, part2


def test_part1(read_data):
    assert part1(read_data('{name}_test.txt')) == 0


def test_part2(read_data):
    assert part2(read_data('{name}_test.txt')) == 0
'''


def puzzle_files(day: int, title: str, root: str = ROOT) -> List[Tuple[str, str]]:
    """(path, contents) for every file of puzzle `day`."""
    name = f'prob{day}'
    return [
        (os.path.join(root, f'{name}.py'),
         SOLUTION_TEMPLATE.format(name=name, title=title or f'Puzzle {day}')),
        (os.path.join(root, 'tests', f'test_{name}.py'), TEST_TEMPLATE.format(name=name)),
        (os.path.join(root, 'tests', 'data', f'{name}_test.txt'), ''),
    ]


def create_puzzle(day: int, title: str = '', root: str = ROOT, force: bool = False) -> List[str]:
    """Write the files for puzzle `day` and return their paths.

    Raises FileExistsError if any of them exists and `force` is not set.
    """
    if day < 1:
        raise ValueError(f"Invalid day: {day}")

    files = puzzle_files(day, title, root)
    if not force:
        existing = [path for path, _ in files if os.path.exists(path)]
        if existing:
            raise FileExistsError(f"Already exists: {', '.join(existing)}")

    written = []
    for path, contents in files:
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, 'w', encoding='utf-8') as out:
            out.write(contents)
        written.append(path)
    return written


def main(argv=None) -> int:
    p = argparse.ArgumentParser(description='Scaffold a new daily puzzle')
    p.add_argument('day', type=int, help='Puzzle day number')
    p.add_argument('--title', '-t', default='', help='One line description for the module docstring')
    p.add_argument('--root', default=ROOT, help='Repository root (default: this checkout)')
    p.add_argument('--force', action='store_true', help='Overwrite existing files')
    args = p.parse_args(argv)

    try:
        written = create_puzzle(args.day, args.title, args.root, args.force)
    except (FileExistsError, ValueError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    for path in written:
        print(f'Wrote {os.path.relpath(path, args.root)}')
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
