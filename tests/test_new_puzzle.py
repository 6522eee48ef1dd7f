"""Tests for the puzzle scaffolding tool."""

from __future__ import annotations

import os

import pytest

import new_puzzle
from new_puzzle import create_puzzle


def test_create_puzzle(tmp_path):
    written = create_puzzle(7, 'Camel cards', root=str(tmp_path))

    assert [os.path.relpath(p, tmp_path) for p in written] == [
        'prob7.py',
        os.path.join('tests', 'test_prob7.py'),
        os.path.join('tests', 'data', 'prob7_test.txt'),
    ]
    source = (tmp_path / 'prob7.py').read_text(encoding='utf-8')
    assert 'Camel cards' in source
    assert "run('prob7', part1, part2, argv)" in source
    assert 'from prob7 import part1, part2' in (tmp_path / 'tests' / 'test_prob7.py').read_text(encoding='utf-8')
    assert (tmp_path / 'tests' / 'data' / 'prob7_test.txt').read_text(encoding='utf-8') == ''


def test_generated_source_compiles(tmp_path):
    create_puzzle(8, root=str(tmp_path))

    source = (tmp_path / 'prob8.py').read_text(encoding='utf-8')
    compile(source, 'prob8.py', 'exec')
    assert 'Puzzle 8' in source


def test_refuses_to_overwrite(tmp_path):
    create_puzzle(9, root=str(tmp_path))
    (tmp_path / 'prob9.py').write_text('# solved\n', encoding='utf-8')

    with pytest.raises(FileExistsError):
        create_puzzle(9, root=str(tmp_path))
    assert (tmp_path / 'prob9.py').read_text(encoding='utf-8') == '# solved\n'


def test_force_overwrites(tmp_path):
    create_puzzle(9, root=str(tmp_path))
    create_puzzle(9, title='Mirage maintenance', root=str(tmp_path), force=True)

    assert 'Mirage maintenance' in (tmp_path / 'prob9.py').read_text(encoding='utf-8')


def test_invalid_day(tmp_path):
    with pytest.raises(ValueError):
        create_puzzle(0, root=str(tmp_path))


def test_main(capsys, tmp_path):
    assert new_puzzle.main(['11', '--root', str(tmp_path)]) == 0
    assert 'Wrote prob11.py' in capsys.readouterr().out

    assert new_puzzle.main(['11', '--root', str(tmp_path)]) == 1
    assert 'Already exists' in capsys.readouterr().err
