"""Shared fixtures for the puzzle tests."""

from __future__ import annotations

from pathlib import Path

import matplotlib
import pytest

matplotlib.use('Agg')

DATA_DIR = Path(__file__).parent / 'data'


@pytest.fixture()
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture()
def read_data():
    """Return the text of an example input under tests/data."""
    def _read(name: str) -> str:
        return (DATA_DIR / name).read_text(encoding='utf-8')
    return _read
