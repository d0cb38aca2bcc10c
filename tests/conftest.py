"""
Central pytest configuration for this project.

This file is automatically discovered by pytest and is intended for:

- **Fixtures**: reusable objects or setup logic shared across multiple test files.

Notes
-----
- Contributors should
  install the package in editable mode (`pip install -e .`) so that imports are resolved
  consistently in local dev and CI environments.
- Keep this file focused on test setup. Do not add library logic here.
"""

import pytest

from smallprng.engines import Engine, Seiran128Engine, SFC32Engine, SFC64Engine


class ListEngine(Engine):
    """Engine replaying a fixed list of words; records how many were drawn."""

    def __init__(self, words, width=32):
        self.width = width
        self.words = list(words)
        self.calls = 0

    def next(self):
        word = self.words[self.calls]
        self.calls += 1
        return word

    @property
    def state(self):
        return (self.calls,)

    @state.setter
    def state(self, words):
        (self.calls,) = words


@pytest.fixture
def list_engine():
    """Factory for scripted engines: list_engine(words, width=32)."""
    return ListEngine


@pytest.fixture
def seiran401():
    """Seiran128 engine seeded with 401 (reference vector seed)."""
    e = Seiran128Engine()
    e.init(401)
    return e


@pytest.fixture
def sfc64_pre():
    """SFC64A engine seeded with init_pre()."""
    e = SFC64Engine()
    e.init_pre()
    return e


@pytest.fixture
def sfc32_pre():
    """SFC32A engine seeded with init_pre()."""
    e = SFC32Engine()
    e.init_pre()
    return e
