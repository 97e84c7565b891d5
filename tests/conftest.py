"""
Shared pytest fixtures for the engine tests.

Boards are written as lists of strings, one per row: 'X', 'O' or '.' for empty.
"""

import pytest

from ai_agent import AIAgent


def _make_grid(rows):
    return [[None if ch == '.' else ch for ch in row] for row in rows]


def _empty_grid(size):
    return [[None for _ in range(size)] for _ in range(size)]


@pytest.fixture
def make_grid():
    return _make_grid


@pytest.fixture
def empty_grid():
    return _empty_grid


@pytest.fixture
def agent():
    """Seeded agent with the default Standard time budget."""
    return AIAgent(seed=1234)


@pytest.fixture
def unlimited_agent():
    """Seeded agent whose Standard search is never cut by the clock."""
    return AIAgent(time_budget=None, seed=1234)
