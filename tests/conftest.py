"""Pytest configuration and shared fixtures for graphkit tests.

This module provides:
- Small reference graphs used across test modules
- An autouse fixture restoring debug mode after every test
"""

from typing import Generator

import pytest

from graphkit import ListGraph, WeightedListGraph
from graphkit.diagnostics import is_debug_enabled, set_debug_enabled


@pytest.fixture(autouse=True)
def restore_debug_mode() -> Generator[None, None, None]:
    """Leave the global debug flag as each test found it."""
    original = is_debug_enabled()
    try:
        yield
    finally:
        set_debug_enabled(original)


@pytest.fixture
def chain() -> ListGraph:
    """Directed chain 1 -> 2 -> 3 -> 4."""
    return ListGraph.from_edges([(1, 2), (2, 3), (3, 4)], directed=True)


@pytest.fixture
def weighted_chain() -> WeightedListGraph:
    """Directed weighted chain 1 -> 2 -> 3 -> 4."""
    return WeightedListGraph.from_edges([(1, 2, 1.0), (2, 3, 2.0), (3, 4, 2.0)], directed=True)


@pytest.fixture
def detour() -> WeightedListGraph:
    """Directed graph where 1 -> 3 -> 2 (cost 5) beats 1 -> 2 (cost 10)."""
    return WeightedListGraph.from_edges(
        [(1, 2, 10.0), (1, 3, 2.0), (3, 2, 3.0)], directed=True
    )
