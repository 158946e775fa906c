"""Shared fixtures: small weighted digraphs given as (node_count, edges)."""

from __future__ import annotations

import pytest


@pytest.fixture
def delay_graph():
    # Five nodes; shortest 0 -> 2 is 0-3-1-4-2 with cost 2 + 4 + 1 + 7 = 14.
    edges = [
        (0, 1, 9),
        (0, 3, 2),
        (1, 4, 1),
        (3, 1, 4),
        (3, 4, 6),
        (2, 1, 3),
        (4, 2, 7),
        (2, 0, 5),
    ]
    return 5, edges


@pytest.fixture
def split_graph():
    # Two components: {0, 1, 2} and {3, 4}; nothing crosses from the first.
    edges = [
        (0, 1, 1.5),
        (1, 2, 2.5),
        (0, 2, 5.0),
        (3, 4, 1.0),
        (4, 0, 1.0),
    ]
    return 5, edges


@pytest.fixture
def diamond_graph():
    # Two equal-cost routes 0-1-3 and 0-2-3 plus a dearer direct edge.
    edges = [
        (0, 1, 1),
        (0, 2, 1),
        (1, 3, 1),
        (2, 3, 1),
        (0, 3, 5),
    ]
    return 4, edges
