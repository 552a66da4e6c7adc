"""Shared graph fixtures."""

from __future__ import annotations

import pytest

from greedypath.graph import WeightedGraph


@pytest.fixture
def triangle1():
    # Cost:
    #      [1]       [1]
    #   0───────1───────2
    #   │               │
    #   └───────────────┘
    #          [5]
    g = WeightedGraph(3)
    g.add_edge(0, 1, 1)
    g.add_edge(1, 2, 1)
    g.add_edge(0, 2, 5)
    return g


@pytest.fixture
def triangle2():
    # Cost:
    #      [3]       [1]
    #   0───────1───────2
    #   │               │
    #   └───────────────┘
    #          [1]
    g = WeightedGraph(3)
    g.add_edge(0, 1, 3)
    g.add_edge(1, 2, 1)
    g.add_edge(0, 2, 1)
    return g


@pytest.fixture
def isolated1():
    # Cost:
    #      [2]       [4]
    #   0───────1───────2       3
    g = WeightedGraph(4)
    g.add_edge(0, 1, 2)
    g.add_edge(1, 2, 4)
    return g


@pytest.fixture
def star1():
    # Cost:
    #         1
    #         │[1]
    #   2─────0─────3
    #     [1]   [2]
    #         │[1]
    #         4
    g = WeightedGraph(5)
    g.add_edge(0, 1, 1)
    g.add_edge(0, 2, 1)
    g.add_edge(0, 3, 2)
    g.add_edge(0, 4, 1)
    return g


@pytest.fixture
def square1():
    # Cost:
    #      [1]
    #   0───────1
    #   │       │
    #  [4]     [2]
    #   │       │
    #   3───────2
    #      [3]
    #
    # Diagonal 0-2 [10], diagonal 1-3 [0.5]
    g = WeightedGraph(4)
    g.add_edge(0, 1, 1)
    g.add_edge(1, 2, 2)
    g.add_edge(2, 3, 3)
    g.add_edge(3, 0, 4)
    g.add_edge(0, 2, 10)
    g.add_edge(1, 3, 0.5)
    return g


@pytest.fixture
def negative1():
    # Cost:
    #      [-2]      [3]      [-1]
    #   0───────1───────2───────3
    g = WeightedGraph(4)
    g.add_edge(0, 1, -2)
    g.add_edge(1, 2, 3)
    g.add_edge(2, 3, -1)
    return g


@pytest.fixture
def empty_graph():
    return WeightedGraph(0)
