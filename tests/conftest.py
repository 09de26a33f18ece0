"""Shared fixtures for critpath tests."""
from __future__ import annotations

import random

import pytest

from critpath.graph.adjacency import ScheduleGraph
from critpath.sample import sample_graph

SEED = 42


@pytest.fixture
def single_vertex() -> ScheduleGraph:
    return ScheduleGraph(1)


@pytest.fixture
def linear_graph() -> ScheduleGraph:
    """0 -(2)-> 1 -(3)-> 2 -(4)-> 3"""
    g = ScheduleGraph(4)
    for src, dst, w in [(0, 1, 2), (1, 2, 3), (2, 3, 4)]:
        g.add_edge(src, dst, w)
    return g


@pytest.fixture
def diamond_graph() -> ScheduleGraph:
    """
    0 -(5)-> 1 -(1)-> 3
    0 -(2)-> 2 -(1)-> 3
    """
    g = ScheduleGraph(4)
    for src, dst, w in [(0, 1, 5), (0, 2, 2), (1, 3, 1), (2, 3, 1)]:
        g.add_edge(src, dst, w)
    return g


@pytest.fixture
def project_graph() -> ScheduleGraph:
    """The nine-event sample project (duration 18, two critical paths)."""
    return sample_graph()


def make_random_dag(
    vertex_count: int, extra_edges: int, seed: int = SEED, max_duration: int = 9
) -> ScheduleGraph:
    """Random DAG where every vertex is reachable from 0.

    Edges only point from lower to higher index, so there are no cycles
    and nothing leaves the last vertex.
    """
    rng = random.Random(seed)
    g = ScheduleGraph(vertex_count)
    for v in range(1, vertex_count):
        g.add_edge(rng.randrange(v), v, rng.randint(0, max_duration))
    for _ in range(extra_edges):
        u = rng.randrange(vertex_count - 1)
        v = rng.randrange(u + 1, vertex_count)
        g.add_edge(u, v, rng.randint(0, max_duration))
    return g
