"""Tests for critical path enumeration."""
from __future__ import annotations

import pytest

from critpath.graph.adjacency import ScheduleGraph
from critpath.graph.critical_path import find_critical_paths
from critpath.graph.propagation import propagate_times
from critpath.graph.topological import topological_sort

from .conftest import make_random_dag


def _paths(g: ScheduleGraph) -> list[list[int]]:
    t = propagate_times(g, topological_sort(g))
    return find_critical_paths(g, t.earliest_start, t.latest_start)


def _brute_force(g: ScheduleGraph) -> list[list[int]]:
    """Every tight, zero-slack source->sink path, by plain recursion."""
    t = propagate_times(g, topological_sort(g))
    es, ls = t.earliest_start, t.latest_start
    found: list[list[int]] = []

    def walk(path: list[int]) -> None:
        u = path[-1]
        if u == g.sink:
            if all(es[v] == ls[v] for v in path):
                found.append(path)
            return
        for e in g.successors(u):
            if es[e.target] == es[u] + e.duration:
                walk(path + [e.target])

    walk([g.source])
    return found


class TestFindCriticalPaths:
    def test_single_vertex(self, single_vertex: ScheduleGraph) -> None:
        assert _paths(single_vertex) == [[0]]

    def test_linear(self, linear_graph: ScheduleGraph) -> None:
        assert _paths(linear_graph) == [[0, 1, 2, 3]]

    def test_diamond_picks_longer_branch(self, diamond_graph: ScheduleGraph) -> None:
        assert _paths(diamond_graph) == [[0, 1, 3]]

    def test_sample_project_finds_both_paths(self, project_graph: ScheduleGraph) -> None:
        assert _paths(project_graph) == [[0, 1, 4, 6, 8], [0, 1, 4, 7, 8]]

    def test_paths_follow_insertion_order(self) -> None:
        g = ScheduleGraph(4)
        g.add_edge(0, 2, 3)
        g.add_edge(0, 1, 3)
        g.add_edge(1, 3, 1)
        g.add_edge(2, 3, 1)
        assert _paths(g) == [[0, 2, 3], [0, 1, 3]]

    def test_parallel_tight_edges_each_yield_a_path(self) -> None:
        g = ScheduleGraph(2)
        g.add_edge(0, 1, 4)
        g.add_edge(0, 1, 2)
        g.add_edge(0, 1, 4)
        assert _paths(g) == [[0, 1], [0, 1]]

    def test_zero_duration_graph(self) -> None:
        g = ScheduleGraph(3)
        g.add_edge(0, 1, 0)
        g.add_edge(0, 2, 0)
        g.add_edge(1, 2, 0)
        assert _paths(g) == [[0, 1, 2], [0, 2]]

    def test_no_path_when_sink_has_slack(self) -> None:
        g = ScheduleGraph(3)
        g.add_edge(0, 1, 5)
        g.add_edge(0, 2, 1)
        assert _paths(g) == []

    def test_unreachable_sink(self) -> None:
        g = ScheduleGraph(3)
        g.add_edge(0, 1, 2)
        g.add_edge(2, 1, 1)
        assert _paths(g) == []

    def test_no_path_when_source_has_slack(self) -> None:
        g = ScheduleGraph(3)
        g.add_edge(1, 2, 5)
        t = propagate_times(g, topological_sort(g))
        assert t.earliest_start == [0, 0, 5]
        assert t.latest_start == [5, 0, 5]
        assert t.slack == [5, 0, 0]
        assert find_critical_paths(g, t.earliest_start, t.latest_start) == []

    def test_deep_chain_does_not_recurse(self) -> None:
        n = 5000
        g = ScheduleGraph(n)
        for v in range(n - 1):
            g.add_edge(v, v + 1, 1)
        assert _paths(g) == [list(range(n))]

    @pytest.mark.parametrize("seed", range(8))
    def test_matches_recursive_search(self, seed: int) -> None:
        g = make_random_dag(12, extra_edges=20, seed=seed, max_duration=3)
        assert _paths(g) == _brute_force(g)
