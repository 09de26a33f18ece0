"""Small demonstration project used by the CLI and the tests.

Nine events, eleven activities.  Two chains tie for the longest
duration of 18: 0-1-4-6-8 and 0-1-4-7-8.
"""
from __future__ import annotations

from critpath.graph.adjacency import ScheduleGraph

SAMPLE_VERTEX_COUNT = 9

SAMPLE_EDGES: list[tuple[int, int, int]] = [
    (0, 1, 6),
    (0, 2, 4),
    (0, 3, 5),
    (1, 4, 1),
    (2, 4, 1),
    (3, 5, 2),
    (4, 6, 9),
    (4, 7, 7),
    (5, 7, 4),
    (6, 8, 2),
    (7, 8, 4),
]


def sample_graph() -> ScheduleGraph:
    g = ScheduleGraph(SAMPLE_VERTEX_COUNT)
    for src, dst, duration in SAMPLE_EDGES:
        g.add_edge(src, dst, duration)
    return g
