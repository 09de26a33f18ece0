"""Forward and backward passes of the Critical Path Method.

Forward pass (earliest start):
    Start every vertex at 0.  Walk the topological order; for each
    edge u -> v with duration w, push v to at least es[u] + w.  Every
    predecessor of v comes before v in the order, so es[v] is final by
    the time v itself is visited.

Backward pass (latest start):
    Let D be the largest earliest start anywhere in the graph (the
    project duration).  Start every vertex at D.  Walk the order in
    reverse; for each edge u -> v with duration w, pull u down to at
    most ls[v] - w.  Every successor of u is finalised before u.

A vertex with no outgoing edges is never pulled down, so it keeps
ls = D even if it is not the project's finish vertex.  An isolated
vertex therefore ends up with es = 0 and ls = D.

Slack is ls - es, computed once both passes are done.
"""
from __future__ import annotations

from dataclasses import dataclass

from critpath.graph.adjacency import ScheduleGraph


@dataclass(slots=True)
class Times:
    """Per-vertex results of both passes, indexed by vertex."""
    earliest_start: list[int]
    latest_start: list[int]
    slack: list[int]


def forward_pass(graph: ScheduleGraph, order: list[int]) -> list[int]:
    """Earliest start of every vertex, given a topological *order*."""
    earliest = [0] * graph.vertex_count
    for u in order:
        for edge in graph.successors(u):
            earliest[edge.target] = max(
                earliest[edge.target], earliest[u] + edge.duration
            )
    return earliest


def backward_pass(
    graph: ScheduleGraph, order: list[int], earliest: list[int]
) -> list[int]:
    """Latest start of every vertex, given *order* and the forward pass."""
    project_duration = max(earliest)
    latest = [project_duration] * graph.vertex_count
    for u in reversed(order):
        for edge in graph.successors(u):
            latest[u] = min(latest[u], latest[edge.target] - edge.duration)
    return latest


def compute_slack(earliest: list[int], latest: list[int]) -> list[int]:
    return [ls - es for es, ls in zip(earliest, latest)]


def propagate_times(graph: ScheduleGraph, order: list[int]) -> Times:
    """Run both passes over *order* and derive slack."""
    earliest = forward_pass(graph, order)
    latest = backward_pass(graph, order, earliest)
    return Times(
        earliest_start=earliest,
        latest_start=latest,
        slack=compute_slack(earliest, latest),
    )
