"""Enumerate every critical path from the start vertex to the finish vertex.

A critical path is a chain 0 -> ... -> N-1 on which no vertex has any
slack (es == ls).  Delaying any vertex on it delays the whole project.
There can be several of them when parallel chains tie for the longest
duration, and we report all of them.

Algorithm:
  Depth-first search from vertex 0.  From u we only follow an edge
  u -> v with duration w when es[v] == es[u] + w, i.e. the edge is
  tight and lies on some longest path into v.  When the search enters
  the finish vertex and every vertex on the current path has zero
  slack, the path is recorded and not extended.  Otherwise the vertex
  is expanded as usual.  Successors are tried in edge insertion order
  and the current vertex is dropped from the path once its edges are
  exhausted, so paths sharing a prefix are all found.

The search keeps its own stack of frames instead of recursing, so a
long chain does not run into the interpreter's recursion limit.  Each
frame remembers its vertex, its outgoing edges and how far through
them we are.  The visiting order is exactly that of the recursive
version.  The graph must already be known to be acyclic.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from critpath.graph.adjacency import Edge, ScheduleGraph

log = logging.getLogger(__name__)


@dataclass(slots=True)
class _Frame:
    vertex: int
    edges: list[Edge]
    next_edge: int = 0


def find_critical_paths(
    graph: ScheduleGraph,
    earliest: list[int],
    latest: list[int],
) -> list[list[int]]:
    """Return every zero-slack path from graph.source to graph.sink.

    Paths come out in depth-first order following edge insertion order.
    """
    sink = graph.sink
    paths: list[list[int]] = []
    path: list[int] = []
    stack: list[_Frame] = []

    def enter(vertex: int) -> None:
        path.append(vertex)
        if vertex == sink and all(earliest[v] == latest[v] for v in path):
            paths.append(list(path))
            path.pop()
            return
        stack.append(_Frame(vertex, graph.successors(vertex)))

    enter(graph.source)
    while stack:
        frame = stack[-1]
        if frame.next_edge == len(frame.edges):
            # backtrack
            stack.pop()
            path.pop()
            continue
        edge = frame.edges[frame.next_edge]
        frame.next_edge += 1
        if earliest[edge.target] == earliest[frame.vertex] + edge.duration:
            enter(edge.target)

    log.debug("Found %d critical path(s)", len(paths))
    return paths
