"""Topological sort via Kahn's algorithm (BFS with in-degree tracking).

The order matters beyond validity: the forward pass walks it front to
back and the backward pass walks it back to front, so every vertex is
settled before anything that depends on it is touched.  It is also
part of the returned schedule, so it has to be deterministic.  The
queue is seeded with zero in-degree vertices in index order and is
strictly FIFO, so ties are broken by the order in which vertices
become free.

The algorithm:
  1.  Count incoming edges for every vertex (parallel edges count
      once each).
  2.  Seed a queue with all vertices whose in-degree is 0, in
      ascending index order.
  3.  Pop a vertex, append it to the result, decrement the in-degree
      of each edge target.  A target that drops to 0 enters the queue.
  4.  If the result holds every vertex, the graph is a DAG.
      Otherwise at least one cycle remains.
"""
from __future__ import annotations

import logging
from collections import deque

from critpath.graph.adjacency import GraphError, ScheduleGraph

log = logging.getLogger(__name__)


class CyclicGraphError(GraphError):
    """Raised when topological sort encounters a cycle."""

    def __init__(self, remaining_nodes: list[int]) -> None:
        self.remaining_nodes = remaining_nodes
        super().__init__(
            f"Graph has at least one cycle and is not a DAG: "
            f"{len(remaining_nodes)} vertex(es) could not be ordered"
        )


def topological_sort(graph: ScheduleGraph) -> list[int]:
    """Return every vertex so that each edge points forward in the list.

    Raises CyclicGraphError if the graph contains a cycle.
    """
    in_deg = graph.in_degrees()

    q: deque[int] = deque(v for v, deg in enumerate(in_deg) if deg == 0)

    result: list[int] = []
    while q:
        u = q.popleft()
        result.append(u)
        for edge in graph.successors(u):
            in_deg[edge.target] -= 1
            if in_deg[edge.target] == 0:
                q.append(edge.target)

    if len(result) != graph.vertex_count:
        ordered = set(result)
        remaining = [v for v in graph.vertices() if v not in ordered]
        raise CyclicGraphError(remaining)

    log.debug("Topological order over %d vertices: %s", len(result), result)
    return result
