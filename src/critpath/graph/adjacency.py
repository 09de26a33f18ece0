"""Project network stored as integer-indexed adjacency lists.

Vertices are the integers 0..N-1, fixed when the graph is created.
Vertex 0 is the project start and vertex N-1 the project finish; the
graph does not enforce that, it is the convention the scheduler relies
on.  Each vertex owns a list of outgoing Edge records (target, duration)
kept in insertion order.  Parallel edges between the same pair are kept
as separate entries: each one counts toward in-degree and each one is
relaxed during time propagation.

Insertion validates indices and durations up front so a bad edge is
rejected without touching the graph.  Cycles are *not* checked here;
that is the topological sort's job.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from critpath.schedule import ScheduleResult


class GraphError(Exception):
    """Base class for every error raised by critpath."""


class OutOfRangeError(GraphError, IndexError):
    """Raised when an edge names a vertex outside [0, vertex_count)."""

    def __init__(self, vertex: object, vertex_count: int) -> None:
        self.vertex = vertex
        self.vertex_count = vertex_count
        super().__init__(
            f"Vertex {vertex!r} out of range: expected an integer in "
            f"[0, {vertex_count})"
        )


class InvalidEdgeError(GraphError, ValueError):
    """Raised when an edge duration is negative or not an integer."""

    def __init__(self, duration: object) -> None:
        self.duration = duration
        super().__init__(
            f"Invalid edge duration {duration!r}: expected a non-negative integer"
        )


@dataclass(frozen=True, slots=True)
class Edge:
    """Outgoing edge: the vertex it points to and the time it takes."""
    target: int
    duration: int


def _is_int(value: object) -> bool:
    # bool is an int subclass but True/False are never meant as indices
    return isinstance(value, int) and not isinstance(value, bool)


class ScheduleGraph:
    """Fixed-size directed multigraph of project events.

    Usage:
        g = ScheduleGraph(3)
        g.add_edge(0, 1, 4)
        g.add_edge(1, 2, 2)
        result = g.compute_schedule()
    """

    __slots__ = ("_adj",)

    def __init__(self, vertex_count: int) -> None:
        if not _is_int(vertex_count) or vertex_count < 1:
            raise ValueError(
                f"vertex_count must be a positive integer, got {vertex_count!r}"
            )
        self._adj: list[list[Edge]] = [[] for _ in range(vertex_count)]

    # ---- mutation --------------------------------------------------------

    def add_edge(self, src: int, dst: int, duration: int) -> None:
        """Append an edge src -> dst taking *duration* time units.

        Raises OutOfRangeError for a bad vertex and InvalidEdgeError for
        a bad duration.  Self-loops are accepted here and rejected later
        as cycles.
        """
        self._check_vertex(src)
        self._check_vertex(dst)
        if not _is_int(duration) or duration < 0:
            raise InvalidEdgeError(duration)
        self._adj[src].append(Edge(dst, duration))

    # ---- queries ---------------------------------------------------------

    @property
    def vertex_count(self) -> int:
        return len(self._adj)

    @property
    def edge_count(self) -> int:
        return sum(len(out) for out in self._adj)

    @property
    def source(self) -> int:
        return 0

    @property
    def sink(self) -> int:
        return len(self._adj) - 1

    def vertices(self) -> range:
        return range(len(self._adj))

    def successors(self, vertex: int) -> list[Edge]:
        """Outgoing edges of *vertex* in insertion order."""
        self._check_vertex(vertex)
        return list(self._adj[vertex])

    def out_degree(self, vertex: int) -> int:
        self._check_vertex(vertex)
        return len(self._adj[vertex])

    def in_degree(self, vertex: int) -> int:
        self._check_vertex(vertex)
        return sum(
            1 for out in self._adj for edge in out if edge.target == vertex
        )

    def in_degrees(self) -> list[int]:
        """In-degree of every vertex, computed in one pass over the edges."""
        degrees = [0] * len(self._adj)
        for out in self._adj:
            for edge in out:
                degrees[edge.target] += 1
        return degrees

    def edges(self) -> Iterator[tuple[int, Edge]]:
        for src, out in enumerate(self._adj):
            for edge in out:
                yield src, edge

    # ---- scheduling ------------------------------------------------------

    def compute_schedule(self) -> ScheduleResult:
        """Run the full CPM computation.  See critpath.schedule."""
        from critpath.schedule import compute_schedule

        return compute_schedule(self)

    # ---- internals -------------------------------------------------------

    def _check_vertex(self, vertex: object) -> None:
        if not _is_int(vertex) or not 0 <= vertex < len(self._adj):  # type: ignore[operator]
            raise OutOfRangeError(vertex, len(self._adj))

    # ---- dunder ----------------------------------------------------------

    def __len__(self) -> int:
        return self.vertex_count

    def __repr__(self) -> str:
        return f"ScheduleGraph(vertices={self.vertex_count}, edges={self.edge_count})"
