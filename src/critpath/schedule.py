"""Critical Path Method schedule for a ScheduleGraph.

compute_schedule() is the one entry point callers need.  It chains the
three graph algorithms:

  1.  topological_sort     -- validates the DAG and fixes the order
  2.  propagate_times      -- forward and backward passes, slack
  3.  find_critical_paths  -- every zero-slack path start -> finish

and packs their output into a ScheduleResult.  Nothing is cached on the
graph: calling it twice on an unchanged graph gives equal results.

Latest starts are seeded with the largest earliest start anywhere in the
graph, not specifically with the finish vertex's.  For a network with a
single finish event those are the same number.  When they differ, the
schedule is still returned as computed but a warning is logged, because
the sink is not the last vertex to finish.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from critpath.graph.adjacency import ScheduleGraph
from critpath.graph.critical_path import find_critical_paths
from critpath.graph.propagation import propagate_times
from critpath.graph.topological import topological_sort

log = logging.getLogger(__name__)


@dataclass(slots=True)
class ScheduleResult:
    """CPM output.  All per-vertex lists are indexed by vertex id."""
    order: list[int]              # topological order used for both passes
    earliest_start: list[int]
    latest_start: list[int]
    slack: list[int]
    critical_paths: list[list[int]]

    @property
    def project_duration(self) -> int:
        return max(self.earliest_start)

    @property
    def critical_vertices(self) -> list[int]:
        """Vertices with zero slack, ascending."""
        return [v for v, s in enumerate(self.slack) if s == 0]

    def is_critical(self, vertex: int) -> bool:
        return self.slack[vertex] == 0


def compute_schedule(graph: ScheduleGraph) -> ScheduleResult:
    """Compute earliest/latest starts, slack and all critical paths.

    Raises CyclicGraphError if *graph* is not a DAG; no partial result
    is produced in that case.
    """
    order = topological_sort(graph)
    times = propagate_times(graph, order)

    duration = max(times.earliest_start)
    if times.earliest_start[graph.sink] != duration:
        last = times.earliest_start.index(duration)
        log.warning(
            "Vertex %d finishes at %d, after the sink vertex %d (%d); "
            "the sink is not the last vertex to finish",
            last, duration, graph.sink, times.earliest_start[graph.sink],
        )

    paths = find_critical_paths(graph, times.earliest_start, times.latest_start)
    log.debug(
        "Scheduled %r: duration=%d, critical paths=%d",
        graph, duration, len(paths),
    )

    return ScheduleResult(
        order=order,
        earliest_start=times.earliest_start,
        latest_start=times.latest_start,
        slack=times.slack,
        critical_paths=paths,
    )
