"""Graph algorithms behind the CPM schedule."""

from critpath.graph.adjacency import (
    Edge,
    GraphError,
    InvalidEdgeError,
    OutOfRangeError,
    ScheduleGraph,
)
from critpath.graph.critical_path import find_critical_paths
from critpath.graph.propagation import (
    Times,
    backward_pass,
    compute_slack,
    forward_pass,
    propagate_times,
)
from critpath.graph.topological import CyclicGraphError, topological_sort

__all__ = [
    "CyclicGraphError",
    "Edge",
    "GraphError",
    "InvalidEdgeError",
    "OutOfRangeError",
    "ScheduleGraph",
    "Times",
    "backward_pass",
    "compute_slack",
    "find_critical_paths",
    "forward_pass",
    "propagate_times",
    "topological_sort",
]
