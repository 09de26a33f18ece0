"""Critical Path Method scheduling for project networks.

    from critpath import ScheduleGraph
    g = ScheduleGraph(3)
    g.add_edge(0, 1, 4)
    g.add_edge(1, 2, 2)
    result = g.compute_schedule()
"""
from critpath.graph import (
    CyclicGraphError,
    Edge,
    GraphError,
    InvalidEdgeError,
    OutOfRangeError,
    ScheduleGraph,
)
from critpath.schedule import ScheduleResult, compute_schedule

__all__ = [
    "CyclicGraphError",
    "Edge",
    "GraphError",
    "InvalidEdgeError",
    "OutOfRangeError",
    "ScheduleGraph",
    "ScheduleResult",
    "compute_schedule",
]
