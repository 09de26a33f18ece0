"""Human-readable rendering of graphs and schedules.

Everything user-facing lives here: vertices are shown 1-based as V1..VN
and start times are shown as start days (time 0 is day 1).  The sink
vertex is left out of the per-vertex tables since it marks project
completion, not an activity that starts.
"""
from __future__ import annotations

from critpath.graph.adjacency import ScheduleGraph
from critpath.schedule import ScheduleResult


def vertex_label(vertex: int) -> str:
    return f"V{vertex + 1}"


def format_path(path: list[int]) -> str:
    return " -> ".join(vertex_label(v) for v in path)


def format_order(order: list[int]) -> str:
    return format_path(order)


def format_graph(graph: ScheduleGraph) -> str:
    """One line per vertex listing its successors and edge durations."""
    lines = []
    for v in graph.vertices():
        succ = " ".join(
            f"{vertex_label(e.target)}({e.duration})" for e in graph.successors(v)
        )
        lines.append(f"{vertex_label(v)}: {succ}".rstrip())
    return "\n".join(lines)


def _table(title: str, values: list[int], offset: int = 0) -> list[str]:
    lines = [f"{title}:"]
    # last vertex is the finish event
    for v, value in enumerate(values[:-1]):
        lines.append(f"  {vertex_label(v):<6} {value + offset:>6}")
    return lines


def format_report(result: ScheduleResult, label: str = "Schedule") -> str:
    """Format a ScheduleResult as a readable report string."""
    lines = [
        f"=== {label} ===",
        f"Topological order: {format_order(result.order)}",
        f"Project duration:  {result.project_duration}",
        "Critical paths:",
    ]
    if result.critical_paths:
        lines.extend(f"  {format_path(p)}" for p in result.critical_paths)
    else:
        lines.append("  (none)")
    lines.extend(_table("Earliest start (day)", result.earliest_start, offset=1))
    lines.extend(_table("Latest start (day)", result.latest_start, offset=1))
    lines.extend(_table("Slack", result.slack))
    return "\n".join(lines)
