"""critpath CLI entry point.

Usage: critpath [--log-level LEVEL] [command]

  demo                      schedule the built-in sample project
  schedule -n N -e S:D:W    schedule a project given on the command line
"""
import argparse
import logging
import sys

from critpath.graph.adjacency import GraphError, ScheduleGraph


def _edge(text: str) -> tuple[int, int, int]:
    """argparse type for SRC:DST:DURATION."""
    parts = text.split(":")
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(
            f"expected SRC:DST:DURATION, got {text!r}"
        )
    try:
        src, dst, duration = (int(p) for p in parts)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"edge fields must be integers, got {text!r}"
        ) from None
    return src, dst, duration


def _add_demo_parser(subparsers: argparse._SubParsersAction) -> None:
    subparsers.add_parser(
        "demo",
        help="Print the sample project network and its schedule.",
    )


def _add_schedule_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "schedule",
        help="Schedule a project network given as edges.",
    )
    p.add_argument(
        "-n", "--vertices", type=int, required=True,
        help="Number of events; 0 is the start, N-1 the finish.",
    )
    p.add_argument(
        "-e", "--edge", type=_edge, action="append", default=[],
        metavar="SRC:DST:DURATION", dest="edges",
        help="Activity from SRC to DST (0-based) taking DURATION. Repeatable.",
    )
    p.add_argument(
        "--show-graph", action="store_true",
        help="Print the adjacency lists before the schedule.",
    )


def _print_schedule(graph: ScheduleGraph, show_graph: bool, label: str) -> None:
    from critpath.report import format_graph, format_report

    result = graph.compute_schedule()
    if show_graph:
        print(format_graph(graph))
        print()
    print(format_report(result, label=label))


def _run_demo(args: argparse.Namespace) -> None:
    from critpath.sample import sample_graph

    _print_schedule(sample_graph(), show_graph=True, label="Sample project")


def _run_schedule(args: argparse.Namespace) -> None:
    graph = ScheduleGraph(args.vertices)
    for src, dst, duration in args.edges:
        graph.add_edge(src, dst, duration)
    _print_schedule(graph, show_graph=args.show_graph, label="Schedule")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="critpath",
        description="Critical Path Method scheduling for project networks.",
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_demo_parser(subparsers)
    _add_schedule_parser(subparsers)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    try:
        if args.command == "demo":
            _run_demo(args)
        elif args.command == "schedule":
            _run_schedule(args)
    except (GraphError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(1)
