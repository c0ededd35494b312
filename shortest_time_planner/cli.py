"""Command line entry point for the shortest-time planner."""

from __future__ import annotations

import sys

from shortest_time_planner.planner import PlannerError, PlannerShortestTime


def print_usage() -> None:
    """Print how the command is used."""
    sys.stdout.write(" Usage: ./plan_short_time <problem JSON file>")
    sys.stdout.write(" <states JSON file> <actions JSON file> \n")


def _output_path(problem_json_file: str) -> str:
    head, sep, _ = problem_json_file.rpartition("/")
    return (head if sep else problem_json_file) + "/optimal_actions.json"


def main(argv=None) -> int:
    """Plan the shortest-time path for the problem given on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)

    if args and args[0] == "--help":
        print_usage()
        return 0

    if len(args) < 3:
        sys.stderr.write(" No JSON files provided \n")
        print_usage()
        return 0

    problem_file, states_file, actions_file = args[:3]
    planner = PlannerShortestTime()

    try:
        planner.load_problem_data(problem_file, states_file, actions_file)
    except PlannerError as exc:
        sys.stderr.write(f" {exc}\n Failed to load JSON data\n")
        return 0

    try:
        planner.validate_problem_data()
    except PlannerError as exc:
        sys.stderr.write(f" {exc}\n Problem data is inconsistent\n")
        return 0

    try:
        planner.calc_shortest_time_path()
    except PlannerError as exc:
        sys.stderr.write(f" {exc}\n Failed to calculate shortest time path\n")
        return 0

    try:
        planner.echo_shortest_time_path(_output_path(problem_file))
    except OSError as exc:
        sys.stderr.write(f"{exc}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())