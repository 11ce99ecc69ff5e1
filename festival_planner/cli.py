"""Command-line interface for festival-planner."""

import argparse
import json
import logging
import sys
from pathlib import Path

from festival_planner.api import check_plan, load_timetable, reach, validate
from festival_planner.festival.models import PlannerConfig
from festival_planner.output.json import plan_report_to_dict, write_timetable_json
from festival_planner.version import VERSION


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _config_from_args(args: argparse.Namespace) -> PlannerConfig:
    return PlannerConfig(
        memoize=not getattr(args, "no_memoize", False),
        sort_plan=not getattr(args, "keep_order", False),
    )


def cmd_validate(args: argparse.Namespace) -> int:
    """Execute validate command."""
    setup_logging(args.verbose)

    try:
        report = validate(args.timetable, args.line_up)
        if report.valid:
            print("\nValidation successful!")
            print(f"Stats: {report.stats}")
            if report.warnings:
                print(f"Warnings ({len(report.warnings)}):")
                for warning in report.warnings:
                    print(f"  - {warning}")
            return 0
        else:
            print(f"\nValidation failed with {len(report.errors)} errors:")
            for error in report.errors:
                print(f"  - {error}")
            return 1
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        logging.exception("Validation failed")
        return 1


def cmd_reach(args: argparse.Namespace) -> int:
    """Execute reach command."""
    setup_logging(args.verbose)

    try:
        reachable = reach(
            args.timetable,
            args.source,
            args.source_session,
            args.destination,
            args.destination_session,
            _config_from_args(args),
        )
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        logging.exception("Reachability check failed")
        return 1

    route = (
        f"{args.source} (session {args.source_session}) -> "
        f"{args.destination} (session {args.destination_session})"
    )
    if reachable:
        print(f"\nReachable: {route}")
        return 0
    print(f"\nNot reachable: {route}")
    return 1


def cmd_check(args: argparse.Namespace) -> int:
    """Execute check command."""
    setup_logging(args.verbose)

    try:
        report = check_plan(args.timetable, args.line_up, args.acts, _config_from_args(args))
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        logging.exception("Plan check failed")
        return 1

    if args.json:
        print(json.dumps(plan_report_to_dict(report), indent=2, sort_keys=True))
    elif report.compatible:
        print("\nPlan is compatible!")
        for event in report.events:
            print(f"  - {event}")
    else:
        print("\nPlan is not compatible:")
        print(f"  {report.reason}")
    return 0 if report.compatible else 1


def cmd_routes(args: argparse.Namespace) -> int:
    """Execute routes command."""
    setup_logging(args.verbose)

    try:
        timetable = load_timetable(args.timetable)
        if args.output:
            path = write_timetable_json(Path(args.output), timetable)
            print(f"\nWrote {path}")
            return 0

        services = sorted(
            timetable,
            key=lambda s: (s.session, s.source.name, s.destination.name),
        )
        print(f"\n{len(services)} services:")
        for service in services:
            print(f"  - {service}")
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        logging.exception("Listing routes failed")
        return 1


def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="festival-planner",
        description="Check festival day plans against a shuttle timetable",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Validate input files")
    validate_parser.add_argument("--timetable", required=True, help="Path to timetable file")
    validate_parser.add_argument("--line-up", help="Path to line-up file")
    validate_parser.set_defaults(func=cmd_validate)

    # Reach command
    reach_parser = subparsers.add_parser(
        "reach", help="Check if one venue can be reached from another"
    )
    reach_parser.add_argument("--timetable", required=True, help="Path to timetable file")
    reach_parser.add_argument("source", help="Departure venue")
    reach_parser.add_argument(
        "source_session", type=int, help="Session spent at departure venue"
    )
    reach_parser.add_argument("destination", help="Arrival venue")
    reach_parser.add_argument(
        "destination_session", type=int, help="Session to attend at arrival venue"
    )
    reach_parser.add_argument(
        "--no-memoize",
        action="store_true",
        help="Disable caching of sub-searches (default: cache enabled)",
    )
    reach_parser.set_defaults(func=cmd_reach)

    # Check command
    check_parser = subparsers.add_parser("check", help="Check a day plan for compatibility")
    check_parser.add_argument("--timetable", required=True, help="Path to timetable file")
    check_parser.add_argument("--line-up", required=True, help="Path to line-up file")
    check_parser.add_argument("acts", nargs="*", help="Acts to attend")
    check_parser.add_argument(
        "--keep-order",
        action="store_true",
        help="Check acts in the given order instead of sorting by session",
    )
    check_parser.add_argument(
        "--no-memoize",
        action="store_true",
        help="Disable caching of sub-searches (default: cache enabled)",
    )
    check_parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    check_parser.set_defaults(func=cmd_check)

    # Routes command
    routes_parser = subparsers.add_parser("routes", help="List shuttle services")
    routes_parser.add_argument("--timetable", required=True, help="Path to timetable file")
    routes_parser.add_argument("--output", help="Write timetable.json to this directory")
    routes_parser.set_defaults(func=cmd_routes)

    # Parse and execute
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
