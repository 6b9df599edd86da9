from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict, replace
from typing import Any, Sequence

from .application import DashboardApplication
from .config import get_installation_file, get_log_level
from .errors import InvalidConfiguration
from .reporting import format_dashboard_summary, projection_frame, season_comparison_frame
from .result_builder import ResultBuilder
from .simulation.aggregator import project_for_system
from .simulation.profiles import DayType, Season


def build_argument_parser() -> argparse.ArgumentParser:
    """
    Build the CLI argument parser used by entry points.

    Returns:
        Configured argparse.ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(description="Zero-export PV dashboard simulator")
    parser.add_argument(
        "--installation-file",
        type=str,
        default=None,
        help="Path to a JSON file describing the installation",
    )
    sub = parser.add_subparsers(dest="command")

    dashboard = sub.add_parser("dashboard", help="Simulate one representative day")
    dashboard.add_argument(
        "--season",
        choices=[s.value for s in Season],
        default=Season.SUMMER.value,
    )
    dashboard.add_argument(
        "--day-type",
        choices=[d.value for d in DayType],
        default=DayType.WEEKDAY.value,
        dest="day_type",
    )
    dashboard.add_argument(
        "--no-ppa",
        action="store_true",
        help="Skip the long-term PPA projection",
    )
    dashboard.add_argument(
        "--save",
        action="store_true",
        help="Save charts and CSV files in the results folder",
    )
    dashboard.add_argument("--json", action="store_true", help="Print the full summary as JSON")

    projection = sub.add_parser("projection", help="Print the PPA vs. grid projection")
    projection.add_argument("--years", type=int, default=None, help="Projection horizon in years")
    projection.add_argument("--json", action="store_true", help="Print rows as JSON")

    compare = sub.add_parser("compare", help="Compare summer and winter days")
    compare.add_argument(
        "--day-type",
        choices=[d.value for d in DayType],
        default=DayType.WEEKDAY.value,
        dest="day_type",
    )

    return parser


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, default=str, ensure_ascii=False))


def _run(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    installation_file = args.installation_file or get_installation_file()
    app = DashboardApplication.from_installation(installation_file)

    if args.command == "dashboard":
        if args.save:
            app.save_outputs = True
            app.result_builder = ResultBuilder()
        summary = app.run_dashboard(args.season, args.day_type, show_ppa=not args.no_ppa)
        if args.json:
            _print_json(summary)
        else:
            print(format_dashboard_summary(summary))
            if summary["output_dir"]:
                print(f"\nOutputs saved in: {summary['output_dir']}")
        return

    if args.command == "projection":
        system = app.system
        if args.years is not None:
            system = replace(system, projection_years=args.years)
        rows = project_for_system(system)
        if args.json:
            _print_json([asdict(row) for row in rows])
        else:
            print(projection_frame(rows).to_string(index=False))
        return

    if args.command == "compare":
        print(season_comparison_frame(args.day_type, app.system).to_string())
        return

    parser.error(f"Unknown command: {args.command}")


def main(argv: Sequence[str] | None = None) -> None:
    """
    CLI entry point for the dashboard simulator.

    Args:
        argv: Optional sequence of CLI args (defaults to sys.argv).
    """
    parser = build_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        _run(args, parser)
    except InvalidConfiguration as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc


if __name__ == "__main__":
    main()
