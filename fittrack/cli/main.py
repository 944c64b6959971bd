"""Command line entrypoint for the fitness tracker."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from fittrack.core.logging_config import setup_logging
from fittrack.core.settings import AppSettings
from fittrack.ui.controller import TrackerController
from fittrack.workout.log import WorkoutLog

_DEFAULTS = AppSettings()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fitness tracker web app")
    parser.add_argument(
        "--host",
        default=_DEFAULTS.host,
        help="Host bind for the web UI",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=_DEFAULTS.port,
        help="Port for the web UI",
    )
    parser.add_argument(
        "--export-path",
        type=Path,
        default=_DEFAULTS.export_path,
        help="Text file written by 'Export Data'",
    )
    parser.add_argument(
        "--log-level",
        default=_DEFAULTS.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Console log level",
    )
    parser.add_argument(
        "--report",
        action="store_true",
        help="Smoke check: print the report for a fresh log seeded with the default workout and exit",
    )
    return parser


def settings_from_args(args: argparse.Namespace) -> AppSettings:
    return AppSettings(
        host=args.host,
        port=args.port,
        export_path=args.export_path,
        log_level=args.log_level,
    )


def run_report(settings: AppSettings) -> int:
    controller = TrackerController(
        WorkoutLog(),
        export_path=settings.export_path,
        default_workout=settings.default_workout,
    )
    controller.initialize()
    print(controller.statistics_text())
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = settings_from_args(args)
    setup_logging(settings.log_level)

    if args.report:
        return run_report(settings)

    from fittrack.ui.web_app import run_web_ui

    return run_web_ui(settings)


if __name__ == "__main__":
    raise SystemExit(main())
