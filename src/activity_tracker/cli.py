"""Command-line reports for step records.

Usage:
    python -m activity_tracker.cli daysteps "1000,30m"
    python -m activity_tracker.cli training "3456,Бег,45m0s" --weight 75 --height 1.75
    python -m activity_tracker.cli training "3456,Бег,45m0s" --json
"""

from __future__ import annotations

import argparse
import logging
import sys

from activity_tracker.config import DEFAULT_HEIGHT_M, DEFAULT_WEIGHT_KG, LOG_LEVEL
from activity_tracker.exceptions import ActivityTrackerError
from activity_tracker.models.profile import PhysicalProfile
from activity_tracker.reports.daysteps import compute_day_metrics, day_action_info
from activity_tracker.reports.training import compute_training_metrics, training_info
from activity_tracker.serialization import to_summary_json_string

logger = logging.getLogger(__name__)


def _run_daysteps(args: argparse.Namespace) -> int:
    if not args.json:
        sys.stdout.write(day_action_info(args.record, args.weight, args.height))
        return 0

    try:
        record, metrics = compute_day_metrics(
            args.record, PhysicalProfile(args.weight, args.height)
        )
    except ActivityTrackerError as exc:
        logger.warning("Skipping day record %r: %s", args.record, exc)
        return 0
    print(to_summary_json_string(record, metrics))
    return 0


def _run_training(args: argparse.Namespace) -> int:
    try:
        if args.json:
            record, metrics = compute_training_metrics(
                args.record, PhysicalProfile(args.weight, args.height)
            )
            output = to_summary_json_string(record, metrics) + "\n"
        else:
            output = training_info(args.record, args.weight, args.height)
    except ActivityTrackerError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="activity-tracker",
        description="Distance and calorie reports from step records",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    daysteps = subparsers.add_parser(
        "daysteps", help='Daily steps report for "<steps>,<duration>"'
    )
    daysteps.set_defaults(handler=_run_daysteps)

    training = subparsers.add_parser(
        "training", help='Training report for "<steps>,<activity>,<duration>"'
    )
    training.set_defaults(handler=_run_training)

    for sub in (daysteps, training):
        sub.add_argument("record", help="Comma-separated activity record")
        sub.add_argument(
            "--weight", type=float, default=DEFAULT_WEIGHT_KG, help="Weight in kg"
        )
        sub.add_argument(
            "--height", type=float, default=DEFAULT_HEIGHT_M, help="Height in metres"
        )
        sub.add_argument(
            "--json", action="store_true", help="Print metrics as JSON"
        )
    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    args = build_parser().parse_args(argv)
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
