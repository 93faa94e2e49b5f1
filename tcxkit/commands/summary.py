"""CLI command: summary — one line per activity in a TCX document."""

import argparse
import json
import logging
from typing import Any
from zoneinfo import ZoneInfo

from tabulate import tabulate

from tcxkit.appconfig import load_config
from tcxkit.parser import parse
from tcxkit.report import SUMMARY_HEADERS, summarize, to_jsonable


def add_source_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("source", help="Path or http(s) URL of a .tcx or .tcx.gz file")
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Skip laps' average speed instead of failing when the LX extension is missing",
    )
    parser.add_argument(
        "--threshold",
        type=float,
        help="Speed in m/s above which a trackpoint counts as moving (default from config)",
    )


def load_records(parsed_args: argparse.Namespace, config: dict[str, Any]) -> list[dict[str, Any]]:
    """Parse the source named on the command line using config defaults."""
    if config.get("debug"):
        logging.basicConfig(level=logging.DEBUG)

    threshold = parsed_args.threshold
    if threshold is None:
        threshold = float(config["moving_speed_threshold"])
    strict = bool(config["strict_avg_speed"]) and not parsed_args.lenient
    return parse(
        parsed_args.source,
        threshold=threshold,
        strict=strict,
        timeout=float(config["http_timeout"]),
    )


def run(args=None):
    if args is None:
        args = []

    parser = argparse.ArgumentParser(description="Summarize the activities in a TCX file")
    add_source_arguments(parser)
    parser.add_argument("--json", action="store_true", help="Print the activity records as JSON")
    parsed_args = parser.parse_args(args)

    config = load_config()
    records = load_records(parsed_args, config)

    if parsed_args.json:
        print(json.dumps(to_jsonable(records), indent=2))
        return

    if not records:
        print("No activities found.")
        return

    home_tz = ZoneInfo(config.get("home_timezone", "UTC"))
    rows = [summarize(record, home_tz) for record in records]
    print(tabulate(rows, headers=SUMMARY_HEADERS, tablefmt="simple", disable_numparse=True))
