# pylint: disable=import-outside-toplevel
"""Main entry point for the tcxkit CLI.

This module provides the command-line interface for tcxkit, allowing users to
summarize the activities and laps recorded in Garmin TCX files and to
configure their environment.
"""

import argparse
import sys
import xml.etree.ElementTree as ET

import requests
from dotenv import load_dotenv

from tcxkit.exceptions import TcxError

load_dotenv()

USAGE = """
tcxkit - Extract workout summaries from Garmin TCX files.

Usage:
    python -m tcxkit <command>

Commands:
    summary SOURCE   Show one line per activity (distance, time, moving time,
                     speed, heart rate, cadence). Add --json for raw records.
    laps SOURCE      Show every lap of every activity
    configure        Configure tcxkit for your environment
    help             Show this help and usage documentation

SOURCE is a path to a .tcx / .tcx.gz file or an http(s) URL.

Options for summary and laps:
    --lenient        Don't fail on laps missing the average speed extension
    --threshold X    Moving-time speed threshold in m/s (default: 1.0)

See README.md for more details.
"""


def main(argv=None):
    """Main function for the tcxkit CLI."""
    if argv is None:
        argv = sys.argv[1:]

    parser = argparse.ArgumentParser(description="tcxkit CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    from tcxkit.commands.summary import add_source_arguments

    summary_parser = subparsers.add_parser("summary", help="Summarize the activities in a TCX file")
    add_source_arguments(summary_parser)
    summary_parser.add_argument("--json", action="store_true", help="Print the activity records as JSON")

    laps_parser = subparsers.add_parser("laps", help="Show the laps of each activity in a TCX file")
    add_source_arguments(laps_parser)

    subparsers.add_parser("configure", help="Configure tcxkit for your environment")
    subparsers.add_parser("help", help="Show usage and documentation")

    args = parser.parse_args(argv)

    try:
        if args.command == "summary":
            from tcxkit.commands.summary import run

            run(argv[1:])
        elif args.command == "laps":
            from tcxkit.commands.laps import run

            run(argv[1:])
        elif args.command == "configure":
            from tcxkit.commands.configure import run

            run()
        elif args.command == "help":
            print(USAGE)
        else:
            parser.print_help()
    except (TcxError, OSError, requests.RequestException, ET.ParseError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
