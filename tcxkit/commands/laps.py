"""CLI command: laps — per-lap breakdown of every activity in a TCX document."""

import argparse
from zoneinfo import ZoneInfo

from tabulate import tabulate

from tcxkit.appconfig import load_config
from tcxkit.commands.summary import add_source_arguments, load_records
from tcxkit.report import LAP_HEADERS, lap_rows


def run(args=None):
    if args is None:
        args = []

    parser = argparse.ArgumentParser(description="Show the laps of each activity in a TCX file")
    add_source_arguments(parser)
    parsed_args = parser.parse_args(args)

    config = load_config()
    records = load_records(parsed_args, config)
    if not records:
        print("No activities found.")
        return

    home_tz = ZoneInfo(config.get("home_timezone", "UTC"))
    for index, record in enumerate(records, start=1):
        sport_type = record.get("type")
        print(f"\nActivity {index} ({sport_type if sport_type is not None else 'unknown'}):")
        rows = [[str(n), *row] for n, row in enumerate(lap_rows(record, home_tz), start=1)]
        print(tabulate(rows, headers=["Lap", *LAP_HEADERS], tablefmt="simple", disable_numparse=True))
