"""Flatten activity and lap records into display rows for the CLI."""

from __future__ import annotations

import datetime
from enum import Enum
from typing import Any
from zoneinfo import ZoneInfo

SUMMARY_HEADERS = [
    "Type",
    "Start",
    "Distance (m)",
    "Time",
    "Moving",
    "Avg speed",
    "Max speed",
    "Avg HR",
    "Max HR",
    "Avg cad",
    "Max cad",
    "Laps",
]

LAP_HEADERS = SUMMARY_HEADERS[1:-1]


def seconds_to_hms(seconds: float | None) -> str:
    if seconds is None:
        return ""
    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = int(seconds % 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def _local_time(start_time: datetime.datetime | None, home_tz: ZoneInfo) -> str:
    if start_time is None:
        return ""
    return start_time.astimezone(home_tz).strftime("%Y-%m-%d %H:%M")


def _fmt(value: Any, spec: str = "") -> str:
    if value is None:
        return ""
    return format(value, spec)


def _metric_columns(record: dict[str, Any], home_tz: ZoneInfo) -> list[str]:
    return [
        _local_time(record.get("start_time"), home_tz),
        _fmt(record.get("distance"), ".1f"),
        seconds_to_hms(record.get("time")),
        seconds_to_hms(record.get("moving_time")),
        _fmt(record.get("avg_speed"), ".2f"),
        _fmt(record.get("max_speed"), ".2f"),
        _fmt(record.get("avg_hr")),
        _fmt(record.get("max_hr")),
        _fmt(record.get("avg_cadence")),
        _fmt(record.get("max_cadence")),
    ]


def summarize(record: dict[str, Any], home_tz: ZoneInfo) -> list[str]:
    """Return one display row for an activity record (see ``SUMMARY_HEADERS``)."""
    sport_type = record.get("type")
    return [
        str(sport_type) if sport_type is not None else "unknown",
        *_metric_columns(record, home_tz),
        str(len(record.get("laps", []))),
    ]


def lap_rows(record: dict[str, Any], home_tz: ZoneInfo) -> list[list[str]]:
    """Return one display row per lap of an activity record (see ``LAP_HEADERS``)."""
    return [_metric_columns(lap, home_tz) for lap in record.get("laps", [])]


def to_jsonable(records: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Convert records to JSON-friendly dicts (timestamps become ISO-8601 strings)."""

    def convert(value):
        if isinstance(value, datetime.datetime):
            return value.isoformat()
        if isinstance(value, list):
            return [convert(v) for v in value]
        if isinstance(value, dict):
            return {k: convert(v) for k, v in value.items()}
        if isinstance(value, Enum):
            return value.value
        return value

    return [convert(record) for record in records]
