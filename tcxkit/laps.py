"""Combine per-lap records into a single activity-level record.

Every lap field has its own reduction rule:

* ``start_time`` comes from the first lap.
* ``time``, ``distance`` and ``moving_time`` are summed.
* ``max_speed``, ``max_hr`` and ``max_cadence`` take the maximum.
* ``avg_speed``, ``avg_hr`` and ``avg_cadence`` are averaged, weighted by
  each lap's ``time``; a lap without the value still adds its time to the
  total weight. Heart rate and cadence are rounded to whole numbers.

A reduction that comes out as exactly zero is treated as "no data" and the
field is left out of the result.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

SUM_FIELDS = ("time", "distance", "moving_time")
MAX_FIELDS = ("max_speed", "max_hr", "max_cadence")
WEIGHTED_FIELDS = ("avg_speed", "avg_hr", "avg_cadence")
ROUNDED_FIELDS = frozenset({"avg_hr", "avg_cadence"})


def _sum(laps: Sequence[dict[str, Any]], field: str):
    return sum(lap.get(field, 0) for lap in laps)


def _max(laps: Sequence[dict[str, Any]], field: str):
    return max((lap.get(field, 0) for lap in laps), default=0)


def _weighted_average(laps: Sequence[dict[str, Any]], field: str) -> float | None:
    weighted_sum = 0.0
    total_weight = 0.0
    for lap in laps:
        weight = lap.get("time", 0)
        weighted_sum += lap.get(field, 0) * weight
        total_weight += weight
    if weighted_sum == 0 or total_weight == 0:
        return None
    return weighted_sum / total_weight


def combine_laps(laps: Sequence[dict[str, Any]]) -> dict[str, Any]:
    """Reduce an ordered sequence of lap records to one combined record.

    Args:
        laps: Lap records in document order; may be empty.

    Returns:
        A new dict holding only the fields that could be computed.
    """
    combined: dict[str, Any] = {}

    if laps and "start_time" in laps[0]:
        combined["start_time"] = laps[0]["start_time"]

    for field in SUM_FIELDS:
        total = _sum(laps, field)
        if total != 0:
            combined[field] = total

    for field in MAX_FIELDS:
        peak = _max(laps, field)
        if peak != 0:
            combined[field] = peak

    for field in WEIGHTED_FIELDS:
        average = _weighted_average(laps, field)
        if average is None:
            continue
        combined[field] = round(average) if field in ROUNDED_FIELDS else average

    return combined
