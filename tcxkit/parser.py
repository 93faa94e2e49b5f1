"""Turn a TCX document into activity records.

An activity record is a plain dict::

    {
        "type": SportType.RUN,          # absent for unsupported sports
        "start_time": datetime(...),
        "time": 1800.0,
        "distance": 5000.0,
        ...                              # other combined lap fields
        "laps": [{...}, {...}],          # per-lap records, document order
    }

Fields that cannot be derived from the document are omitted, never set to
``None``.
"""

from __future__ import annotations

import logging
from typing import Any
from xml.etree.ElementTree import Element, ElementTree

from .fields import (
    get_avg_cadence,
    get_avg_hr,
    get_avg_speed,
    get_distance,
    get_max_cadence,
    get_max_hr,
    get_max_speed,
    get_start_time,
    get_time,
)
from .laps import combine_laps
from .moving_time import DEFAULT_MOVING_SPEED_THRESHOLD, moving_time
from .retrieval import DEFAULT_HTTP_TIMEOUT, GZIP_MAGIC, load_tree, parse_bytes_to_tree
from .sport import classify_sport
from .tree import find_child, find_children, local_name

logger = logging.getLogger(__name__)

_LAP_FIELDS = {
    "start_time": get_start_time,
    "time": get_time,
    "distance": get_distance,
    "max_speed": get_max_speed,
    "avg_hr": get_avg_hr,
    "max_hr": get_max_hr,
    "avg_cadence": get_avg_cadence,
    "max_cadence": get_max_cadence,
}


def parse_lap(
    lap: Element,
    threshold: float = DEFAULT_MOVING_SPEED_THRESHOLD,
    strict: bool = True,
) -> dict[str, Any]:
    """Build the lap record for one ``Lap`` element."""
    values = {name: getter(lap) for name, getter in _LAP_FIELDS.items()}
    values["avg_speed"] = get_avg_speed(lap, strict=strict)
    values["moving_time"] = moving_time(lap, threshold=threshold)
    return {name: value for name, value in values.items() if value is not None}


def parse_activity(
    activity: Element,
    threshold: float = DEFAULT_MOVING_SPEED_THRESHOLD,
    strict: bool = True,
) -> dict[str, Any]:
    """Build the activity record for one ``Activity`` element."""
    laps = [parse_lap(lap, threshold=threshold, strict=strict) for lap in find_children("Lap", activity)]
    record: dict[str, Any] = {}
    sport_type = classify_sport(activity)
    if sport_type is not None:
        record["type"] = sport_type
    record.update(combine_laps(laps))
    record["laps"] = laps
    logger.debug("Parsed %s activity with %d laps", sport_type or "unknown", len(laps))
    return record


def _activities_node(root: Element) -> Element | None:
    # The root element is TrainingCenterDatabase itself
    if local_name(root.tag) != "TrainingCenterDatabase":
        root = find_child("TrainingCenterDatabase", root)
    return find_child("Activities", root)


def parse_tree(
    tree: Element | ElementTree,
    threshold: float = DEFAULT_MOVING_SPEED_THRESHOLD,
    strict: bool = True,
) -> list[dict[str, Any]]:
    """Return one activity record per ``Activity`` element, in document order."""
    root = tree.getroot() if isinstance(tree, ElementTree) else tree
    activities = find_children("Activity", _activities_node(root))
    return [parse_activity(activity, threshold=threshold, strict=strict) for activity in activities]


def parse_bytes(
    data: bytes,
    threshold: float = DEFAULT_MOVING_SPEED_THRESHOLD,
    strict: bool = True,
) -> list[dict[str, Any]]:
    """Parse an in-memory TCX document."""
    root = parse_bytes_to_tree(data, gzipped=data[:2] == GZIP_MAGIC)
    return parse_tree(root, threshold=threshold, strict=strict)


def parse(
    source: str,
    threshold: float = DEFAULT_MOVING_SPEED_THRESHOLD,
    strict: bool = True,
    timeout: float = DEFAULT_HTTP_TIMEOUT,
) -> list[dict[str, Any]]:
    """Parse the TCX document at a filesystem path or an http(s) URL."""
    return parse_tree(load_tree(source, timeout=timeout), threshold=threshold, strict=strict)
