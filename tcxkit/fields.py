"""Typed field extractors for TCX lap elements.

Each ``get_*`` function takes a ``Lap`` element and returns a typed value, or
``None`` when the source element or attribute is missing. Absence is never an
error, with one exception: ``get_avg_speed`` treats a missing
``Extensions/LX/AvgSpeed`` as a hard failure unless called with
``strict=False``.
"""

from __future__ import annotations

import datetime
import re
from xml.etree.ElementTree import Element

from dateutil import parser as dt_parser

from .exceptions import MalformedValueError, MissingFieldError
from .tree import find_child, find_child_path, local_name, text_content

AVG_SPEED_PATH = ("Extensions", "LX", "AvgSpeed")

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_DECIMAL = re.compile(r"\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*")


def parse_float(node: Element | None) -> float | None:
    """Parse the text of ``node`` as a float.

    A missing node gives ``None``; a present node with unparseable text
    raises ``MalformedValueError``.
    """
    if node is None:
        return None
    text = text_content(node)
    # float() also takes "nan", "inf" and "1_000"
    if not _DECIMAL.fullmatch(text):
        raise MalformedValueError(local_name(node.tag), text)
    return float(text)


def parse_int(node: Element | None) -> int | None:
    """Parse the leading digits of the text of ``node``, ignoring trailing junk.

    ``"85"``, ``" 85\\n"`` and ``"85bpm"`` all give 85. Returns ``None`` when
    the node is missing or its text does not start with a number.
    """
    text = text_content(node)
    if not isinstance(text, str):
        return None
    match = _LEADING_INT.match(text)
    if not match:
        return None
    return int(match.group(1))


def parse_timestamp(value: str | None) -> datetime.datetime | None:
    """Parse an ISO-8601 timestamp such as ``2024-05-27T12:00:00Z``.

    Timestamps without a UTC offset are taken to be UTC.
    """
    if value is None:
        return None
    parsed = dt_parser.isoparse(value.strip())
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=datetime.UTC)
    return parsed


def get_start_time(lap: Element) -> datetime.datetime | None:
    return parse_timestamp(lap.get("StartTime"))


def get_time(lap: Element) -> float | None:
    return parse_float(find_child("TotalTimeSeconds", lap))


def get_distance(lap: Element) -> float | None:
    return parse_float(find_child("DistanceMeters", lap))


def get_max_speed(lap: Element) -> float | None:
    return parse_float(find_child("MaximumSpeed", lap))


def get_avg_speed(lap: Element, strict: bool = True) -> float | None:
    """Return the lap's average speed from the ``LX`` extension.

    Raises:
        MissingFieldError: if the extension path is missing and ``strict`` is set.
    """
    node = find_child_path(lap, *AVG_SPEED_PATH)
    if node is None:
        if strict:
            raise MissingFieldError(AVG_SPEED_PATH)
        return None
    return parse_float(node)


def get_avg_hr(lap: Element) -> int | None:
    return parse_int(find_child_path(lap, "AverageHeartRateBpm", "Value"))


def get_max_hr(lap: Element) -> int | None:
    return parse_int(find_child_path(lap, "MaximumHeartRateBpm", "Value"))


def get_avg_cadence(lap: Element) -> int | None:
    """Running cadence from the ``LX`` extension, else the lap's bike ``Cadence``."""
    node = find_child_path(lap, "Extensions", "LX", "AvgRunCadence")
    if node is None:
        node = find_child("Cadence", lap)
    return parse_int(node)


def get_max_cadence(lap: Element) -> int | None:
    node = find_child_path(lap, "Extensions", "LX", "MaxRunCadence")
    if node is None:
        node = find_child_path(lap, "Extensions", "LX", "MaxBikeCadence")
    return parse_int(node)
