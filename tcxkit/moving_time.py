"""Moving time derived from trackpoint speed samples."""

from __future__ import annotations

from xml.etree.ElementTree import Element

from .fields import parse_float, parse_timestamp
from .tree import find_child, find_child_path, find_child_value, find_children

# Speed (m/s) a sample must exceed for the interval leading up to it to count
DEFAULT_MOVING_SPEED_THRESHOLD = 1.0


def moving_time(lap: Element, threshold: float = DEFAULT_MOVING_SPEED_THRESHOLD) -> float:
    """Sum the time between consecutive trackpoints where the athlete was moving.

    An interval counts when the trackpoint that ends it reports a speed
    strictly above ``threshold``. The first trackpoint only starts the chain.
    A trackpoint without a speed sample contributes nothing but still
    becomes the start of the next interval.

    Returns:
        Moving seconds, ``0.0`` if no interval qualifies or the lap has no
        ``Track`` element.
    """
    track = find_child("Track", lap)

    previous = None
    total = 0.0
    for trackpoint in find_children("Trackpoint", track):
        current = parse_timestamp(find_child_value("Time", trackpoint))
        speed = parse_float(find_child_path(trackpoint, "Extensions", "TPX", "Speed"))
        if previous is not None and current is not None and speed is not None and speed > threshold:
            total += (current - previous).total_seconds()
        previous = current
    return total
