"""Sport classification for TCX activities."""

from __future__ import annotations

from enum import Enum
from xml.etree.ElementTree import Element

from .tree import has_descendant


class SportType(str, Enum):
    RUN = "run"
    BIKE_RIDE = "bike_ride"
    INDOOR_BIKE_RIDE = "indoor_bike_ride"

    def __str__(self) -> str:
        return self.value


def classify_sport(activity: Element) -> SportType | None:
    """Map the ``Sport`` attribute of an ``Activity`` element to a SportType.

    Rides without a single ``Position`` sample anywhere in the activity are
    trainer/indoor rides. Sports other than Running and Biking give ``None``.
    """
    sport = activity.get("Sport")
    if sport == "Running":
        return SportType.RUN
    if sport == "Biking":
        if not has_descendant("Position", activity):
            return SportType.INDOOR_BIKE_RIDE
        return SportType.BIKE_RIDE
    return None
