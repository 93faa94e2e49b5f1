import os
import xml.etree.ElementTree as ET

import pytest

TCX_NS = "http://www.garmin.com/xmlschemas/TrainingCenterDatabase/v2"
EXT_NS = "http://www.garmin.com/xmlschemas/ActivityExtension/v2"

SAMPLE_TCX = os.path.join(os.path.dirname(__file__), "samples", "sample.tcx")


def _wrap(body: str) -> str:
    return f'<TrainingCenterDatabase xmlns="{TCX_NS}" xmlns:ns3="{EXT_NS}">{body}</TrainingCenterDatabase>'


@pytest.fixture
def sample_path():
    return SAMPLE_TCX


@pytest.fixture
def tcx_root():
    """Build a TrainingCenterDatabase root from the XML inside it.

    The Garmin default namespace and the ``ns3`` activity extension prefix
    are declared, so snippets can use ``<ns3:LX>`` like real exports do.
    """

    def build(body: str) -> ET.Element:
        return ET.fromstring(_wrap(body))

    return build


@pytest.fixture
def make_lap():
    """Build a namespaced ``Lap`` element from its inner XML."""

    def build(inner: str = "", start_time: str | None = "2024-05-27T12:00:00Z") -> ET.Element:
        attrs = f' StartTime="{start_time}"' if start_time else ""
        root = ET.fromstring(_wrap(f"<Lap{attrs}>{inner}</Lap>"))
        return root[0]

    return build


@pytest.fixture
def trackpoints():
    """Build ``<Track>`` XML from (timestamp, speed) pairs; a speed of None omits the sample."""

    def build(points) -> str:
        parts = []
        for time, speed in points:
            speed_xml = (
                f"<Extensions><ns3:TPX><ns3:Speed>{speed}</ns3:Speed></ns3:TPX></Extensions>"
                if speed is not None
                else ""
            )
            parts.append(f"<Trackpoint><Time>{time}</Time>{speed_xml}</Trackpoint>")
        return f"<Track>{''.join(parts)}</Track>"

    return build
