import datetime
import json
from zoneinfo import ZoneInfo

from tcxkit.report import LAP_HEADERS, SUMMARY_HEADERS, lap_rows, seconds_to_hms, summarize, to_jsonable
from tcxkit.sport import SportType

START = datetime.datetime(2024, 5, 27, 12, 0, tzinfo=datetime.UTC)


def test_seconds_to_hms():
    assert seconds_to_hms(3661) == "01:01:01"
    assert seconds_to_hms(59.9) == "00:00:59"
    assert seconds_to_hms(None) == ""


def test_summarize_full_record():
    record = {
        "type": SportType.RUN,
        "start_time": START,
        "time": 600.0,
        "distance": 2000.0,
        "moving_time": 590.0,
        "avg_speed": 3.3333,
        "max_speed": 4.5,
        "avg_hr": 145,
        "max_hr": 170,
        "avg_cadence": 87,
        "max_cadence": 97,
        "laps": [{}, {}],
    }

    row = summarize(record, ZoneInfo("US/Eastern"))

    assert len(row) == len(SUMMARY_HEADERS)
    assert row == [
        "run",
        "2024-05-27 08:00",
        "2000.0",
        "00:10:00",
        "00:09:50",
        "3.33",
        "4.50",
        "145",
        "170",
        "87",
        "97",
        "2",
    ]


def test_summarize_sparse_record():
    row = summarize({"laps": []}, ZoneInfo("UTC"))
    assert row[0] == "unknown"
    assert row[1:-1] == [""] * (len(SUMMARY_HEADERS) - 2)
    assert row[-1] == "0"


def test_lap_rows():
    record = {"laps": [{"start_time": START, "distance": 1000.0}, {"time": 300.0}]}

    rows = lap_rows(record, ZoneInfo("UTC"))

    assert len(rows) == 2
    assert all(len(row) == len(LAP_HEADERS) for row in rows)
    assert rows[0][:2] == ["2024-05-27 12:00", "1000.0"]
    assert rows[1][2] == "00:05:00"


def test_to_jsonable():
    records = [{"type": SportType.INDOOR_BIKE_RIDE, "start_time": START, "laps": [{"start_time": START}]}]

    converted = to_jsonable(records)

    assert converted == [
        {
            "type": "indoor_bike_ride",
            "start_time": "2024-05-27T12:00:00+00:00",
            "laps": [{"start_time": "2024-05-27T12:00:00+00:00"}],
        }
    ]
    json.dumps(converted)
