import json
from datetime import datetime

import pytest

from flightfilter.exceptions import FlightDataError
from flightfilter.loader import dump_flights, load_flights, parse_flights
from flightfilter.sample_data import create_flights


def test_load_flights_from_json(tmp_path):
    path = tmp_path / "flights.json"
    path.write_text(json.dumps([
        {"segments": [
            {"departure_date": "2024-01-01T10:00:00", "arrival_date": "2024-01-01T12:00:00"},
            {"departure_date": "2024-01-01T13:00:00", "arrival_date": "2024-01-01T15:00:00"},
        ]},
        {"segments": []},
    ]), encoding="utf-8")
    flights = load_flights(path)
    assert len(flights) == 2
    assert flights[0].segments[1].departure_date == datetime(2024, 1, 1, 13, 0)
    assert flights[1].segments == ()


def test_dump_then_load_keeps_flights(tmp_path):
    path = tmp_path / "flights.json"
    flights = create_flights(datetime(2024, 1, 1, 12, 0))
    dump_flights(flights, path)
    assert load_flights(path) == flights


def test_parse_flights_requires_list():
    with pytest.raises(FlightDataError):
        parse_flights({"segments": []})


def test_parse_flights_requires_segments_list():
    with pytest.raises(FlightDataError, match="#0"):
        parse_flights([{"legs": []}])


def test_parse_flights_missing_segment_field():
    with pytest.raises(FlightDataError):
        parse_flights([{"segments": [{"departure_date": "2024-01-01T10:00:00"}]}])


def test_parse_flights_bad_timestamp():
    with pytest.raises(FlightDataError):
        parse_flights([{"segments": [{"departure_date": "yesterday", "arrival_date": "2024-01-01T10:00:00"}]}])
