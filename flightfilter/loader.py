"""Read and write flight collections as JSON.

Format: a list of {"segments": [{"departure_date": ISO-8601, "arrival_date": ISO-8601}, ...]}.
"""
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Iterable

import dacite

from .exceptions import FlightDataError
from .models import Flight, Segment

_DACITE_CONFIG = dacite.Config(type_hooks={datetime: datetime.fromisoformat})


def _parse_flight(raw: dict, index: int) -> Flight:
    if not isinstance(raw, dict) or not isinstance(raw.get('segments'), list):
        raise FlightDataError(f"Flight #{index} must be an object with a 'segments' list")
    try:
        segments = [dacite.from_dict(data_class=Segment, data=s, config=_DACITE_CONFIG) for s in raw['segments']]
    except (dacite.DaciteError, ValueError, TypeError) as e:
        raise FlightDataError(f"Flight #{index} has an invalid segment: {e}") from e
    return Flight(segments)


def parse_flights(data: list) -> list[Flight]:
    if not isinstance(data, list):
        raise FlightDataError(f"Expected a list of flights, got {type(data).__name__}")
    return [_parse_flight(raw, i) for i, raw in enumerate(data)]


def load_flights(path: Path) -> list[Flight]:
    with open(path, 'rt', encoding='utf-8') as f:
        flights = parse_flights(json.load(f))
    logging.info("Loaded %d flights from %s", len(flights), path)
    return flights


def dump_flights(flights: Iterable[Flight], path: Path) -> None:
    data = [
        {'segments': [
            {'departure_date': s.departure_date.isoformat(), 'arrival_date': s.arrival_date.isoformat()}
            for s in flight.segments
        ]}
        for flight in flights
    ]
    with open(path, 'wt', encoding='utf-8') as f:
        json.dump(data, f, indent=2)
