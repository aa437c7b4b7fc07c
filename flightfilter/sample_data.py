"""Built-in demo itineraries, anchored a few days ahead of "now"."""
from datetime import datetime, timedelta

from .models import Flight, Segment


def create_flight(*dates: datetime) -> Flight:
    """Build a flight from departure/arrival pairs: dep1, arr1, dep2, arr2, ..."""
    if len(dates) % 2 != 0:
        raise ValueError(f"Expected an even number of dates (departure/arrival pairs), got {len(dates)}")
    return Flight([Segment(dep, arr) for dep, arr in zip(dates[::2], dates[1::2])])


def create_flights(now: datetime | None = None) -> list[Flight]:
    if now is None:
        now = datetime.now()
    start = now + timedelta(days=3)
    hours = lambda n: start + timedelta(hours=n)  # noqa: E731
    return [
        # normal two hour flight
        create_flight(start, hours(2)),
        # normal multi segment flight
        create_flight(start, hours(2), hours(3), hours(5)),
        # departing in the past
        create_flight(start - timedelta(days=6), start),
        # arrives before it departs
        create_flight(start, hours(-6)),
        # more than two hours on the ground
        create_flight(start, hours(2), hours(5), hours(6)),
        # another flight with more than two hours on the ground
        create_flight(start, hours(2), hours(3), hours(4), hours(6), hours(7)),
    ]
