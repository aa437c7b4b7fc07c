import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, time, timedelta
from functools import partial
from itertools import pairwise
from typing import Callable, Sequence

from tqdm import tqdm

from .base import BaseFlightFilter
from ..config import settings
from ..models import Flight, Segment, TimeArrow

_TIME_ARROW_PREDICATES: dict[TimeArrow, Callable[[Segment, datetime], bool]] = {
    TimeArrow.EARLIER_DEP_DATE: lambda s, t: s.departure_date > t,
    TimeArrow.LATER_DEP_DATE: lambda s, t: s.departure_date < t,
    TimeArrow.EARLIER_ARR_DATE: lambda s, t: s.arrival_date > t,
    TimeArrow.LATER_ARR_DATE: lambda s, t: s.arrival_date < t,
}


def ground_time(flight: Flight) -> timedelta:
    """Total time spent between legs: |next departure - previous arrival| over adjacent legs.

    Legs are taken in list order, no chronological sorting. A flight with fewer than two legs has none.
    """
    return sum(
        (abs(nxt.departure_date - cur.arrival_date) for cur, nxt in pairwise(flight.segments)),
        timedelta(),
    )


def ground_time_seconds(flight: Flight) -> int:
    """Ground time in whole seconds, each connection truncated to full seconds before summing."""
    return sum(
        int(abs(nxt.departure_date - cur.arrival_date).total_seconds())
        for cur, nxt in pairwise(flight.segments)
    )


def _seconds_of_day(value: time) -> int:
    return value.hour * 3600 + value.minute * 60 + value.second


class FlightFilter(BaseFlightFilter):
    """Filters a fixed snapshot of flights by time arrow, leg consistency and ground time.

    Every call builds new Flight objects, the held collection is never touched, so one instance
    can be shared between callers.
    """

    def __init__(self, flights: Sequence[Flight] | None, workers: int | None = None, show_progress: bool = False):
        super().__init__(flights)
        self.workers = workers if workers is not None else settings.filter_workers
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")
        self.show_progress = show_progress

    def filter_for(self, direction: TimeArrow, reference_time: datetime) -> list[Flight]:
        """Keep legs on the side of reference_time selected by direction (strict comparison).

        Note the inverted naming: EARLIER_DEP_DATE keeps legs departing after reference_time.
        """
        flights = self._require_flights()
        if not flights:
            return []
        if (compare := _TIME_ARROW_PREDICATES.get(direction)) is None:
            raise ValueError(f"Unsupported time arrow: {direction!r}")
        logging.debug("Filtering %d flights for %s relative to %s", len(flights), direction.name, reference_time)
        return self._filter_segments(flights, lambda s: compare(s, reference_time))

    def filter_incorrect_dates(self) -> list[Flight]:
        """Drop legs arriving at or before their own departure."""
        flights = self._require_flights()
        if not flights:
            return []
        return self._filter_segments(flights, lambda s: s.arrival_date > s.departure_date)

    def filter_summary_time_more_than(self, threshold: time) -> tuple[Flight, ...]:
        """Keep whole flights whose ground time is strictly *under* threshold (despite the name).

        threshold is a time of day read as seconds since midnight. Flights are checked on a thread
        pool; results come back in input order.
        """
        flights = self._require_flights()
        if not flights:
            return ()
        check = partial(self._is_under, limit_seconds=_seconds_of_day(threshold))
        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            keep = list(tqdm(
                executor.map(check, flights),
                total=len(flights),
                desc='Checking ground time',
                leave=False,
                disable=not self.show_progress,
            ))
        result = tuple(flight for flight, kept in zip(flights, keep) if kept)
        logging.debug("Ground time below %s kept %d of %d flights", threshold, len(result), len(flights))
        return result

    @staticmethod
    def _is_under(flight: Flight, limit_seconds: int) -> bool:
        return ground_time_seconds(flight) < limit_seconds
