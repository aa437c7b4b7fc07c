import logging
from abc import ABC, abstractmethod
from datetime import datetime, time
from typing import Callable, Sequence, TypeAlias

from ..exceptions import InvalidInputError
from ..models import Flight, Segment, TimeArrow

SegmentPredicate: TypeAlias = Callable[[Segment], bool]


class BaseFlightFilter(ABC):
    """Common helpers for concrete flight filters.

    The held collection may be None; that misuse is only reported when a filter is called.
    """
    def __init__(self, flights: Sequence[Flight] | None):
        self.flights: tuple[Flight, ...] | None = tuple(flights) if flights is not None else None

    # ---------------- validation helpers -----------------
    def _require_flights(self) -> tuple[Flight, ...]:
        if self.flights is None:
            raise InvalidInputError("Input flight collection is None, expected a sequence of flights.")
        return self.flights

    # ---------------- filtering helpers -----------------
    @staticmethod
    def _filter_segments(flights: Sequence[Flight], predicate: SegmentPredicate) -> list[Flight]:
        """Rebuild every flight from its legs matching predicate; drop flights left with none."""
        filtered = []
        for flight in flights:
            segments = [s for s in flight.segments if predicate(s)]
            if segments:
                filtered.append(Flight(segments))
        logging.debug("Segment filter kept %d of %d flights", len(filtered), len(flights))
        return filtered

    # ---------------- public API -----------------
    @abstractmethod
    def filter_for(self, direction: TimeArrow, reference_time: datetime) -> list[Flight]:  # pragma: no cover
        raise NotImplementedError

    @abstractmethod
    def filter_incorrect_dates(self) -> list[Flight]:  # pragma: no cover
        raise NotImplementedError

    @abstractmethod
    def filter_summary_time_more_than(self, threshold: time) -> tuple[Flight, ...]:  # pragma: no cover
        raise NotImplementedError
