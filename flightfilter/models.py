from dataclasses import dataclass
from datetime import datetime
from enum import Enum

_DATE_FORMAT = '%Y-%m-%dT%H:%M'


@dataclass(frozen=True, slots=True)
class Segment:
    """Single flight leg.

    arrival_date is expected to be after departure_date, but that is not checked here:
    inconsistent legs are exactly what FlightFilter.filter_incorrect_dates weeds out.
    """
    departure_date: datetime
    arrival_date: datetime

    def __str__(self) -> str:
        return f"[{self.departure_date.strftime(_DATE_FORMAT)}|{self.arrival_date.strftime(_DATE_FORMAT)}]"


@dataclass(frozen=True, slots=True)
class Flight:
    """Itinerary made of ordered legs (outbound first, then connections)."""
    segments: tuple[Segment, ...]

    def __post_init__(self) -> None:
        # always own a fresh tuple, never the caller's list
        object.__setattr__(self, 'segments', tuple(self.segments))

    def __str__(self) -> str:
        return ' '.join(str(s) for s in self.segments)


class TimeArrow(Enum):
    """Field + direction selector for FlightFilter.filter_for.

    Names are historical and read backwards: EARLIER_DEP_DATE keeps legs departing
    *after* the reference time (it drops what has already left), LATER_* keep legs before it.
    """
    EARLIER_DEP_DATE = 'earlier_dep_date'
    LATER_DEP_DATE = 'later_dep_date'
    EARLIER_ARR_DATE = 'earlier_arr_date'
    LATER_ARR_DATE = 'later_arr_date'

    @classmethod
    def parse(cls, name: str) -> 'TimeArrow':
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown time arrow '{name}', expected one of {[m.name for m in cls]}") from None
