from datetime import datetime, time, timedelta

import pytest

from flightfilter.models import TimeArrow
from flightfilter.processing.flight_filter import FlightFilter, ground_time
from flightfilter.sample_data import create_flight, create_flights

NOW = datetime(2024, 1, 1, 12, 0)


def test_create_flight_pairs_dates():
    f = create_flight(NOW, NOW + timedelta(hours=1), NOW + timedelta(hours=2), NOW + timedelta(hours=3))
    assert len(f.segments) == 2
    assert f.segments[1].departure_date == NOW + timedelta(hours=2)


def test_create_flight_rejects_odd_number_of_dates():
    with pytest.raises(ValueError):
        create_flight(NOW, NOW + timedelta(hours=1), NOW + timedelta(hours=2))


def test_create_flights_builds_six_itineraries():
    flights = create_flights(NOW)
    assert len(flights) == 6
    assert [len(f.segments) for f in flights] == [1, 2, 1, 1, 2, 3]
    assert flights[0].segments[0].departure_date == NOW + timedelta(days=3)


def test_sample_ground_times():
    flights = create_flights(NOW)
    assert ground_time(flights[1]) == timedelta(hours=1)
    assert ground_time(flights[4]) == timedelta(hours=3)
    assert ground_time(flights[5]) == timedelta(hours=3)


def test_sample_flights_through_all_filters():
    flights = create_flights(NOW)
    flight_filter = FlightFilter(flights)
    departed = flight_filter.filter_for(TimeArrow.EARLIER_DEP_DATE, NOW)
    assert flights[2] not in departed
    assert len(departed) == 5
    valid = flight_filter.filter_incorrect_dates()
    assert flights[3] not in valid
    assert len(valid) == 5
    short_ground = flight_filter.filter_summary_time_more_than(time(2, 0))
    assert short_ground == (flights[0], flights[1], flights[2], flights[3])
