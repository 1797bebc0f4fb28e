from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from core.models import BookingStatus, Trip

UTC = timezone.utc
KST = timezone(timedelta(hours=9))

VALID_TRIP = dict(
    customer_id="C1",
    planned_start=datetime(2026, 5, 1, 10, 0, tzinfo=UTC),
    planned_end=datetime(2026, 5, 1, 12, 0, tzinfo=UTC),
    booking_status=BookingStatus.BOOKED,
)


def test_trip_valid():
    trip = Trip(**VALID_TRIP)
    assert trip.model_dump()["customer_id"] == "C1"
    assert trip.booking_status is BookingStatus.BOOKED


def test_trip_accepts_status_string():
    trip = Trip(**{**VALID_TRIP, "booking_status": "CANCELLED"})
    assert trip.booking_status is BookingStatus.CANCELLED


def test_trip_empty_customer_id():
    with pytest.raises(ValidationError):
        Trip(**{**VALID_TRIP, "customer_id": ""})


def test_trip_naive_datetime_rejected():
    with pytest.raises(ValidationError):
        Trip(**{**VALID_TRIP, "planned_start": datetime(2026, 5, 1, 10, 0)})


def test_trip_start_after_end_rejected():
    with pytest.raises(ValidationError, match="planned_start must not be after planned_end"):
        Trip(**{**VALID_TRIP, "planned_start": VALID_TRIP["planned_end"] + timedelta(seconds=1)})


def test_trip_zero_length_interval_allowed():
    trip = Trip(**{**VALID_TRIP, "planned_end": VALID_TRIP["planned_start"]})
    assert trip.is_planned_to_be_active_at(VALID_TRIP["planned_start"])


def test_trip_unknown_status_rejected():
    with pytest.raises(ValidationError):
        Trip(**{**VALID_TRIP, "booking_status": "MAYBE"})


def test_trip_is_immutable():
    trip = Trip(**VALID_TRIP)
    with pytest.raises(ValidationError):
        trip.customer_id = "C2"  # type: ignore[misc]


def test_trips_compare_and_hash_by_value():
    assert Trip(**VALID_TRIP) == Trip(**VALID_TRIP)
    assert len({Trip(**VALID_TRIP), Trip(**VALID_TRIP)}) == 1


def test_same_instant_in_other_zone_is_equal():
    other_zone = Trip(
        **{
            **VALID_TRIP,
            "planned_start": VALID_TRIP["planned_start"].astimezone(KST),
            "planned_end": VALID_TRIP["planned_end"].astimezone(KST),
        }
    )
    assert other_zone == Trip(**VALID_TRIP)
    assert hash(other_zone) == hash(Trip(**VALID_TRIP))


@pytest.mark.parametrize(
    "at, expected",
    [
        (datetime(2026, 5, 1, 10, 0, tzinfo=UTC), True),
        (datetime(2026, 5, 1, 11, 0, tzinfo=UTC), True),
        (datetime(2026, 5, 1, 12, 0, tzinfo=UTC), True),
        (datetime(2026, 5, 1, 9, 59, 59, 999999, tzinfo=UTC), False),
        (datetime(2026, 5, 1, 12, 0, 0, 1, tzinfo=UTC), False),
        (datetime(2026, 5, 1, 19, 0, tzinfo=KST), True),
    ],
)
def test_is_planned_to_be_active_at_is_inclusive(at, expected):
    assert Trip(**VALID_TRIP).is_planned_to_be_active_at(at) is expected


def test_trip_json_round_trip():
    trip = Trip(**VALID_TRIP)
    assert Trip.model_validate_json(trip.model_dump_json()) == trip
