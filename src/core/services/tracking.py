"""Resolves the single trip a customer is currently travelling on."""

from abc import ABC, abstractmethod
from datetime import datetime

from core.errors import ConsistencyViolation, InvalidInputError
from core.models import BookingStatus, Trip
from core.registry import Trips


class TrackTrips(ABC):
    @abstractmethod
    def current_trip_for(self, customer_id: str, at: datetime) -> Trip | None: ...


class Tracking(TrackTrips):
    def __init__(self, trips: Trips):
        self.trips = trips

    def current_trip_for(self, customer_id: str, at: datetime) -> Trip | None:
        """The booked trip active for ``customer_id`` at ``at``, or None.

        Raises ConsistencyViolation when more than one booked trip is active,
        since a customer can only be on one trip at a time.
        """
        if not customer_id:
            raise InvalidInputError("customer_id must not be empty")
        if at.tzinfo is None or at.utcoffset() is None:
            raise InvalidInputError("at must be timezone-aware")

        candidates = [
            trip
            for trip in self.trips.current_trips_for(customer_id, at)
            if trip.booking_status == BookingStatus.BOOKED
        ]
        if len(candidates) == 1:
            return candidates[0]
        if not candidates:
            return None

        raise ConsistencyViolation(customer_id, at, candidates)
