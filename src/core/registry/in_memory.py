"""In-memory trip registry safe for concurrent readers and writers."""

import logging
import threading

from core.models import Trip
from core.registry.interface import Trips

logger = logging.getLogger(__name__)


class InMemoryTrips(Trips):
    """Keeps one immutable snapshot per customer.

    ``add_trip`` replaces a customer's snapshot with a new frozenset while
    holding that customer's lock, so concurrent adds for the same customer
    never lose an update and adds for different customers never wait on
    each other. Readers take no lock: they see either the old snapshot or
    the new one.
    """

    def __init__(self) -> None:
        self._trips: dict[str, frozenset[Trip]] = {}
        self._locks: dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def _lock_for(self, customer_id: str) -> threading.Lock:
        lock = self._locks.get(customer_id)
        if lock is None:
            with self._locks_guard:
                lock = self._locks.setdefault(customer_id, threading.Lock())
        return lock

    def add_trip(self, trip: Trip) -> None:
        with self._lock_for(trip.customer_id):
            existing = self._trips.get(trip.customer_id, frozenset())
            if trip in existing:
                return
            self._trips[trip.customer_id] = existing | {trip}
        logger.debug("Added trip for %s (%d known)", trip.customer_id, len(existing) + 1)

    def trips_for(self, customer_id: str) -> frozenset[Trip]:
        return self._trips.get(customer_id, frozenset())
