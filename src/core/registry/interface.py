from abc import ABC, abstractmethod
from datetime import datetime
from functools import lru_cache

from core.models import Trip


class Trips(ABC):
    """Store of trips keyed by customer, answering time-scoped membership queries.

    Unknown customers and customers with no trips look the same: an empty set.
    """

    @abstractmethod
    def add_trip(self, trip: Trip) -> None: ...

    @abstractmethod
    def trips_for(self, customer_id: str) -> frozenset[Trip]: ...

    def current_trips_for(self, customer_id: str, at: datetime) -> frozenset[Trip]:
        """Trips whose planned interval contains ``at``, both ends inclusive.

        No booking status filtering happens here.
        """
        return frozenset(trip for trip in self.trips_for(customer_id) if trip.is_planned_to_be_active_at(at))


@lru_cache(maxsize=1)
def get_trips() -> Trips:
    """Process-wide trip registry, reused across warm Lambda invocations."""
    from core.config import get_config

    config = get_config()
    if config.trips_backend == "dynamodb":
        from core.clients import get_dynamo_client
        from core.registry.dynamo import DynamoTrips

        return DynamoTrips(get_dynamo_client(), config.trips_table)

    from core.registry.in_memory import InMemoryTrips

    return InMemoryTrips()
