"""Trip registries: the lookup contract and its in-memory store.

The DynamoDB store lives in core.registry.dynamo and is imported on demand.
"""

from core.registry.in_memory import InMemoryTrips
from core.registry.interface import Trips, get_trips

__all__ = ["InMemoryTrips", "Trips", "get_trips"]
