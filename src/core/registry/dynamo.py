"""DynamoDB-backed trip registry.

Table layout: ``customerId`` (HASH) and ``tripKey`` (RANGE). The range key is
derived from the trip's value, so storing an equal trip twice overwrites the
same item instead of adding a duplicate.
"""

import logging
from datetime import datetime, timezone
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from core.errors import TripStorageError
from core.models import BookingStatus, Trip
from core.registry.interface import Trips

logger = logging.getLogger(__name__)


def trip_key(trip: Trip) -> str:
    start = trip.planned_start.astimezone(timezone.utc).isoformat()
    end = trip.planned_end.astimezone(timezone.utc).isoformat()
    return f"{start}#{end}#{trip.booking_status.value}"


def _to_item(trip: Trip) -> dict[str, dict[str, str]]:
    return {
        "customerId": {"S": trip.customer_id},
        "tripKey": {"S": trip_key(trip)},
        "plannedStart": {"S": trip.planned_start.astimezone(timezone.utc).isoformat()},
        "plannedEnd": {"S": trip.planned_end.astimezone(timezone.utc).isoformat()},
        "bookingStatus": {"S": trip.booking_status.value},
    }


def _from_item(item: dict[str, Any]) -> Trip:
    return Trip(
        customer_id=item["customerId"]["S"],
        planned_start=datetime.fromisoformat(item["plannedStart"]["S"]),
        planned_end=datetime.fromisoformat(item["plannedEnd"]["S"]),
        booking_status=BookingStatus(item["bookingStatus"]["S"]),
    )


class DynamoTrips(Trips):
    def __init__(self, dynamo_client: Any, table_name: str):
        self.dynamo_client = dynamo_client
        self.table_name = table_name

    def add_trip(self, trip: Trip) -> None:
        try:
            self.dynamo_client.put_item(TableName=self.table_name, Item=_to_item(trip))
        except (BotoCoreError, ClientError) as e:
            logger.error("Failed to store trip for %s: %s", trip.customer_id, e)
            raise TripStorageError(f"put_item on {self.table_name} failed") from e
        logger.debug("Stored trip %s for %s", trip_key(trip), trip.customer_id)

    def trips_for(self, customer_id: str) -> frozenset[Trip]:
        trips: set[Trip] = set()
        last_key = None

        while True:
            query_kwargs: dict[str, Any] = {
                "TableName": self.table_name,
                "KeyConditionExpression": "customerId = :cid",
                "ExpressionAttributeValues": {":cid": {"S": customer_id}},
                "ConsistentRead": True,
            }
            if last_key:
                query_kwargs["ExclusiveStartKey"] = last_key

            try:
                response = self.dynamo_client.query(**query_kwargs)
            except (BotoCoreError, ClientError) as e:
                logger.error("Failed to query trips for %s: %s", customer_id, e)
                raise TripStorageError(f"query on {self.table_name} failed") from e

            trips.update(_from_item(item) for item in response.get("Items", []))

            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                break

        return frozenset(trips)
