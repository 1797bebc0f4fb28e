"""POST trip handler — registers an already-formed trip."""

import logging
from typing import Any

from pydantic import ValidationError

from core.errors import ErrorCode, TripTrackerError
from core.models import Trip
from core.registry import get_trips
from handlers.responses import error_response, json_response

logger = logging.getLogger(__name__)


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    body = event.get("body")
    if not body:
        return error_response(400, ErrorCode.INVALID_REQUEST)

    try:
        trip = Trip.model_validate_json(body)
    except ValidationError as e:
        logger.info("Rejected trip payload: %d validation errors", e.error_count())
        return error_response(400, ErrorCode.VALIDATION_ERROR)

    try:
        get_trips().add_trip(trip)
    except TripTrackerError as e:
        logger.exception("Failed to add trip for %s", trip.customer_id)
        return error_response(500, e.code)
    except Exception:
        logger.exception("Unexpected error adding trip for %s", trip.customer_id)
        return error_response(500, ErrorCode.INTERNAL_ERROR)

    return json_response(201, trip.model_dump_json())
