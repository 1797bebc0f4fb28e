"""GET current trip handler — maps the tracking outcome onto HTTP status codes."""

import logging
from datetime import datetime, timezone
from typing import Any

from core.errors import ErrorCode, InvalidInputError, TripTrackerError
from core.registry import get_trips
from core.services import Tracking
from handlers.responses import error_response, json_response

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _parse_instant(value: str | None) -> datetime:
    """ISO-8601 instant from the query string; the request time when absent."""
    if not value:
        return _now()
    at = datetime.fromisoformat(value)
    if at.tzinfo is None:
        raise ValueError(f"instant {value!r} has no UTC offset")
    return at


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    query_params = event.get("queryStringParameters") or {}
    customer_id = query_params.get("customerId")
    if not customer_id:
        return error_response(400, ErrorCode.INVALID_REQUEST)

    try:
        at = _parse_instant(query_params.get("at"))
    except ValueError:
        logger.info("Rejected malformed instant %r for %s", query_params.get("at"), customer_id)
        return error_response(400, ErrorCode.VALIDATION_ERROR)

    try:
        current_trip = Tracking(get_trips()).current_trip_for(customer_id, at)
    except InvalidInputError as e:
        return error_response(400, e.code)
    except TripTrackerError as e:
        logger.exception("Failed to resolve current trip for %s", customer_id)
        return error_response(500, e.code)
    except Exception:
        logger.exception("Unexpected error resolving current trip for %s", customer_id)
        return error_response(500, ErrorCode.INTERNAL_ERROR)

    if current_trip is None:
        return error_response(404, ErrorCode.NO_CURRENT_TRIP)
    return json_response(200, current_trip.model_dump_json())
