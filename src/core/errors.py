"""
Custom exceptions and error handling for Trip Tracker.

Defines application-specific exceptions with error codes for consistent
error handling across Lambda functions and client communication.

"No current trip" is a normal outcome and is never raised; only genuine
failures live here.

Usage:
    from core.errors import ConsistencyViolation, ErrorCode

    raise ConsistencyViolation(customer_id, at, candidates)
"""

from datetime import datetime
from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for client-facing error messages."""

    # Lookup outcomes
    NO_CURRENT_TRIP = "NO_CURRENT_TRIP"

    # Data consistency errors
    CONSISTENCY_VIOLATION = "CONSISTENCY_VIOLATION"

    # Storage errors
    STORAGE_FAILED = "STORAGE_FAILED"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_REQUEST = "INVALID_REQUEST"

    # System errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.NO_CURRENT_TRIP: "No trip is currently active for this customer.",
    ErrorCode.CONSISTENCY_VIOLATION: "Trip data for this customer is inconsistent. Please contact the travel team.",
    ErrorCode.STORAGE_FAILED: "Trip data is temporarily unavailable. Please try again later.",
    ErrorCode.VALIDATION_ERROR: "Your request contains invalid information. Please check and try again.",
    ErrorCode.INVALID_REQUEST: "Invalid request format. Please try again.",
    ErrorCode.INTERNAL_ERROR: "An unexpected error occurred. Please try again.",
}


class TripTrackerError(Exception):
    """Base exception for all Trip Tracker errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR):
        self.message = message
        self.code = code
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])


class InvalidInputError(TripTrackerError):
    """Input reached the core in a shape it cannot answer for."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.VALIDATION_ERROR):
        super().__init__(message, code=code)


class ConsistencyViolation(TripTrackerError):
    """More than one booked trip is active for one customer at one instant.

    Signals corrupted or contradictory upstream data. The candidates are kept
    for diagnostics; no attempt is made to pick the "right" one.
    """

    def __init__(self, customer_id: str, at: datetime, candidates: Any):
        self.customer_id = customer_id
        self.at = at
        self.candidates = frozenset(candidates)
        super().__init__(
            f"Unexpectedly more than one current trip for {customer_id} at {at.isoformat()} "
            f"({len(self.candidates)} booked trips active)",
            code=ErrorCode.CONSISTENCY_VIOLATION,
        )


class TripStorageError(TripTrackerError):
    """Reading from or writing to the trip store failed."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.STORAGE_FAILED):
        super().__init__(message, code=code)
