"""
Pydantic models for Trip Tracker.
"""

from core.models.trip import BookingStatus, Trip

__all__ = ["BookingStatus", "Trip"]
