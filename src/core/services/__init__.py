"""
Business services for Trip Tracker.

- tracking.py: resolves a customer's current trip from a trip registry
"""

from core.services.tracking import TrackTrips, Tracking

__all__ = ["TrackTrips", "Tracking"]
