from os import environ
from typing import Literal

from pydantic import BaseModel, ConfigDict


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    aws_region: str
    dynamodb_endpoint: str | None = None
    trips_table: str
    trips_backend: Literal["memory", "dynamodb"] = "memory"
    environment: str


_cached_config: Config | None = None


def _reset_config() -> None:
    """Reset cached config — for testing only."""
    global _cached_config
    _cached_config = None


def get_config() -> Config:
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    _cached_config = Config(
        aws_region=environ.get("AWS_REGION", "us-east-1"),
        dynamodb_endpoint=environ.get("DYNAMODB_ENDPOINT"),
        trips_table=environ.get("TRIPS_TABLE", "TripTrackerTrips"),
        trips_backend=environ.get("TRIPS_BACKEND", "memory").lower(),
        environment=environ.get("ENVIRONMENT", "local"),
    )
    return _cached_config
