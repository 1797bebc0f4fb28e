from datetime import datetime
from enum import Enum

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, model_validator


class BookingStatus(str, Enum):
    BOOKED = "BOOKED"
    TENTATIVE = "TENTATIVE"
    CANCELLED = "CANCELLED"


class Trip(BaseModel):
    """A customer's planned journey interval and its booking status.

    Frozen, so trips hash and compare by value and can live in sets.
    """

    model_config = ConfigDict(frozen=True)

    customer_id: str = Field(..., min_length=1)
    planned_start: AwareDatetime
    planned_end: AwareDatetime
    booking_status: BookingStatus

    @model_validator(mode="after")
    def start_not_after_end(self) -> "Trip":
        if self.planned_start > self.planned_end:
            raise ValueError("planned_start must not be after planned_end")
        return self

    def is_planned_to_be_active_at(self, at: datetime) -> bool:
        return self.planned_start <= at <= self.planned_end
