# plevenlab/schemas/event.py
"""
Pydantic schemas for event endpoints.
"""
import datetime as dt
from pydantic import BaseModel, model_validator
from typing import Optional

class EventIn(BaseModel):
    """
    Request model for creating or replacing an event.
    Category and author are referenced by id and must already exist.
    """
    categoryId: int  # Existing category id
    title: str
    createdByUserId: int  # Existing user id
    createdDate: dt.datetime
    startDate: dt.datetime
    endDate: dt.datetime
    locationFriendlyName: Optional[str] = None  # Display name of the venue
    locationLat: float = 0.0
    locationLng: float = 0.0

    @model_validator(mode="after")
    def _check_dates(self):
        if self.endDate < self.startDate:
            raise ValueError("endDate must not be before startDate")
        return self
