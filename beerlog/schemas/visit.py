from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from beerlog.core.clock import ensure_utc
from beerlog.schemas.brewery import BreweryResponse


class CheckinRequest(BaseModel):
    # Range checks happen in the check-in policy so they map to domain errors
    brewery_id: int
    latitude: float
    longitude: float


class VisitResponse(BaseModel):
    id: int
    user_profile_id: int
    brewery_id: int
    brewery_name: Optional[str] = None
    brewery_latitude: Optional[float] = None
    brewery_longitude: Optional[float] = None
    visited_at: datetime
    brewery: Optional[BreweryResponse] = None

    model_config = ConfigDict(from_attributes=True)

    @field_validator("visited_at")
    @classmethod
    def attach_utc(cls, v: datetime) -> datetime:
        return ensure_utc(v)


class CheckinResponse(BaseModel):
    visit: VisitResponse
    message: str


class VisitsResponse(BaseModel):
    visits: List[VisitResponse]
    total: int
