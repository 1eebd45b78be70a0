from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class BreweryCreate(BaseModel):
    name: str
    address: Optional[str] = None
    description: Optional[str] = None
    latitude: float
    longitude: float


class BreweryPublicResponse(BaseModel):
    """Brewery as shown to anonymous callers, without its location."""

    id: int
    name: str
    address: Optional[str] = None
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class BreweryResponse(BreweryPublicResponse):
    latitude: float
    longitude: float
