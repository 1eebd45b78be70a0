from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class UserProfileCreate(BaseModel):
    display_name: str = ""
    icon_url: Optional[str] = None


class UserProfileResponse(BaseModel):
    id: int
    cognito_sub: str
    display_name: Optional[str] = None
    icon_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
