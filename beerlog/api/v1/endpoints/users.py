from typing import Any

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from beerlog.api.v1.errors import http_error
from beerlog.core.errors import BeerLogError
from beerlog.db.database import get_db
from beerlog.models.user_profile import UserProfile
from beerlog.schemas.user_profile import UserProfileCreate, UserProfileResponse
from beerlog.services.auth_service import get_current_profile, require_identity_subject
from beerlog.services.user_profile_service import user_profile_service

router = APIRouter()


@router.get("/profile", response_model=UserProfileResponse)
async def read_profile(
    current_profile: UserProfile = Depends(get_current_profile),
) -> Any:
    """
    Get the authenticated user's profile.
    """
    return current_profile


@router.post("/profile", response_model=UserProfileResponse, status_code=201)
async def create_profile(
    profile_in: UserProfileCreate,
    subject: str = Depends(require_identity_subject),
    db: Session = Depends(get_db),
) -> Any:
    """
    Create the profile of the authenticated user.
    """
    try:
        profile = user_profile_service.create_profile(
            db, subject, profile_in.display_name, profile_in.icon_url
        )
    except BeerLogError as e:
        raise http_error(e) from e

    return profile
