"""
Check-in and Visit History API Endpoints
"""

import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from beerlog.api.v1.errors import http_error
from beerlog.core.config import settings
from beerlog.core.errors import BeerLogError
from beerlog.db.database import get_db
from beerlog.models.user_profile import UserProfile
from beerlog.schemas.visit import CheckinRequest, CheckinResponse, VisitResponse, VisitsResponse
from beerlog.services.auth_service import get_current_profile
from beerlog.services.checkin_service import CheckInPolicy, get_checkin_policy
from beerlog.services.visit_service import DEFAULT_PAGE_SIZE, visit_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/checkin", response_model=CheckinResponse, status_code=201)
async def check_in(
    request: CheckinRequest,
    current_profile: UserProfile = Depends(get_current_profile),
    policy: CheckInPolicy = Depends(get_checkin_policy),
) -> Any:
    """
    Check in to a brewery using the caller's GPS position.

    The position must be within the configured radius of the brewery, and the
    caller must not have checked in at the same brewery during the last hour.
    """
    logger.info(
        "Check-in request: user_profile_id=%s, brewery_id=%s, position=(%s, %s)",
        current_profile.id,
        request.brewery_id,
        request.latitude,
        request.longitude,
    )

    try:
        visit = policy.attempt_check_in(
            user_profile_id=int(current_profile.id),
            brewery_id=request.brewery_id,
            latitude=request.latitude,
            longitude=request.longitude,
            max_distance_meters=settings.checkin_radius_meters,
        )
    except BeerLogError as e:
        raise http_error(e) from e

    except Exception as e:
        logger.exception("Unexpected error during check-in")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "Internal server error", "code": "INTERNAL_SERVER_ERROR"},
        ) from e

    return CheckinResponse(
        visit=VisitResponse.model_validate(visit),
        message="Check-in successful!",
    )


@router.get("/visits", response_model=VisitsResponse)
async def get_visits(
    brewery_id: Optional[int] = None,
    limit: int = DEFAULT_PAGE_SIZE,
    offset: int = 0,
    current_profile: UserProfile = Depends(get_current_profile),
    db: Session = Depends(get_db),
) -> Any:
    """
    Get the authenticated user's visit history, newest first.
    """
    try:
        visits, total = visit_service.get_visit_history(
            db, int(current_profile.id), brewery_id, limit, offset
        )
    except BeerLogError as e:
        raise http_error(e) from e

    return VisitsResponse(
        visits=[VisitResponse.model_validate(visit) for visit in visits],
        total=total,
    )


@router.get("/visits/{visit_id}", response_model=VisitResponse)
async def get_visit(
    visit_id: int,
    current_profile: UserProfile = Depends(get_current_profile),
    db: Session = Depends(get_db),
) -> Any:
    """
    Get one of the authenticated user's visits.
    """
    try:
        visit = visit_service.get_visit(db, visit_id, int(current_profile.id))
    except BeerLogError as e:
        raise http_error(e) from e

    return VisitResponse.model_validate(visit)
