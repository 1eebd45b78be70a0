from typing import Any, Optional, Union

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from beerlog.api.v1.errors import http_error
from beerlog.core.errors import BeerLogError
from beerlog.db.database import get_db
from beerlog.schemas.brewery import BreweryCreate, BreweryPublicResponse, BreweryResponse
from beerlog.services.auth_service import get_identity_subject, require_admin
from beerlog.services.brewery_service import brewery_service

router = APIRouter()


@router.get("/{brewery_id}", response_model=Union[BreweryResponse, BreweryPublicResponse])
async def get_brewery(
    brewery_id: int,
    subject: Optional[str] = Depends(get_identity_subject),
    db: Session = Depends(get_db),
) -> Any:
    """
    Get a brewery by ID. Anonymous callers do not see its location.
    """
    try:
        brewery = brewery_service.get_brewery(db, brewery_id)
    except BeerLogError as e:
        raise http_error(e) from e

    if subject:
        return BreweryResponse.model_validate(brewery)
    return BreweryPublicResponse.model_validate(brewery)


@router.post("", response_model=BreweryResponse, status_code=201)
async def create_brewery(
    brewery_in: BreweryCreate,
    _: str = Depends(require_admin),
    db: Session = Depends(get_db),
) -> Any:
    """
    Create a new brewery (admin only).
    """
    try:
        brewery = brewery_service.create_brewery(db, brewery_in)
    except BeerLogError as e:
        raise http_error(e) from e

    return brewery
