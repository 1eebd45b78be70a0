"""
Check-in service.

Decides whether a user may check in at a brewery and records the visit. An attempt
goes through these steps in order, stopping at the first failure:

1. resolve the brewery (BreweryNotFound)
2. geofence: the claimed position must be within the radius (TooFarForCheckIn)
3. cooldown: no earlier visit at the same brewery in the last hour (DuplicateCheckIn)
4. persist the visit through the visit store, which stamps ``visited_at``

Nothing is written unless every step passes.
"""

import logging
from datetime import timedelta
from typing import Optional, Protocol

from fastapi import Depends
from sqlalchemy.orm import Session

from beerlog.core.clock import Clock, ensure_utc, utc_now
from beerlog.core.errors import (
    BeerLogError,
    BreweryNotFound,
    DuplicateCheckIn,
    InvalidArgument,
    TooFarForCheckIn,
)
from beerlog.core.geo import Coordinate, is_within_range
from beerlog.db.database import get_db, is_valid_id
from beerlog.models.brewery import Brewery
from beerlog.models.visit import Visit
from beerlog.repositories.brewery_repository import BreweryRepository
from beerlog.repositories.visit_repository import VisitRepository

logger = logging.getLogger(__name__)

CHECKIN_COOLDOWN = timedelta(hours=1)


class BreweryStore(Protocol):
    def get_by_id(self, brewery_id: int) -> Optional[Brewery]: ...


class VisitStore(Protocol):
    def get_most_recent(self, user_profile_id: int, brewery_id: int) -> Optional[Visit]: ...

    def create(self, visit: Visit, cooldown: timedelta = ...) -> Visit: ...


class CheckInPolicy:
    """Stateless check-in rules on top of a brewery store and a visit store."""

    def __init__(
        self,
        brewery_store: BreweryStore,
        visit_store: VisitStore,
        clock: Clock = utc_now,
    ):
        self._breweries = brewery_store
        self._visits = visit_store
        self._clock = clock

    def attempt_check_in(
        self,
        user_profile_id: int,
        brewery_id: int,
        latitude: float,
        longitude: float,
        max_distance_meters: float,
    ) -> Visit:
        """
        Check a user in at a brewery.

        Args:
            user_profile_id: Checking-in user profile ID
            brewery_id: Brewery to check in at
            latitude: Claimed GPS latitude
            longitude: Claimed GPS longitude
            max_distance_meters: Geofence radius around the brewery

        Returns:
            The persisted Visit

        Raises:
            InvalidArgument: If an id is out of range or the radius is not positive
            InvalidCoordinate: If the claimed position is out of range or unset
            BreweryNotFound: If the brewery does not exist
            TooFarForCheckIn: If the position is outside the geofence
            DuplicateCheckIn: If the user checked in there less than an hour ago
        """
        try:
            visit = self._attempt(
                user_profile_id, brewery_id, Coordinate(latitude, longitude), max_distance_meters
            )
        except BeerLogError as e:
            logger.info(
                "Check-in rejected: user_profile_id=%s, brewery_id=%s, code=%s",
                user_profile_id,
                brewery_id,
                e.code,
            )
            raise

        logger.info(
            "Check-in recorded: visit_id=%s, user_profile_id=%s, brewery_id=%s",
            visit.id,
            user_profile_id,
            brewery_id,
        )
        return visit

    def _attempt(
        self,
        user_profile_id: int,
        brewery_id: int,
        claimed: Coordinate,
        max_distance_meters: float,
    ) -> Visit:
        if not is_valid_id(user_profile_id) or not is_valid_id(brewery_id):
            raise InvalidArgument("Invalid user profile id or brewery id")

        brewery = self._breweries.get_by_id(brewery_id)
        if brewery is None:
            raise BreweryNotFound()

        if not is_within_range(brewery.coordinate, claimed, max_distance_meters):
            raise TooFarForCheckIn()

        last_visit = self._visits.get_most_recent(user_profile_id, brewery_id)
        if last_visit is not None:
            elapsed = self._clock() - ensure_utc(last_visit.visited_at)
            if elapsed < CHECKIN_COOLDOWN:
                raise DuplicateCheckIn()

        visit = Visit(
            user_profile_id=user_profile_id,
            brewery_id=brewery_id,
            brewery_name=brewery.name,
            brewery_latitude=brewery.latitude,
            brewery_longitude=brewery.longitude,
        )
        return self._visits.create(visit, cooldown=CHECKIN_COOLDOWN)


def get_checkin_policy(db: Session = Depends(get_db)) -> CheckInPolicy:
    """Build a policy bound to the request's database session."""
    return CheckInPolicy(BreweryRepository(db), VisitRepository(db))
