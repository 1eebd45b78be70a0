"""
Visit repository backed by SQLAlchemy.

``create`` is the only writer of visits. It re-checks the cooldown inside the
insert itself so that two concurrent check-ins for the same user and brewery can
never both be stored.
"""

import logging
from datetime import timedelta
from typing import List, Optional, Tuple

from sqlalchemy import DateTime, Float, Integer, String, insert, literal, select
from sqlalchemy.orm import Session

from beerlog.core.clock import Clock, utc_now
from beerlog.core.errors import DuplicateCheckIn
from beerlog.models.user_profile import UserProfile
from beerlog.models.visit import Visit

logger = logging.getLogger(__name__)


class VisitRepository:
    """Persistence for visits."""

    def __init__(self, db: Session, clock: Clock = utc_now):
        self.db = db
        self._clock = clock

    def get_by_id(self, visit_id: int) -> Optional[Visit]:
        return self.db.query(Visit).filter(Visit.id == visit_id).first()

    def get_most_recent(self, user_profile_id: int, brewery_id: int) -> Optional[Visit]:
        """
        Get the newest visit of a user at a brewery.

        Args:
            user_profile_id: Visiting user profile ID
            brewery_id: Visited brewery ID

        Returns:
            The most recent Visit, or None if the user never checked in there
        """
        return (
            self.db.query(Visit)
            .filter(
                Visit.user_profile_id == user_profile_id,
                Visit.brewery_id == brewery_id,
            )
            .order_by(Visit.visited_at.desc(), Visit.id.desc())
            .first()
        )

    def get_by_user_profile(
        self,
        user_profile_id: int,
        brewery_id: Optional[int] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> Tuple[List[Visit], int]:
        """
        Get a page of a user's visits, newest first.

        Args:
            user_profile_id: User profile ID to get visits for
            brewery_id: Only return visits to this brewery when given
            limit: Page size
            offset: Number of visits to skip

        Returns:
            Tuple of (visits on the page, total number of matching visits)
        """
        query = self.db.query(Visit).filter(Visit.user_profile_id == user_profile_id)
        if brewery_id is not None:
            query = query.filter(Visit.brewery_id == brewery_id)

        total = query.count()
        visits = (
            query.order_by(Visit.visited_at.desc(), Visit.id.desc())
            .limit(limit)
            .offset(offset)
            .all()
        )
        return visits, total

    def create(self, visit: Visit, cooldown: timedelta = timedelta(0)) -> Visit:
        """
        Persist a new visit stamped with the current time.

        The insert only happens when the user has no visit at the same brewery
        newer than ``now - cooldown``; the check and the insert are one statement.

        Args:
            visit: Unsaved visit carrying the ids and the brewery snapshot
            cooldown: Minimum time since the previous visit at the same brewery

        Returns:
            The stored Visit, with id and visited_at assigned

        Raises:
            DuplicateCheckIn: If a visit inside the cooldown window already exists
        """
        # Serializes check-ins of one user on databases with row locks (PostgreSQL)
        self.db.query(UserProfile.id).filter(
            UserProfile.id == visit.user_profile_id
        ).with_for_update().first()

        now = self._clock()
        recent_visit = (
            select(Visit.id)
            .where(
                Visit.user_profile_id == visit.user_profile_id,
                Visit.brewery_id == visit.brewery_id,
                Visit.visited_at > now - cooldown,
            )
            .exists()
        )
        values = select(
            literal(visit.user_profile_id, Integer),
            literal(visit.brewery_id, Integer),
            literal(visit.brewery_name, String),
            literal(visit.brewery_latitude, Float),
            literal(visit.brewery_longitude, Float),
            literal(now, DateTime(timezone=True)),
        ).where(~recent_visit)
        statement = (
            insert(Visit)
            .from_select(
                [
                    "user_profile_id",
                    "brewery_id",
                    "brewery_name",
                    "brewery_latitude",
                    "brewery_longitude",
                    "visited_at",
                ],
                values,
            )
            .returning(Visit.id)
        )

        visit_id = self.db.execute(statement).scalar_one_or_none()
        if visit_id is None:
            self.db.rollback()
            logger.info(
                "Concurrent check-in rejected: user_profile_id=%s, brewery_id=%s",
                visit.user_profile_id,
                visit.brewery_id,
            )
            raise DuplicateCheckIn()

        self.db.commit()
        return self.db.get(Visit, visit_id)
