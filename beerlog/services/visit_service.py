"""
Visit service for reading a user's check-in history.
"""

from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from beerlog.core.errors import AccessDenied, InvalidArgument, VisitNotFound
from beerlog.db.database import MAX_ID, is_valid_id
from beerlog.models.visit import Visit
from beerlog.repositories.visit_repository import VisitRepository

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


class VisitService:
    """Service for handling visit history operations."""

    @staticmethod
    def get_visit_history(
        db: Session,
        user_profile_id: int,
        brewery_id: Optional[int] = None,
        limit: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
    ) -> Tuple[List[Visit], int]:
        """
        Get a page of the user's visits, newest first.

        A non-positive limit falls back to the default page size and limits above
        the maximum are capped. Negative offsets start from the beginning, and a
        missing or non-positive brewery ID means "all breweries".

        Returns:
            Tuple of (visits on the page, total number of matching visits)

        Raises:
            InvalidArgument: If the user profile ID or brewery ID is out of range
        """
        if not is_valid_id(user_profile_id):
            raise InvalidArgument("Invalid user profile id")

        if limit <= 0:
            limit = DEFAULT_PAGE_SIZE
        limit = min(limit, MAX_PAGE_SIZE)
        offset = min(max(offset, 0), MAX_ID)
        if brewery_id is not None and brewery_id <= 0:
            brewery_id = None
        if brewery_id is not None and not is_valid_id(brewery_id):
            raise InvalidArgument("Invalid brewery id")

        return VisitRepository(db).get_by_user_profile(user_profile_id, brewery_id, limit, offset)

    @staticmethod
    def get_visit(db: Session, visit_id: int, user_profile_id: int) -> Visit:
        """
        Get one of the user's own visits.

        Raises:
            InvalidArgument: If either ID is not positive or out of range
            VisitNotFound: If the visit does not exist
            AccessDenied: If the visit belongs to another user
        """
        if not is_valid_id(visit_id) or not is_valid_id(user_profile_id):
            raise InvalidArgument("Invalid visit id or user profile id")

        visit = VisitRepository(db).get_by_id(visit_id)
        if visit is None:
            raise VisitNotFound()

        if visit.user_profile_id != user_profile_id:
            raise AccessDenied()

        return visit


# Create a singleton instance
visit_service = VisitService()
