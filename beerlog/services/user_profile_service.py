"""
User profile service for handling profile-related business logic.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from beerlog.core.errors import InvalidArgument, ProfileAlreadyExists, ProfileNotFound
from beerlog.models.user_profile import UserProfile

logger = logging.getLogger(__name__)

MAX_DISPLAY_NAME_LENGTH = 50
MAX_ICON_URL_LENGTH = 255


class UserProfileService:
    """Service for handling user profile operations."""

    @staticmethod
    def find_by_cognito_sub(db: Session, cognito_sub: str) -> Optional[UserProfile]:
        return db.query(UserProfile).filter(UserProfile.cognito_sub == cognito_sub).first()

    @classmethod
    def get_profile(cls, db: Session, cognito_sub: str) -> UserProfile:
        """
        Get the profile bound to an identity subject.

        Raises:
            InvalidArgument: If the subject is empty
            ProfileNotFound: If no profile exists for the subject
        """
        if not cognito_sub:
            raise InvalidArgument("cognito_sub is required")

        profile = cls.find_by_cognito_sub(db, cognito_sub)
        if profile is None:
            raise ProfileNotFound()
        return profile

    @classmethod
    def create_profile(
        cls,
        db: Session,
        cognito_sub: str,
        display_name: str,
        icon_url: Optional[str] = None,
    ) -> UserProfile:
        """
        Create the profile for an identity subject.

        Args:
            db: Database session
            cognito_sub: Identity subject the profile is bound to
            display_name: Name shown to other users
            icon_url: Optional avatar URL

        Returns:
            Created UserProfile object

        Raises:
            InvalidArgument: If validation fails
            ProfileAlreadyExists: If the subject already has a profile
        """
        if not cognito_sub:
            raise InvalidArgument("cognito_sub is required")

        display_name = (display_name or "").strip()
        if not display_name:
            raise InvalidArgument("Display name is required")
        if len(display_name) > MAX_DISPLAY_NAME_LENGTH:
            raise InvalidArgument(
                f"Display name must be {MAX_DISPLAY_NAME_LENGTH} characters or less"
            )

        icon_url = (icon_url or "").strip() or None
        if icon_url and len(icon_url) > MAX_ICON_URL_LENGTH:
            raise InvalidArgument(f"Icon URL must be {MAX_ICON_URL_LENGTH} characters or less")

        if cls.find_by_cognito_sub(db, cognito_sub) is not None:
            raise ProfileAlreadyExists()

        profile = UserProfile(
            cognito_sub=cognito_sub,
            display_name=display_name,
            icon_url=icon_url,
        )
        db.add(profile)
        db.commit()
        db.refresh(profile)

        logger.info("User profile created: id=%s", profile.id)
        return profile


# Create a singleton instance
user_profile_service = UserProfileService()
