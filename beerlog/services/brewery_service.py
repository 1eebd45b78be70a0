"""
Brewery service for handling brewery-related business logic.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from beerlog.core.errors import BreweryNotFound, InvalidArgument
from beerlog.core.geo import Coordinate
from beerlog.db.database import is_valid_id
from beerlog.models.brewery import Brewery
from beerlog.repositories.brewery_repository import BreweryRepository
from beerlog.schemas.brewery import BreweryCreate

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 255
MAX_ADDRESS_LENGTH = 512


def build_brewery(
    name: str,
    address: Optional[str],
    description: Optional[str],
    latitude: float,
    longitude: float,
) -> Brewery:
    """
    Build an unsaved brewery, enforcing its invariants.

    Text fields are trimmed. The location must be a valid, non-zero coordinate.

    Raises:
        InvalidArgument: If the name or address is empty or too long
        InvalidCoordinate: If the location is invalid
    """
    name = (name or "").strip()
    address = (address or "").strip()
    description = (description or "").strip()

    if not name:
        raise InvalidArgument("Brewery name is required")
    if len(name) > MAX_NAME_LENGTH:
        raise InvalidArgument(f"Brewery name must be {MAX_NAME_LENGTH} characters or less")
    if len(address) > MAX_ADDRESS_LENGTH:
        raise InvalidArgument(f"Brewery address must be {MAX_ADDRESS_LENGTH} characters or less")
    Coordinate(latitude, longitude).validate()

    return Brewery(
        name=name,
        address=address,
        description=description,
        latitude=latitude,
        longitude=longitude,
    )


class BreweryService:
    """Service for handling brewery operations."""

    @staticmethod
    def get_brewery(db: Session, brewery_id: int) -> Brewery:
        """
        Get a brewery by ID.

        Raises:
            InvalidArgument: If the ID is not positive or out of range
            BreweryNotFound: If the brewery does not exist
        """
        if not is_valid_id(brewery_id):
            raise InvalidArgument("Invalid brewery id")

        brewery = BreweryRepository(db).get_by_id(brewery_id)
        if brewery is None:
            raise BreweryNotFound()
        return brewery

    @staticmethod
    def create_brewery(db: Session, brewery_in: BreweryCreate) -> Brewery:
        """
        Create a new brewery.

        Args:
            db: Database session
            brewery_in: Brewery creation data

        Returns:
            Created Brewery object
        """
        brewery = build_brewery(
            brewery_in.name,
            brewery_in.address,
            brewery_in.description,
            brewery_in.latitude,
            brewery_in.longitude,
        )
        brewery = BreweryRepository(db).create(brewery)

        logger.info("Brewery created: id=%s, location=%s", brewery.id, brewery.coordinate)
        return brewery


# Create a singleton instance
brewery_service = BreweryService()
