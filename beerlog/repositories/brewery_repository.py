"""
Brewery repository backed by SQLAlchemy.
"""

from typing import Optional

from sqlalchemy.orm import Session

from beerlog.models.brewery import Brewery


class BreweryRepository:
    """Persistence for breweries."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, brewery_id: int) -> Optional[Brewery]:
        """
        Get a brewery by ID.

        Args:
            brewery_id: Brewery ID to search for

        Returns:
            Brewery object if found, None otherwise
        """
        return self.db.query(Brewery).filter(Brewery.id == brewery_id).first()

    def create(self, brewery: Brewery) -> Brewery:
        self.db.add(brewery)
        self.db.commit()
        self.db.refresh(brewery)
        return brewery
