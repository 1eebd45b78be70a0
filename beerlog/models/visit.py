from sqlalchemy import Column, DateTime, Float, ForeignKey, Index, Integer, String
from sqlalchemy.orm import relationship

from beerlog.db.database import Base


class Visit(Base):
    """
    A successful check-in.

    The brewery name and coordinates are copied at check-in time so a visit keeps
    describing where the user actually was, even if the brewery is edited later.
    ``visited_at`` is stamped by the visit repository on insert.
    """

    __tablename__ = "visits"
    __table_args__ = (
        Index("ix_visits_user_brewery_visited_at", "user_profile_id", "brewery_id", "visited_at"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_profile_id = Column(
        Integer, ForeignKey("user_profiles.id"), nullable=False, index=True
    )
    brewery_id = Column(Integer, ForeignKey("breweries.id"), nullable=False, index=True)
    brewery_name = Column(String(255), nullable=True)
    brewery_latitude = Column(Float, nullable=True)
    brewery_longitude = Column(Float, nullable=True)
    visited_at = Column(DateTime(timezone=True), nullable=False)

    user_profile = relationship("UserProfile", back_populates="visits")
    brewery = relationship("Brewery", back_populates="visits")

    def __init__(
        self,
        user_profile_id,
        brewery_id,
        brewery_name=None,
        brewery_latitude=None,
        brewery_longitude=None,
    ):
        self.user_profile_id = user_profile_id
        self.brewery_id = brewery_id
        self.brewery_name = brewery_name
        self.brewery_latitude = brewery_latitude
        self.brewery_longitude = brewery_longitude
