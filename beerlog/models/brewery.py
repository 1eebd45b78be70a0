from sqlalchemy import Column, DateTime, Float, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from beerlog.core.geo import Coordinate
from beerlog.db.database import Base


class Brewery(Base):
    __tablename__ = "breweries"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    address = Column(String(512), nullable=True)
    description = Column(Text, nullable=True)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    visits = relationship("Visit", back_populates="brewery")

    def __init__(self, name, latitude, longitude, address=None, description=None):
        self.name = name
        self.address = address
        self.description = description
        self.latitude = latitude
        self.longitude = longitude

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(latitude=float(self.latitude), longitude=float(self.longitude))
