from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from beerlog.db.database import Base


class UserProfile(Base):
    __tablename__ = "user_profiles"

    id = Column(Integer, primary_key=True, index=True)
    cognito_sub = Column(String(255), unique=True, index=True, nullable=False)
    display_name = Column(String(255), nullable=True)
    icon_url = Column(String(512), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    visits = relationship("Visit", back_populates="user_profile")

    def __init__(self, cognito_sub, display_name=None, icon_url=None):
        self.cognito_sub = cognito_sub
        self.display_name = display_name
        self.icon_url = icon_url
