from sqlalchemy import Column, Integer, String, Numeric, ForeignKey
from sqlalchemy.orm import relationship

from .base import BaseModel


class Performer(BaseModel):
    __tablename__ = "performers"

    id                  = Column(Integer, primary_key=True, index=True)
    user_id             = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    stage_name          = Column(String(255), nullable=True)
    full_name           = Column(String(255), nullable=True)
    location            = Column(String(255), nullable=True)
    profile_picture_url = Column(String(512), nullable=True)
    average_rating      = Column(Numeric(3, 2), nullable=False, default=0)
    total_reviews       = Column(Integer, nullable=False, default=0)

    user = relationship("User", back_populates="performer_profile")
