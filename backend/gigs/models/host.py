from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship

from .base import BaseModel


class Host(BaseModel):
    __tablename__ = "hosts"

    id                   = Column(Integer, primary_key=True, index=True)
    user_id              = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    company_organization = Column(String(255), nullable=True)
    location             = Column(String(255), nullable=True)
    profile_picture_url  = Column(String(512), nullable=True)

    user = relationship("User", back_populates="host_profile")
    gigs = relationship("Gig", back_populates="host")
