from sqlalchemy import Column, Integer, String, Text, Date, Numeric, ForeignKey
from sqlalchemy.orm import relationship

from .base import BaseModel


class Gig(BaseModel):
    __tablename__ = "gigs"

    id                = Column(Integer, primary_key=True, index=True)
    host_id           = Column(Integer, ForeignKey("hosts.id", ondelete="CASCADE"), index=True, nullable=False)
    title             = Column(String(255), nullable=False)
    description       = Column(Text, nullable=True)
    budget_min        = Column(Numeric(10, 2), nullable=True)
    budget_max        = Column(Numeric(10, 2), nullable=True)
    event_date        = Column(Date, nullable=True)
    event_time        = Column(String(32), nullable=True)
    event_location    = Column(String(255), nullable=True)
    event_type        = Column(String(100), nullable=True)
    event_scope       = Column(String(100), nullable=True)
    location_city     = Column(String(100), nullable=True)
    location_district = Column(String(100), nullable=True)
    # Comma separated talent tags
    talents           = Column(String(512), nullable=True)

    host     = relationship("Host", back_populates="gigs")
    requests = relationship("GigRequest", back_populates="gig", cascade="all, delete-orphan")
