# backend/gigs/models/booking.py

from sqlalchemy import Column, Integer, String, Text, Date, Numeric, ForeignKey
from sqlalchemy.orm import relationship

from .base import BaseModel


class Booking(BaseModel):
    __tablename__ = "bookings"

    id             = Column(Integer, primary_key=True, index=True)
    artist_id      = Column(Integer, ForeignKey("performers.id"), index=True, nullable=False)
    host_id        = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    event_date     = Column(Date, nullable=False)
    event_time     = Column(String(32), nullable=False)
    event_location = Column(String(255), nullable=False)
    notes          = Column(Text, nullable=True)
    price          = Column(Numeric(10, 2), nullable=False, default=0)
    payment_method = Column(String(64), nullable=True)

    artist = relationship("Performer")
    host   = relationship("User")
