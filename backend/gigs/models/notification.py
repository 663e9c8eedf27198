from sqlalchemy import Column, Integer, String, Boolean, Text, ForeignKey
from sqlalchemy.orm import relationship
import enum

from .base import BaseModel


class NotificationType(str, enum.Enum):
    BOOKING = "booking"
    GIG_REQUEST = "gig_request"


class Notification(BaseModel):
    __tablename__ = "notifications"

    id         = Column(Integer, primary_key=True, index=True)
    user_id    = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    type       = Column(String(32), nullable=False)
    text       = Column(Text, nullable=False)
    is_read    = Column(Boolean, nullable=False, default=False)
    request_id = Column(Integer, ForeignKey("gig_requests.id", ondelete="SET NULL"), nullable=True)

    user = relationship("User")
