from sqlalchemy import Column, Integer, Enum, ForeignKey
from sqlalchemy.orm import relationship
import enum

from .base import BaseModel


class GigRequestStatus(str, enum.Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"

    @property
    def is_terminal(self) -> bool:
        return self is not GigRequestStatus.PENDING


class GigRequest(BaseModel):
    __tablename__ = "gig_requests"

    id           = Column(Integer, primary_key=True, index=True)
    gig_id       = Column(Integer, ForeignKey("gigs.id", ondelete="CASCADE"), index=True, nullable=False)
    performer_id = Column(Integer, ForeignKey("performers.id", ondelete="CASCADE"), index=True, nullable=False)
    status       = Column(
        Enum(GigRequestStatus, name="gigrequeststatus", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=GigRequestStatus.PENDING,
    )

    gig       = relationship("Gig", back_populates="requests")
    performer = relationship("Performer")
