from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship

from .base import BaseModel

# Roles accepted as reviewer_role; "artist" and "performer" are synonyms.
REVIEWER_ROLES = ("host", "artist", "performer")


class ArtistReview(BaseModel):
    __tablename__ = "artist_reviews"

    id            = Column(Integer, primary_key=True, index=True)
    artist_id     = Column(Integer, ForeignKey("performers.id", ondelete="CASCADE"), index=True, nullable=False)
    reviewer_id   = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    reviewer_role = Column(String(20), nullable=False)
    rating        = Column(Integer, nullable=False)
    review_text   = Column(Text, nullable=True)

    artist   = relationship("Performer")
    reviewer = relationship("User")
