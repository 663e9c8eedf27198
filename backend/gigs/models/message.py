from sqlalchemy import Column, Integer, Text, ForeignKey

from .base import BaseModel


class Message(BaseModel):
    """A directed chat line between two users."""

    __tablename__ = "messages"

    id           = Column(Integer, primary_key=True, index=True)
    sender_id    = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    receiver_id  = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    message_text = Column(Text, nullable=False)
