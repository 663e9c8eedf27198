# backend/gigs/models/user.py

from sqlalchemy import Column, Integer, String, Enum
from sqlalchemy.orm import relationship
from .base import BaseModel
import enum


class UserRole(str, enum.Enum):
    """Account roles. A role is fixed once the account exists."""

    HOST = "host"
    PERFORMER = "performer"


class User(BaseModel):
    __tablename__ = "users"

    id       = Column(Integer, primary_key=True, index=True)
    email    = Column(String(255), unique=True, index=True, nullable=False)
    # NULL for accounts created through Google sign-in
    password = Column(String(255), nullable=True)
    username = Column(String(255), nullable=False)
    role     = Column(
        Enum(UserRole, name="userrole", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )

    performer_profile = relationship("Performer", back_populates="user", uselist=False)
    host_profile = relationship("Host", back_populates="user", uselist=False)
