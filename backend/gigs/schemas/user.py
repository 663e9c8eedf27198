# backend/gigs/schemas/user.py

from pydantic import BaseModel, EmailStr, Field
from typing import Optional, Annotated

from ..models.user import UserRole


class UserCreate(BaseModel):
    email: EmailStr
    password: Annotated[str, Field(min_length=1)]
    username: Annotated[str, Field(min_length=1, max_length=255)]
    role: UserRole


class UserLogin(BaseModel):
    email: Annotated[str, Field(min_length=1)]
    password: Annotated[str, Field(min_length=1)]


class GoogleLogin(BaseModel):
    """Body of the Google sign-in exchange.

    ``role`` only applies when the Google account has no user yet; anything
    other than host/performer falls back to host.
    """

    credential: Optional[str] = None
    role: Optional[str] = None


class UserSummary(BaseModel):
    id: int
    email: str
    role: UserRole
    username: Optional[str] = None

    model_config = {"from_attributes": True}


class TokenData(BaseModel):
    id: int
    role: UserRole
