from pydantic import BaseModel, Field
from typing import Optional, Annotated
from datetime import datetime


class ArtistReviewCreate(BaseModel):
  reviewer_id: int
  reviewer_role: str
  rating: Annotated[int, Field(ge=1, le=5)]
  review_text: Optional[str] = None
  booking_id: Optional[int] = None


class HostReviewUpdate(BaseModel):
  rating: Annotated[int, Field(ge=1, le=5)]
  comment: Optional[str] = None


class ArtistReviewRead(BaseModel):
  id: int
  artist_id: int
  reviewer_id: int
  reviewer_role: str
  rating: int
  review_text: Optional[str] = None
  created_at: Optional[datetime] = None
  updated_at: Optional[datetime] = None
  reviewer_name: Optional[str] = None

  model_config = {"from_attributes": True}


class HostReviewRead(ArtistReviewRead):
  artist_name: Optional[str] = None
  artist_avatar: Optional[str] = None


class AdminReviewRead(BaseModel):
  """Flattened review row for moderation screens."""
  id: int
  reviewer_id: int
  reviewer_role: str
  target_id: int
  rating: int
  comment: Optional[str] = None
  created_at: Optional[datetime] = None
  reviewer_name: Optional[str] = None
  target_name: Optional[str] = None
