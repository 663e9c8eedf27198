from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class PerformerProfile(BaseModel):
    id: int
    user_id: int
    stage_name: Optional[str] = None
    full_name: Optional[str] = None
    location: Optional[str] = None
    profile_picture_url: Optional[str] = None
    average_rating: float = 0
    total_reviews: int = 0
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
