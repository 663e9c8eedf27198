from pydantic import BaseModel, Field, field_validator
from typing import Optional, Annotated
from datetime import date
from decimal import Decimal


class BookingCreate(BaseModel):
    # Either a performers.id or the performer's users.id
    artist_id: int
    host_id: int
    host_full_name: Optional[str] = None
    event_date: date
    event_time: Annotated[str, Field(min_length=1, max_length=32)]
    event_location: Annotated[str, Field(min_length=1, max_length=255)]
    notes: str = ""
    price: Annotated[Decimal, Field(ge=0)] = Decimal("0")
    payment_method: str = ""

    @field_validator("notes", "payment_method", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        return "" if v is None else v
