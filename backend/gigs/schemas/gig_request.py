from pydantic import BaseModel
from typing import Literal


class GigRequestResponse(BaseModel):
    """Host decision on a pending gig request."""

    response: Literal["accepted", "rejected"]
