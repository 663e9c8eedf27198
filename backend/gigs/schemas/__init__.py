from .user import UserCreate, UserLogin, GoogleLogin, UserSummary, TokenData
from .review import (
    ArtistReviewCreate,
    HostReviewUpdate,
    ArtistReviewRead,
    HostReviewRead,
    AdminReviewRead,
)
from .booking import BookingCreate
from .gig_request import GigRequestResponse
from .performer import PerformerProfile
