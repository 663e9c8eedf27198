from .user import User, UserRole
from .performer import Performer
from .host import Host
from .gig import Gig
from .gig_request import GigRequest, GigRequestStatus
from .booking import Booking
from .review import ArtistReview, REVIEWER_ROLES
from .notification import Notification, NotificationType
from .message import Message

__all__ = [
    "User",
    "UserRole",
    "Performer",
    "Host",
    "Gig",
    "GigRequest",
    "GigRequestStatus",
    "Booking",
    "ArtistReview",
    "REVIEWER_ROLES",
    "Notification",
    "NotificationType",
    "Message",
]
