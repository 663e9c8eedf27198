from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import Optional
import logging

from .. import crud, models, schemas
from ..crud.crud_performer import NotFound, parse_id
from ..database import get_db
from ..utils.errors import NotFoundError, PermissionDeniedError, ValidationError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["reviews"])


@router.get("/test")
def artists_test():
    return {"message": "Artist routes are working!"}


@router.post("/{artist_id}/reviews", status_code=status.HTTP_201_CREATED)
def add_review(
    artist_id: str,
    review_in: schemas.ArtistReviewCreate,
    db: Session = Depends(get_db),
):
    """Add a review for an artist and refresh the artist's rating aggregate.

    Hosts must reference a booking they hold with the artist (or have at
    least one when no ``booking_id`` is sent). Artists may review peers
    without a booking.
    """
    lookup = crud.crud_performer.resolve_performer(db, artist_id)
    if isinstance(lookup, NotFound):
        raise NotFoundError("Artist not found.")
    performer_id = lookup.performer_id

    if review_in.reviewer_role not in models.REVIEWER_ROLES:
        raise PermissionDeniedError("Only hosts or artists can review artists.")

    if crud.crud_user.get_user(db, review_in.reviewer_id) is None:
        raise NotFoundError("Reviewer not found.")

    if review_in.reviewer_role == "host":
        booking = crud.crud_booking.find_booking_between(
            db, review_in.reviewer_id, performer_id, review_in.booking_id
        )
        if booking is None:
            if review_in.booking_id:
                raise PermissionDeniedError("Invalid booking reference for this review.")
            raise PermissionDeniedError("You must have a booking with this artist to review.")

    crud.crud_review.create_review(db, review_in, performer_id)
    crud.crud_performer.refresh_rating_aggregate(db, performer_id)
    db.commit()
    logger.info("Review added for performer %s by %s %s", performer_id, review_in.reviewer_role, review_in.reviewer_id)
    return {"message": "Review added and rating updated."}


@router.get("/{artist_id}/reviews")
def get_artist_reviews(artist_id: str, db: Session = Depends(get_db)):
    lookup = crud.crud_performer.resolve_performer(db, artist_id)
    if isinstance(lookup, NotFound):
        # Fall back to the raw id so an unknown artist yields an empty list
        performer_id = parse_id(artist_id) or 0
    else:
        performer_id = lookup.performer_id
    reviews = crud.crud_review.get_reviews_for_artist(db, performer_id)
    return {"reviews": [r.model_dump(mode="json") for r in reviews]}


@router.get("/{artist_id}/can-review")
def can_review(
    artist_id: str,
    host_id: Optional[int] = Query(None),
    db: Session = Depends(get_db),
):
    if not host_id:
        raise ValidationError("Host ID is required.")

    lookup = crud.crud_performer.resolve_performer(db, artist_id)
    if isinstance(lookup, NotFound):
        return {"canReview": False, "completedBookings": 0, "message": "Artist not found."}

    completed = crud.crud_booking.get_completed_bookings(db, host_id, lookup.performer_id)
    allowed = len(completed) > 0
    return {
        "canReview": allowed,
        "completedBookings": len(completed),
        "message": (
            "Host can review this artist."
            if allowed
            else "Host must complete a booking before reviewing this artist."
        ),
    }
