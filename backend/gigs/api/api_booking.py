from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session
from typing import Optional
import logging

from .. import crud, schemas
from ..core.config import settings
from ..crud.crud_performer import NotFound
from ..database import get_db
from ..models import NotificationType
from ..services.receipt_pdf import ReceiptParty, generate_booking_receipt
from ..utils.errors import NotFoundError, ServerError, ValidationError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["bookings"])


@router.get("/notifications")
def booking_notifications(user_id: Optional[int] = Query(None)):
    if not user_id:
        raise ValidationError("Missing user_id")
    return []


@router.get("/artist-monthly-stats")
def artist_monthly_stats():
    return {"stats": []}


@router.post("", status_code=status.HTTP_201_CREATED)
def create_booking(booking_in: schemas.BookingCreate, db: Session = Depends(get_db)):
    lookup = crud.crud_performer.resolve_performer(db, booking_in.artist_id)
    if isinstance(lookup, NotFound):
        raise NotFoundError("Artist not found.")
    performer_id = lookup.performer_id
    if crud.crud_user.get_user(db, booking_in.host_id) is None:
        raise NotFoundError("Host not found.")

    booking = crud.crud_booking.create_booking(db, booking_in, performer_id)
    db.commit()
    logger.info("Booking %s created for performer %s by host %s", booking.id, performer_id, booking_in.host_id)

    # The booking stands even if the notification cannot be written
    try:
        artist_user_id = crud.crud_performer.get_performer_user_id(db, performer_id)
        if artist_user_id is not None:
            text = (
                f"You have been booked by Host #{booking_in.host_id} for "
                f"{booking_in.event_location} on {booking_in.event_date.isoformat()} "
                f"at {booking_in.event_time}."
            )
            crud.crud_notification.create_notification(db, artist_user_id, NotificationType.BOOKING, text)
            db.commit()
    except Exception as exc:
        db.rollback()
        logger.warning("Booking %s notification insert failed: %s", booking.id, exc)

    return {"message": "Booking created", "bookingId": booking.id}


@router.get("/{booking_id}/receipt")
def booking_receipt(booking_id: int, db: Session = Depends(get_db)):
    if booking_id <= 0:
        raise ValidationError("Invalid booking id")
    booking = crud.crud_booking.get_booking(db, booking_id)
    if booking is None:
        raise NotFoundError("Booking not found")

    host_user = crud.crud_user.get_user(db, booking.host_id)
    host = ReceiptParty(name=host_user.username, email=host_user.email) if host_user else None
    performer = crud.crud_performer.get_performer(db, booking.artist_id)
    artist = None
    if performer is not None:
        artist = ReceiptParty(
            name=performer.stage_name or performer.full_name,
            email=performer.user.email if performer.user else None,
        )

    try:
        pdf = generate_booking_receipt(booking, host, artist, logo_path=settings.RECEIPT_LOGO_PATH)
    except Exception as exc:
        logger.exception("Receipt generation failed for booking %s", booking_id)
        raise ServerError("Failed to generate receipt") from exc

    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="gigs_receipt_{booking_id}.pdf"'},
    )
