from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from .. import models, schemas


def create_booking(
    db: Session, booking_in: schemas.BookingCreate, performer_id: int
) -> models.Booking:
    db_booking = models.Booking(
        artist_id=performer_id,
        host_id=booking_in.host_id,
        event_date=booking_in.event_date,
        event_time=booking_in.event_time,
        event_location=booking_in.event_location,
        notes=booking_in.notes,
        price=booking_in.price,
        payment_method=booking_in.payment_method,
    )
    db.add(db_booking)
    db.flush()
    return db_booking


def get_booking(db: Session, booking_id: int) -> Optional[models.Booking]:
    return db.get(models.Booking, booking_id)


def find_booking_between(
    db: Session,
    host_id: int,
    performer_id: int,
    booking_id: Optional[int] = None,
) -> Optional[models.Booking]:
    """Any booking between the host and performer, or the one with ``booking_id``."""
    query = db.query(models.Booking).filter(
        models.Booking.host_id == host_id,
        models.Booking.artist_id == performer_id,
    )
    if booking_id:
        query = query.filter(models.Booking.id == booking_id)
    return query.first()


def get_completed_bookings(
    db: Session, host_id: int, performer_id: int, today: Optional[date] = None
) -> List[models.Booking]:
    """Bookings between the pair whose event date has passed."""
    today = today or date.today()
    return (
        db.query(models.Booking)
        .filter(
            models.Booking.host_id == host_id,
            models.Booking.artist_id == performer_id,
            models.Booking.event_date < today,
        )
        .all()
    )
