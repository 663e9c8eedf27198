from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging

from .. import crud, models, schemas
from ..database import get_db
from ..models import GigRequestStatus, NotificationType
from ..utils.errors import ConflictError, NotFoundError, PermissionDeniedError, ServerError
from .dependencies import get_current_host, get_current_performer

logger = logging.getLogger(__name__)

router = APIRouter(tags=["gig-requests"])


def _owned_request(db: Session, request_id: int, host_user: models.User) -> models.GigRequest:
    gig_request = crud.crud_gig_request.get_gig_request(db, request_id)
    if gig_request is None:
        raise NotFoundError("Request not found")
    host_user_id = crud.crud_gig_request.get_host_user_id(db, gig_request.gig.host_id)
    if host_user_id != host_user.id:
        raise PermissionDeniedError("Only the gig's host can respond to this request.")
    return gig_request


def _apply_status(db: Session, gig_request: models.GigRequest, new_status: GigRequestStatus) -> bool:
    try:
        return crud.crud_gig_request.transition(db, gig_request, new_status)
    except ValueError as exc:
        raise ConflictError(str(exc))


def _booking_summary(gig: models.Gig) -> str:
    when = gig.event_date.isoformat() if gig.event_date else ""
    if gig.event_time:
        when = f"{when} at {gig.event_time}"
    return (
        "Booking Confirmed!\n"
        f"Event: {gig.title}\n"
        f"Date: {when}\n"
        f"Venue: {gig.event_location or ''}\n"
        f"Budget: Rs. {gig.budget_min} - {gig.budget_max}\n"
        f"Details: {gig.description or ''}"
    )


@router.post("/{gig_id}", status_code=status.HTTP_201_CREATED)
def request_gig(
    gig_id: int,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_performer),
):
    gig = crud.crud_gig_request.get_gig(db, gig_id)
    if gig is None:
        raise NotFoundError("Gig not found")
    performer = crud.crud_performer.get_performer_by_user_id(db, current_user.id)
    if performer is None:
        raise NotFoundError("Performer not found")
    host_user_id = crud.crud_gig_request.get_host_user_id(db, gig.host_id)
    if host_user_id is None:
        raise NotFoundError("Host not found")

    gig_request = crud.crud_gig_request.create_gig_request(db, gig.id, performer.id)
    text = f"{current_user.username} requested to join your gig '{gig.title}'. Accept or reject?"
    crud.crud_notification.create_notification(
        db, host_user_id, NotificationType.GIG_REQUEST, text, request_id=gig_request.id
    )
    crud.crud_message.create_message(db, current_user.id, host_user_id, text)
    db.commit()

    logger.info("Performer %s requested gig %s (request %s)", performer.id, gig.id, gig_request.id)
    return {"message": "Request sent and host notified.", "requestId": gig_request.id}


@router.patch("/{request_id}")
def respond_to_request(
    request_id: int,
    body: schemas.GigRequestResponse,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_host),
):
    gig_request = _owned_request(db, request_id, current_user)
    new_status = GigRequestStatus(body.response)
    _apply_status(db, gig_request, new_status)

    if new_status is GigRequestStatus.ACCEPTED:
        performer_user_id = crud.crud_performer.get_performer_user_id(db, gig_request.performer_id)
        if performer_user_id is not None:
            crud.crud_notification.create_notification(
                db,
                performer_user_id,
                NotificationType.GIG_REQUEST,
                f"Host confirmed you for the gig '{gig_request.gig.title}'.",
                request_id=gig_request.id,
            )
    db.commit()
    return {"message": "Response recorded."}


@router.post("/{request_id}/accept")
def accept_request(
    request_id: int,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_host),
):
    """Accept a request and send the booking summary to both parties."""
    gig_request = _owned_request(db, request_id, current_user)
    changed = _apply_status(db, gig_request, GigRequestStatus.ACCEPTED)
    if not changed:
        logger.info("Request %s already accepted; re-sending confirmation", request_id)

    performer_user_id = crud.crud_performer.get_performer_user_id(db, gig_request.performer_id)
    if performer_user_id is None:
        raise ServerError("Performer user_id not found.")

    summary = _booking_summary(gig_request.gig)
    crud.crud_message.create_message(db, current_user.id, performer_user_id, summary)
    crud.crud_message.create_message(db, performer_user_id, current_user.id, summary)
    crud.crud_notification.create_notification(
        db,
        performer_user_id,
        NotificationType.BOOKING,
        "Your request was accepted! See chat for booking details.",
        request_id=gig_request.id,
    )
    db.commit()
    return {"success": True, "message": "Request accepted, chat and notification sent."}
