from sqlalchemy.orm import Session
from typing import Optional

from .. import models


def get_gig(db: Session, gig_id: int) -> Optional[models.Gig]:
    return db.get(models.Gig, gig_id)


def get_gig_request(db: Session, request_id: int) -> Optional[models.GigRequest]:
    return db.get(models.GigRequest, request_id)


def create_gig_request(db: Session, gig_id: int, performer_id: int) -> models.GigRequest:
    db_obj = models.GigRequest(
        gig_id=gig_id,
        performer_id=performer_id,
        status=models.GigRequestStatus.PENDING,
    )
    db.add(db_obj)
    db.flush()
    return db_obj


def get_host_user_id(db: Session, host_id: int) -> Optional[int]:
    host = db.get(models.Host, host_id)
    return host.user_id if host else None


def transition(db: Session, gig_request: models.GigRequest, new_status: models.GigRequestStatus) -> bool:
    """Move a request to ``new_status``.

    Returns False when the request already has that status. Raises ValueError
    when it has already reached the other terminal status.
    """
    current = models.GigRequestStatus(gig_request.status)
    if current == new_status:
        return False
    if current.is_terminal:
        raise ValueError(f"Request already {current.value}.")
    gig_request.status = new_status
    db.add(gig_request)
    db.flush()
    return True
