from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging

from .. import crud, schemas
from ..database import get_db
from ..utils.errors import NotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["reviews"])


def _owned_review_or_404(db: Session, host_id: int, review_id: int):
    review = crud.crud_review.get_host_review(db, host_id, review_id)
    if review is None:
        raise NotFoundError("Review not found or not owned by host.")
    return review


@router.get("/{host_id}/reviews")
def list_host_reviews(host_id: int, db: Session = Depends(get_db)):
    reviews = crud.crud_review.get_reviews_by_host(db, host_id)
    return {"reviews": [r.model_dump(mode="json") for r in reviews]}


@router.put("/{host_id}/reviews/{review_id}")
def update_host_review(
    host_id: int,
    review_id: int,
    review_in: schemas.HostReviewUpdate,
    db: Session = Depends(get_db),
):
    review = _owned_review_or_404(db, host_id, review_id)
    crud.crud_review.update_review(db, review, review_in.rating, review_in.comment)
    crud.crud_performer.refresh_rating_aggregate(db, review.artist_id)
    db.commit()
    return {"message": "Review updated."}


@router.delete("/{host_id}/reviews/{review_id}")
def delete_host_review(host_id: int, review_id: int, db: Session = Depends(get_db)):
    review = _owned_review_or_404(db, host_id, review_id)
    performer_id = review.artist_id
    crud.crud_review.delete_review(db, review)
    crud.crud_performer.refresh_rating_aggregate(db, performer_id)
    db.commit()
    logger.info("Host %s deleted review %s", host_id, review_id)
    return {"message": "Review deleted."}
