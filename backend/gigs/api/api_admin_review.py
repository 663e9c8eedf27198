from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging

from .. import crud
from ..database import get_db
from ..utils.errors import NotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["admin"])


@router.get("/reviews")
def list_reviews(db: Session = Depends(get_db)):
    reviews = crud.crud_review.get_all_reviews(db)
    return {"reviews": [r.model_dump(mode="json") for r in reviews]}


@router.delete("/reviews/{review_id}")
def delete_review(review_id: int, db: Session = Depends(get_db)):
    review = crud.crud_review.get_review(db, review_id)
    if review is None:
        raise NotFoundError("Review not found.")
    performer_id = review.artist_id
    crud.crud_review.delete_review(db, review)
    crud.crud_performer.refresh_rating_aggregate(db, performer_id)
    db.commit()
    logger.info("Admin deleted review %s", review_id)
    return {"message": "Review deleted."}
