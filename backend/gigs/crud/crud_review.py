from sqlalchemy.orm import Session
from typing import List, Optional

from .. import models, schemas

Review = models.ArtistReview


def create_review(
    db: Session, review_in: schemas.ArtistReviewCreate, performer_id: int
) -> models.ArtistReview:
    db_review = Review(
        artist_id=performer_id,
        reviewer_id=review_in.reviewer_id,
        reviewer_role=review_in.reviewer_role,
        rating=review_in.rating,
        review_text=review_in.review_text,
    )
    db.add(db_review)
    db.flush()
    return db_review


def get_review(db: Session, review_id: int) -> Optional[models.ArtistReview]:
    return db.get(Review, review_id)


def get_host_review(db: Session, host_id: int, review_id: int) -> Optional[models.ArtistReview]:
    """Return the review only when it was written by ``host_id`` as a host."""
    return (
        db.query(Review)
        .filter(
            Review.id == review_id,
            Review.reviewer_id == host_id,
            Review.reviewer_role == "host",
        )
        .first()
    )


def get_reviews_for_artist(db: Session, performer_id: int) -> List[schemas.ArtistReviewRead]:
    rows = (
        db.query(Review, models.User.username)
        .join(models.User, Review.reviewer_id == models.User.id)
        .filter(Review.artist_id == performer_id)
        .order_by(Review.created_at.desc(), Review.id.desc())
        .all()
    )
    items = []
    for review, reviewer_name in rows:
        item = schemas.ArtistReviewRead.model_validate(review)
        item.reviewer_name = reviewer_name
        items.append(item)
    return items


def get_reviews_by_host(db: Session, host_id: int) -> List[schemas.HostReviewRead]:
    rows = (
        db.query(
            Review,
            models.User.username,
            models.Performer.stage_name,
            models.Performer.profile_picture_url,
        )
        .join(models.User, Review.reviewer_id == models.User.id)
        .join(models.Performer, Review.artist_id == models.Performer.id)
        .filter(Review.reviewer_id == host_id, Review.reviewer_role == "host")
        .order_by(Review.created_at.desc(), Review.id.desc())
        .all()
    )
    items = []
    for review, reviewer_name, artist_name, artist_avatar in rows:
        item = schemas.HostReviewRead.model_validate(review)
        item.reviewer_name = reviewer_name
        item.artist_name = artist_name
        item.artist_avatar = artist_avatar
        items.append(item)
    return items


def get_all_reviews(db: Session) -> List[schemas.AdminReviewRead]:
    rows = (
        db.query(Review, models.User.username, models.Performer.stage_name)
        .outerjoin(models.User, Review.reviewer_id == models.User.id)
        .outerjoin(models.Performer, Review.artist_id == models.Performer.id)
        .order_by(Review.created_at.desc(), Review.id.desc())
        .all()
    )
    return [
        schemas.AdminReviewRead(
            id=review.id,
            reviewer_id=review.reviewer_id,
            reviewer_role=review.reviewer_role,
            target_id=review.artist_id,
            rating=review.rating,
            comment=review.review_text,
            created_at=review.created_at,
            reviewer_name=reviewer_name,
            target_name=target_name,
        )
        for review, reviewer_name, target_name in rows
    ]


def update_review(db: Session, review: models.ArtistReview, rating: int, text: Optional[str]) -> models.ArtistReview:
    review.rating = rating
    review.review_text = text
    db.add(review)
    db.flush()
    return review


def delete_review(db: Session, review: models.ArtistReview) -> None:
    db.delete(review)
    db.flush()
