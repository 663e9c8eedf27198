from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import List, Optional, Union

from sqlalchemy import func, select, update
from sqlalchemy.orm import Session

from .. import models


@dataclass(frozen=True)
class Found:
    performer_id: int


@dataclass(frozen=True)
class NotFound:
    pass


PerformerLookup = Union[Found, NotFound]


def parse_id(id_like) -> Optional[int]:
    try:
        value = int(str(id_like).strip())
    except (TypeError, ValueError):
        return None
    return value if value > 0 else None


def resolve_performer(db: Session, id_like) -> PerformerLookup:
    """Resolve an artist identifier that may be a performer id or a user id.

    The performer id is tried first, then the owning user's id.
    """
    value = parse_id(id_like)
    if value is None:
        return NotFound()
    by_performer = db.scalar(select(models.Performer.id).where(models.Performer.id == value))
    if by_performer is not None:
        return Found(by_performer)
    by_user = db.scalar(select(models.Performer.id).where(models.Performer.user_id == value))
    if by_user is not None:
        return Found(by_user)
    return NotFound()


def get_performer(db: Session, performer_id: int) -> Optional[models.Performer]:
    return db.get(models.Performer, performer_id)


def get_performer_by_user_id(db: Session, user_id: int) -> Optional[models.Performer]:
    return db.query(models.Performer).filter(models.Performer.user_id == user_id).first()


def get_performer_user_id(db: Session, performer_id: int) -> Optional[int]:
    return db.scalar(select(models.Performer.user_id).where(models.Performer.id == performer_id))


def refresh_rating_aggregate(db: Session, performer_id: int) -> None:
    """Recompute average rating and review count in a single UPDATE."""
    reviews = models.ArtistReview
    avg_rating = (
        select(func.coalesce(func.avg(reviews.rating), 0))
        .where(reviews.artist_id == performer_id)
        .scalar_subquery()
    )
    total_reviews = (
        select(func.count(reviews.id))
        .where(reviews.artist_id == performer_id)
        .scalar_subquery()
    )
    db.execute(
        update(models.Performer)
        .where(models.Performer.id == performer_id)
        .values(average_rating=avg_rating, total_reviews=total_reviews)
        .execution_options(synchronize_session="fetch")
    )


def list_new_performers(db: Session, *, days: int = 10, limit: int = 4) -> List[models.Performer]:
    since = datetime.utcnow() - timedelta(days=days)
    return (
        db.query(models.Performer)
        .filter(models.Performer.created_at >= since)
        .order_by(models.Performer.created_at.desc(), models.Performer.id.desc())
        .limit(limit)
        .all()
    )
