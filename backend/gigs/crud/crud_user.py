from sqlalchemy.orm import Session
from typing import Optional

from .. import models
from ..utils.auth import normalize_email


def get_user(db: Session, user_id: int) -> Optional[models.User]:
    return db.get(models.User, user_id)


def get_user_by_email(db: Session, email: str) -> Optional[models.User]:
    return (
        db.query(models.User)
        .filter(models.User.email == normalize_email(email))
        .first()
    )


def create_user(
    db: Session,
    *,
    email: str,
    password_hash: Optional[str],
    username: str,
    role: models.UserRole,
) -> models.User:
    """Stage a user row and flush so its id is available to the caller."""
    db_user = models.User(
        email=normalize_email(email),
        password=password_hash,
        username=username,
        role=role,
    )
    db.add(db_user)
    db.flush()
    return db_user


def create_role_profile(
    db: Session,
    user: models.User,
    *,
    display_name: str,
    picture: Optional[str] = None,
):
    """Stage the performer or host extension row for ``user``."""
    if user.role == models.UserRole.PERFORMER:
        profile = models.Performer(
            user_id=user.id,
            stage_name=display_name,
            location=None,
            profile_picture_url=picture,
        )
    else:
        profile = models.Host(
            user_id=user.id,
            company_organization=display_name,
            location=None,
            profile_picture_url=picture,
        )
    db.add(profile)
    db.flush()
    return profile
