# backend/gigs/api/auth.py

from fastapi import APIRouter, Depends, status
from fastapi.security import OAuth2PasswordBearer
from jose import jwt
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from datetime import datetime, timedelta
from typing import Optional
import logging

from .. import crud
from ..core.config import settings
from ..database import get_db
from ..models.user import User, UserRole
from ..schemas.user import UserCreate, UserLogin, GoogleLogin, UserSummary
from ..services.google_identity import verify_google_id_token
from ..utils.auth import get_password_hash, verify_password
from ..utils.errors import AppError, AuthError, ConflictError, ServerError, ValidationError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    expire = datetime.utcnow() + (expires_delta or timedelta(minutes=settings.JWT_EXPIRES_MINUTES))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def issue_session_token(user: User) -> str:
    """Session token scoped to the user's id and role."""
    return create_access_token({"id": user.id, "role": UserRole(user.role).value})


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(user_data: UserCreate, db: Session = Depends(get_db)):
    """Create a user and its performer/host row in one transaction."""
    if crud.crud_user.get_user_by_email(db, user_data.email):
        raise ConflictError("User with this email already exists.")

    try:
        try:
            db_user = crud.crud_user.create_user(
                db,
                email=user_data.email,
                password_hash=get_password_hash(user_data.password),
                username=user_data.username,
                role=user_data.role,
            )
        except IntegrityError:
            # Lost a race against a concurrent registration for the same email
            db.rollback()
            raise ConflictError("User with this email already exists.")
        crud.crud_user.create_role_profile(db, db_user, display_name=user_data.username)
        db.commit()
    except AppError:
        raise
    except Exception as exc:
        db.rollback()
        logger.exception("Error in register for role=%s", user_data.role.value)
        raise ServerError("Server error during registration.", exc) from exc

    logger.info("Registered user %s as %s", db_user.id, user_data.role.value)
    return {
        "message": "User registered successfully!",
        "userId": db_user.id,
        "role": user_data.role.value,
    }


@router.post("/login")
def login(credentials: UserLogin, db: Session = Depends(get_db)):
    user = crud.crud_user.get_user_by_email(db, credentials.email)
    if not user or not verify_password(credentials.password, user.password):
        raise AuthError("Invalid credentials.", status_code=status.HTTP_400_BAD_REQUEST)

    return {
        "message": "Login successful!",
        "token": issue_session_token(user),
        "user": UserSummary.model_validate(user).model_dump(exclude={"username"}, mode="json"),
    }


@router.post("/google")
async def login_with_google(body: GoogleLogin, db: Session = Depends(get_db)):
    """Exchange a Google ID token for a session token.

    Existing accounts keep their role; new ones get a password-less user row
    and a minimally seeded performer/host row.
    """
    if not body.credential:
        raise ValidationError("Missing Google credential.")
    if not settings.GOOGLE_CLIENT_ID:
        raise ServerError("Google auth not configured on server.")

    payload = await verify_google_id_token(body.credential, settings.GOOGLE_CLIENT_ID)
    email = payload.get("email")
    if not email:
        raise ValidationError("Email not available from Google.")
    username = payload.get("name") or email.split("@")[0] or "GoogleUser"
    picture = payload.get("picture")
    chosen_role = body.role if body.role in (UserRole.HOST.value, UserRole.PERFORMER.value) else UserRole.HOST.value

    try:
        user = crud.crud_user.get_user_by_email(db, email)
        if user is None:
            try:
                user = crud.crud_user.create_user(
                    db,
                    email=email,
                    password_hash=None,
                    username=username,
                    role=UserRole(chosen_role),
                )
            except IntegrityError:
                # A concurrent first login created the account
                db.rollback()
                user = crud.crud_user.get_user_by_email(db, email)
                if user is None:
                    raise
            else:
                crud.crud_user.create_role_profile(db, user, display_name=username, picture=picture)
                logger.info("Created Google account user %s as %s", user.id, chosen_role)
        db.commit()
    except Exception as exc:
        db.rollback()
        logger.exception("Error during Google login")
        raise ServerError("Server error during Google login.", exc) from exc

    return {
        "message": "Login successful!",
        "token": issue_session_token(user),
        "user": UserSummary.model_validate(user).model_dump(mode="json"),
    }
