from fastapi import Depends
from jose import JWTError, jwt
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from ..core.config import settings
from ..database import get_db
from ..models.user import User, UserRole
from ..schemas.user import TokenData
from ..utils.errors import AuthError, PermissionDeniedError
from .auth import oauth2_scheme


def get_current_user(token: str = Depends(oauth2_scheme), db: Session = Depends(get_db)) -> User:
    if not token:
        raise AuthError("Not authenticated.")
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
        token_data = TokenData(id=payload.get("id"), role=payload.get("role"))
    except (JWTError, PydanticValidationError):
        raise AuthError("Invalid or expired token.")

    user = db.get(User, token_data.id)
    if user is None:
        raise AuthError("Invalid or expired token.")
    return user


def require_role(*allowed: UserRole):
    def dep(user: User = Depends(get_current_user)) -> User:
        if UserRole(user.role) not in allowed:
            raise PermissionDeniedError("Insufficient permissions.")
        return user
    return dep


get_current_performer = require_role(UserRole.PERFORMER)
get_current_host = require_role(UserRole.HOST)
