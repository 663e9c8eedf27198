from typing import Any, Dict, Optional
from fastapi import status
import logging

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base for errors rendered as ``{"message": ..., **extra}`` JSON."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        **extra: Any,
    ) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.extra = extra

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message, **self.extra}


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(AppError):
    status_code = status.HTTP_409_CONFLICT


class AuthError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class PermissionDeniedError(AppError):
    status_code = status.HTTP_403_FORBIDDEN


class ServerError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        extra = {"error": str(cause)} if cause is not None else {}
        super().__init__(message, **extra)


def error_response(
    message: str,
    field_errors: Dict[str, str],
    code: int = status.HTTP_400_BAD_REQUEST,
) -> AppError:
    """Return a field-level validation error and log details."""
    logger.error("%s %s", message, field_errors)
    if code == status.HTTP_400_BAD_REQUEST:
        return ValidationError(message, field_errors=field_errors)
    return AppError(message, status_code=code, field_errors=field_errors)
