from .errors import (
    AppError,
    AuthError,
    ConflictError,
    NotFoundError,
    PermissionDeniedError,
    ServerError,
    ValidationError,
    error_response,
)
from .auth import normalize_email
