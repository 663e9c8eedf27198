# backend/gigs/main.py

import logging
import os
from datetime import datetime

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api import (
    api_admin_review,
    api_artist_review,
    api_booking,
    api_gig_request,
    api_host_review,
    api_performer,
    auth,
)
from .core.config import settings
from .core.observability import setup_logging
from .database import Database
from .utils.errors import AppError, error_response

# Configure logging before creating any loggers
setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="Gigs.lk API", default_response_class=ORJSONResponse)


@app.on_event("startup")
def open_database() -> None:
    database = Database.from_settings(settings)
    if database.is_sqlite:
        # Local fallback; managed databases are migrated with alembic
        database.create_all()
    database.probe()
    app.state.database = database


@app.on_event("shutdown")
def close_database() -> None:
    database = getattr(app.state, "database", None)
    if database is not None:
        database.dispose()


# ─── Static uploads ─────────────────────────────────────────────────────────────
os.makedirs(settings.UPLOADS_DIR, exist_ok=True)
app.mount("/uploads", StaticFiles(directory=settings.UPLOADS_DIR), name="uploads")


@app.middleware("http")
async def catch_exceptions(request: Request, call_next):
    """Log each request and turn uncaught errors into JSON 500s."""
    logger.info(
        "%s %s - Origin: %s",
        request.method,
        request.url.path,
        request.headers.get("origin", "No Origin"),
    )
    try:
        response = await call_next(request)
    except SQLAlchemyError as exc:
        logger.exception("Database error at %s", request.url.path)
        response = ORJSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Server error", "error": str(getattr(exc, "orig", None) or exc)},
        )
    except Exception as exc:  # pragma: no cover - generic handler
        logger.exception("Unhandled error: %s", exc)
        response = ORJSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Server error"},
        )
    return response


# With credentials the allow-list cannot be "*"
ALLOWED_ORIGINS = [o.rstrip("/") for o in settings.CORS_ORIGINS if o]

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "HEAD", "PUT", "PATCH", "POST", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)
logger.info("CORS origins set to: %s", ALLOWED_ORIGINS)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error("%s at %s: %s", exc.status_code, request.url.path, exc.message)
    else:
        logger.warning("%s at %s: %s", exc.status_code, request.url.path, exc.message)
    return ORJSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Collapse pydantic errors into ``{message, field_errors}`` with a 400."""
    field_errors = {}
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        field_errors[".".join(loc) or "body"] = err.get("msg", "invalid")
    error = error_response("Invalid request.", field_errors)
    return ORJSONResponse(status_code=error.status_code, content=error.to_dict())


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # A known path with no handler for the method is still an unmatched route
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        logger.warning("404 - Route not found: %s %s", request.method, request.url.path)
        return ORJSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"message": "Not Found", "path": request.url.path, "method": request.method},
        )
    return ORJSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.get("/", response_class=PlainTextResponse)
def root():
    return "Gigs.lk Backend is running!"


@app.get("/api/test")
def api_test():
    return {"message": "Server is working!", "timestamp": datetime.utcnow().isoformat()}


app.include_router(auth.router, prefix="/api/auth", tags=["auth"])
app.include_router(api_artist_review.router, prefix="/api/artists", tags=["reviews"])
app.include_router(api_host_review.router, prefix="/api/hosts", tags=["reviews"])
app.include_router(api_admin_review.router, prefix="/api/admin", tags=["admin"])
app.include_router(api_gig_request.router, prefix="/api/gig-requests", tags=["gig-requests"])
app.include_router(api_booking.router, prefix="/api/bookings", tags=["bookings"])
app.include_router(api_performer.router, prefix="/api/performers", tags=["performers"])
