from dotenv import load_dotenv

# Load environment variables before settings are read
load_dotenv()

from fastapi.openapi.utils import get_openapi  # noqa: E402

from gigs.core.config import settings  # noqa: E402
from gigs.main import app  # noqa: E402


def custom_openapi() -> dict:
    """Return OpenAPI schema with project metadata."""
    if app.openapi_schema:
        return app.openapi_schema
    app.openapi_schema = get_openapi(
        title="Gigs.lk API",
        version="1.0.0",
        description="API for artist reviews, gig requests, bookings and receipts.",
        routes=app.routes,
    )
    return app.openapi_schema


app.openapi = custom_openapi

if __name__ == "__main__":
    import uvicorn

    uvicorn.run("gigs.main:app", host="0.0.0.0", port=settings.PORT, reload=settings.APP_ENV == "development")
