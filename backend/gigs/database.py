import logging
import re
from contextlib import contextmanager
from typing import Iterator, Optional

from fastapi import Request
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import URL, Engine, make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from .core.config import Settings
from .core.observability import mask_secret

logger = logging.getLogger(__name__)

Base = declarative_base()

_URL_SSL_RE = re.compile(r"[?&](ssl|sslmode)=?(true|require)", re.IGNORECASE)


def _ssl_enabled(settings: Settings) -> bool:
    if settings.DB_ENABLE_SSL:
        return True
    return bool(settings.DATABASE_URL and _URL_SSL_RE.search(settings.DATABASE_URL))


def build_database_url(settings: Settings) -> str:
    """Return the SQLAlchemy URL for the configured database."""
    if settings.DATABASE_URL:
        return settings.DATABASE_URL
    if settings.DB_HOST:
        return URL.create(
            settings.DB_DRIVER,
            username=settings.DB_USER or None,
            password=settings.DB_PASSWORD or None,
            host=settings.DB_HOST,
            port=settings.DB_PORT,
            database=settings.DB_NAME or None,
        ).render_as_string(hide_password=False)
    return f"sqlite:///{settings.SQLITE_PATH}"


def describe_database_config(settings: Settings) -> dict:
    """Effective connection config with credentials masked, for logging."""
    ssl = _ssl_enabled(settings)
    if settings.DATABASE_URL:
        return {"via": "DATABASE_URL", "ssl": ssl}
    if settings.DB_HOST:
        return {
            "via": "FIELDS",
            "host": settings.DB_HOST,
            "port": settings.DB_PORT,
            "user": mask_secret(settings.DB_USER),
            "database": settings.DB_NAME,
            "ssl": ssl,
        }
    return {"via": "SQLITE", "path": settings.SQLITE_PATH, "ssl": False}


def _ssl_connect_args(drivername: str) -> dict:
    if drivername.startswith("mysql"):
        return {"ssl": {"check_hostname": True}}
    if drivername.startswith("postgresql"):
        return {"sslmode": "require"}
    return {}


class Database:
    """Engine plus session factory for one application process.

    Created once at startup and disposed on shutdown, which drains the pool.
    """

    def __init__(
        self,
        url: str,
        *,
        pool_size: int = 10,
        pool_timeout: float = 30.0,
        ssl: bool = False,
    ) -> None:
        self.url = url
        drivername = make_url(url).drivername
        self.is_sqlite = drivername.startswith("sqlite")
        if self.is_sqlite:
            kwargs = {"connect_args": {"check_same_thread": False}}
            if ":memory:" in url or url.rstrip("/") == "sqlite:":
                kwargs["poolclass"] = StaticPool
        else:
            kwargs = {
                "pool_pre_ping": True,
                "pool_size": pool_size,
                "max_overflow": 0,
                "pool_timeout": pool_timeout,
                "pool_recycle": 300,
                # DATABASE_URL carries its own ssl query parameters
                "connect_args": _ssl_connect_args(drivername) if ssl else {},
            }
        self.engine: Engine = create_engine(url, **kwargs)
        if self.is_sqlite:
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)
        self.SessionLocal = sessionmaker(
            bind=self.engine, autocommit=False, autoflush=False, expire_on_commit=False
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        logger.info("DB connection config (masked): %s", describe_database_config(settings))
        return cls(
            build_database_url(settings),
            pool_size=settings.DB_POOL_SIZE,
            pool_timeout=settings.DB_POOL_TIMEOUT,
            ssl=_ssl_enabled(settings) and not settings.DATABASE_URL,
        )

    def create_all(self) -> None:
        from . import models  # noqa: F401  registers tables on Base.metadata

        Base.metadata.create_all(self.engine)

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Provide a short-lived session with guaranteed close."""
        db = self.SessionLocal()
        try:
            yield db
        finally:
            db.close()

    def probe(self) -> bool:
        """Check connectivity once; failures are logged, never raised."""
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except Exception as exc:
            logger.error("Error connecting to the database: %s", exc)
            logger.warning("Server will continue running without database connection")
            return False
        logger.info("Successfully connected to the database!")
        return True

    def dispose(self) -> None:
        self.engine.dispose()
        logger.info("Database pool disposed")


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


# Dependency
def get_db(request: Request) -> Iterator[Session]:
    database: Optional[Database] = getattr(request.app.state, "database", None)
    if database is None:
        raise RuntimeError("Database is not initialised; application startup did not run")
    db = database.SessionLocal()
    try:
        yield db
    finally:
        db.close()
