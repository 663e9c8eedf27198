from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from pydantic import field_validator
from typing import Annotated, Any, ClassVar, Optional
import json
from pathlib import Path
import os


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=os.getenv("ENV_FILE", ".env"),
        extra="ignore",
        case_sensitive=True,
    )

    APP_ENV: str = "development"
    PORT: int = 5000
    LOG_LEVEL: str = "INFO"

    # Database. DATABASE_URL wins over the discrete DB_* fields; when neither
    # is configured a local SQLite file is used.
    BASE_DIR: ClassVar[Path] = Path(__file__).resolve().parents[2]
    DATABASE_URL: str = ""
    DB_HOST: str = ""
    DB_USER: str = ""
    DB_PASSWORD: str = ""
    DB_NAME: str = ""
    DB_PORT: Optional[int] = None
    DB_DRIVER: str = "mysql+pymysql"
    DB_ENABLE_SSL: bool = False
    DB_POOL_SIZE: int = 10
    DB_POOL_TIMEOUT: float = 30.0
    SQLITE_PATH: str = str(BASE_DIR / "gigs.db")

    # Session tokens
    JWT_SECRET: str = "supersecretjwtkey"
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRES_MINUTES: int = 60
    BCRYPT_ROUNDS: int = 10

    # Google sign-in
    GOOGLE_CLIENT_ID: str = ""
    GOOGLE_TOKENINFO_URL: str = "https://oauth2.googleapis.com/tokeninfo"
    GOOGLE_VERIFY_TIMEOUT: float = 10.0

    CORS_ORIGINS: Annotated[list[str], NoDecode] = [
        "http://localhost:5173",
        "http://localhost:5174",
        "https://gigslk-frontend-git-main-yasassris-projects.vercel.app",
    ]

    UPLOADS_DIR: str = str(BASE_DIR / "uploads")
    RECEIPT_LOGO_PATH: str = str(BASE_DIR / "assets" / "gigs_logo.png")

    @field_validator("CORS_ORIGINS", mode="before")
    def split_origins(cls, v: Any) -> list[str]:
        """Parse comma-separated or JSON list of origins from environment."""
        if isinstance(v, str):
            try:
                parsed = json.loads(v)
                if isinstance(parsed, list):
                    return parsed
            except json.JSONDecodeError:
                pass
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    @field_validator(
        "DATABASE_URL",
        "DB_HOST",
        "DB_USER",
        "DB_NAME",
        "GOOGLE_CLIENT_ID",
        mode="before",
    )
    def strip_whitespace(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("DB_PORT", mode="before")
    def empty_port_is_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v


settings = Settings()
