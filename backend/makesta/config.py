"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Secrets come from environment variables; the development signing key
      is refused unless the database is a local SQLite file
    - get_settings() is cached (lru_cache) — single instance per process
    - Settings are read once at startup and handed to constructors explicitly

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works out-of-the-box with docker-compose
"""

from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEV_JWT_SECRET = "makesta-dev-secret-change-me"


def asyncpg_url(url: str) -> str:
    """Rewrite a plain postgresql:// URL for the asyncpg driver."""
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://makesta:makesta@db:5432/makesta"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        return asyncpg_url(v) if isinstance(v, str) else v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Tokens — rotating jwt_secret invalidates every outstanding token
    jwt_secret: str = DEV_JWT_SECRET
    jwt_algorithm: str = "HS256"
    jwt_ttl_hours: int = 24

    # Material uploads
    upload_dir: str = "uploads"
    max_upload_bytes: int = 10 * 1024 * 1024

    # Attendance policy: accept records on sessions that were already closed
    attendance_allow_closed_sessions: bool = True

    # Organizer bootstrap (seed account created on startup when set)
    bootstrap_organizer_username: str | None = None
    bootstrap_organizer_password: str | None = None
    bootstrap_organizer_email: str = "organizer@makesta.local"
    bootstrap_organizer_full_name: str = "Makesta Organizer"
    bootstrap_organizer_phone: str = "0000000000"

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Server (makesta-api console script)
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @model_validator(mode="after")
    def require_real_secret(self) -> "Settings":
        if not self.jwt_secret:
            raise ValueError("JWT_SECRET must not be empty")
        if self.jwt_secret == DEV_JWT_SECRET and not self.database_url.startswith("sqlite"):
            raise ValueError("JWT_SECRET must be set when using a non-SQLite database")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
