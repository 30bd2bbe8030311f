"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. SECRET_KEY is validated at load time; DATABASE_URL is
checked lazily when the first session is requested.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env."""

    # App
    app_name: str = "backoffice"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database (SQLAlchemy async URL, e.g. postgresql+asyncpg://...)
    database_url: str = ""
    database_echo: bool = False
    db_pool_size: int | None = None
    db_max_overflow: int | None = None

    # Security: SECRET_KEY signs the back-office session cookie.
    secret_key: SecretStr = SecretStr("")
    session_cookie_name: str = "backoffice_session"
    session_cookie_secure: bool = True
    session_lifetime_seconds: int = 14 * 24 * 3600  # "stay logged in"
    session_idle_seconds: int = 8 * 3600

    # Admin routing
    admin_path_prefix: str = "/admin"
    default_landing_tab: str = "dashboard"

    # Redis Cache
    redis_enabled: bool = True
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    redis_password: SecretStr | None = None
    cache_ttl_employees: int = 3600
    # After a failed connect, operations retry connecting at most this often.
    redis_reconnect_interval_seconds: int = 30

    # Login throttling
    login_rate_limit: str = "10/minute"
    login_attempts_per_email: int = 20
    login_attempt_window_seconds: int = 60

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_required(self) -> "Settings":
        """Validate SECRET_KEY and the admin path prefix."""
        if not self.secret_key.get_secret_value():
            raise ValueError(
                "SECRET_KEY is required. Generate with: openssl rand -hex 32."
            )
        if not self.admin_path_prefix.startswith("/") or self.admin_path_prefix.endswith("/"):
            raise ValueError(
                f"admin_path_prefix must start with '/' and not end with '/', got: {self.admin_path_prefix!r}"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
