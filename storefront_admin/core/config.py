"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Required fields (JWT_SECRET) and search tuning ranges
are validated at load time.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings are optional with defaults except jwt_secret, which is
    validated in validate_required_and_search. database_url may be empty:
    the service then starts, but any endpoint that needs the database
    answers 503 (SqlNotConfiguredException).
    """

    # App
    app_name: str = "storefront-admin"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database (hosted Postgres; schema owned by the hosting platform)
    database_url: str = ""
    database_echo: bool = False
    db_pool_size: int | None = None
    db_max_overflow: int | None = None
    db_command_timeout: int | None = None

    # Auth: tokens are issued by the hosted auth service, we only verify them
    jwt_secret: SecretStr = SecretStr("")
    jwt_algorithm: str = "HS256"
    jwt_audience: str | None = "authenticated"

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:8080"

    # Request / middleware
    request_id_header: str = "X-Request-ID"

    # Navigation targets handed back to the admin front end
    admin_base_path: str = "/admin"

    # Global search tuning
    search_threshold: float = 0.3
    search_distance: int = 100
    search_result_limit: int = 8
    search_min_query_length: int = 2
    search_rate_limit: str = "60/minute"

    # OpenTelemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0
    telemetry_environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_required_and_search(self) -> "Settings":
        """Validate required env and search tuning ranges."""
        if not self.jwt_secret.get_secret_value():
            raise ValueError(
                "JWT_SECRET is required. Use the JWT secret of the hosted auth "
                "service (project settings → API → JWT secret)."
            )
        if not 0.0 <= self.search_threshold <= 1.0:
            raise ValueError(
                f"SEARCH_THRESHOLD must be between 0 and 1, got: {self.search_threshold}"
            )
        if self.search_distance <= 0:
            raise ValueError(
                f"SEARCH_DISTANCE must be positive, got: {self.search_distance}"
            )
        if self.search_result_limit < 1:
            raise ValueError(
                f"SEARCH_RESULT_LIMIT must be at least 1, got: {self.search_result_limit}"
            )
        if self.search_min_query_length < 1:
            raise ValueError(
                "SEARCH_MIN_QUERY_LENGTH must be at least 1, "
                f"got: {self.search_min_query_length}"
            )
        if not self.admin_base_path.startswith("/"):
            raise ValueError(
                f"ADMIN_BASE_PATH must start with '/', got: {self.admin_base_path!r}"
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
