"""
Name: Application Configuration (Settings)

Responsibilities:
  - Centralized, typed configuration using pydantic-settings
  - Validate environment variables at startup
  - Provide defaults that match current behavior

Collaborators:
  - api/main.py: reads settings for CORS, pool and startup validation
  - identity/tokens.py: JWT secret, issuer, audience and lifetime
  - container.py: decides which repository backend to compose

Constraints:
  - Lives in API/infrastructure layer, NOT in domain/application
  - No business logic — pure configuration

Notes:
  - Uses pydantic-settings for env parsing and validation
  - Singleton via lru_cache for performance
  - JWT_SECRET / JWT_ISSUER / JWT_AUDIENCE have no defaults: a missing value
    fails at startup, never at request time
"""

from functools import lru_cache

from pydantic import ValidationInfo, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# R: HMAC-SHA256 needs at least a 256-bit key.
MIN_JWT_SECRET_CHARS = 32

# R: widths of tasks.title / tasks.description (migration 001_foundation).
TASK_COLUMN_CHARS = {"max_title_chars": 200, "max_description_chars": 1000}


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        database_url: PostgreSQL connection string
        app_env: Application environment (development/test/production)
        allowed_origins: Comma-separated CORS origins
        cors_allow_credentials: Allow cookies cross-origin (default: False)
        max_body_bytes: Max request body size (default: 1MB)
        jwt_secret: Symmetric secret used to sign and verify tokens
        jwt_issuer: Issuer claim written and required on every token
        jwt_audience: Audience claim written and required on every token
        jwt_expiry_minutes: Token lifetime in minutes (default: 60)
        max_title_chars: Maximum task title length (default: 200)
        max_description_chars: Maximum task description length (default: 1000)
        min_password_chars: Minimum password length at registration (default: 6)
        log_level: Root log level (default: INFO)
        log_json: Emit JSON logs (default: True)
        seed_default_users: Create the default admin/user accounts on startup
    """

    # Required (no defaults)
    database_url: str

    # Environment
    app_env: str = "development"

    # CORS configuration
    allowed_origins: str = "http://localhost:5173"
    cors_allow_credentials: bool = False

    # Security - Hardening
    max_body_bytes: int = 1024 * 1024  # 1MB

    # Security - JWT (required, startup-fatal when missing)
    jwt_secret: str
    jwt_issuer: str
    jwt_audience: str
    jwt_expiry_minutes: int = 60

    # Task limits
    max_title_chars: int = 200
    max_description_chars: int = 1000

    # Registration
    min_password_chars: int = 6

    # Database - Connection Pool
    db_pool_min_size: int = 1
    db_pool_max_size: int = 10
    db_statement_timeout_ms: int = 30000  # 30 seconds

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # Seed data (admin + regular user, only when the store is empty)
    seed_default_users: bool = False
    seed_admin_email: str = "admin@taskmanager.com"
    seed_admin_password: str = "Admin@123"
    seed_user_email: str = "user@taskmanager.com"
    seed_user_password: str = "User@123"

    @field_validator("jwt_secret")
    @classmethod
    def jwt_secret_must_be_long_enough(cls, v: str) -> str:
        if len((v or "").strip()) < MIN_JWT_SECRET_CHARS:
            raise ValueError(
                f"jwt_secret must be at least {MIN_JWT_SECRET_CHARS} characters"
            )
        return v

    @field_validator("jwt_issuer", "jwt_audience")
    @classmethod
    def jwt_claim_must_not_be_blank(cls, v: str) -> str:
        if not (v or "").strip():
            raise ValueError("jwt_issuer and jwt_audience must not be empty")
        return v.strip()

    @field_validator("jwt_expiry_minutes")
    @classmethod
    def jwt_expiry_must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("jwt_expiry_minutes must be greater than 0")
        return v

    @field_validator("max_title_chars", "max_description_chars", "min_password_chars")
    @classmethod
    def limits_must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("limits must be greater than 0")
        return v

    @field_validator("max_title_chars", "max_description_chars")
    @classmethod
    def limits_must_fit_columns(cls, v: int, info: ValidationInfo) -> int:
        column = TASK_COLUMN_CHARS[info.field_name]
        if v > column:
            raise ValueError(
                f"{info.field_name} cannot exceed the column width ({column})"
            )
        return v

    def get_allowed_origins_list(self) -> list[str]:
        """Parse comma-separated origins into a list."""
        return [
            origin.strip()
            for origin in self.allowed_origins.split(",")
            if origin.strip()
        ]

    @model_validator(mode="after")
    def validate_security_requirements(self):
        if not self.is_production():
            return self

        insecure_markers = ("dev-secret", "changeme", "change-me", "password")
        secret = self.jwt_secret.strip().lower()
        if any(marker in secret for marker in insecure_markers):
            raise ValueError(
                "JWT_SECRET must be set to a strong, non-default value in production"
            )
        if self.seed_default_users:
            raise ValueError("SEED_DEFAULT_USERS must be false in production")
        return self

    def is_production(self) -> bool:
        return self.app_env.strip().lower() == "production"

    def is_test(self) -> bool:
        return self.app_env.strip().lower() in {"test", "testing", "ci"}

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get singleton Settings instance.

    Raises:
        ValidationError: If required env vars are missing or invalid
    """
    return Settings()
