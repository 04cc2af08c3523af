# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# Console settings, read once from the process environment and an optional
# .env file:
#   from app.config import settings
#   settings.EVENT_IMAGES_BUCKET  # "event-images"
#
# There are no embedded fallback credentials. If the Supabase project URL or
# anon key is missing the process refuses to start.
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Booth Buzz API settings.

    Supabase connection, server, demo login and console behaviour (image
    limits, list sizes, redirect delay). Read through the module-level
    `settings` instance.
    """

    # -------------------------------------------------------------------------
    # Supabase Configuration
    # -------------------------------------------------------------------------
    # URL and anon key are required - app won't start without them

    SUPABASE_URL: str = Field(
        ...,
        description="Supabase project URL (e.g., https://xxx.supabase.co)"
    )

    SUPABASE_ANON_KEY: str = Field(
        ...,
        description="Supabase anon/public API key"
    )

    SUPABASE_SERVICE_KEY: str | None = Field(
        default=None,
        description="Supabase service_role key (bypasses RLS, enables admin auth calls)"
    )

    SUPABASE_JWT_SECRET: str | None = Field(
        default=None,
        description="Legacy HS256 JWT secret for verifying Supabase access tokens"
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging, auto-reload)"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    API_PORT: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    # -------------------------------------------------------------------------
    # Security
    # -------------------------------------------------------------------------

    SECRET_KEY: str = Field(
        default="dev-secret-key-change-in-production",
        min_length=16,
        description="Secret key for signing demo session tokens"
    )

    # CORS origins (comma-separated string that gets parsed)
    CORS_ORIGINS: str = Field(
        default="http://localhost:5173",
        description="Allowed CORS origins (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # Demo Login
    # -------------------------------------------------------------------------
    # Fixed-credential login for demos without a live Supabase Auth user.
    # Disabled unless explicitly switched on, never allowed in production.

    DEMO_LOGIN_ENABLED: bool = Field(
        default=False,
        description="Allow the fixed demo credentials to sign in"
    )

    DEMO_EMAIL: str = Field(
        default="demo@boothbuzz.com",
        description="E-mail accepted by the demo login"
    )

    DEMO_PASSWORD: str = Field(
        default="demo123",
        description="Password accepted by the demo login"
    )

    DEMO_TOKEN_TTL_MINUTES: int = Field(
        default=12 * 60,
        ge=1,
        description="Lifetime of a demo session token"
    )

    # -------------------------------------------------------------------------
    # Console Behaviour
    # -------------------------------------------------------------------------

    EVENT_IMAGES_BUCKET: str = Field(
        default="event-images",
        description="Storage bucket holding uploaded event images"
    )

    MAX_IMAGE_SIZE_MB: int = Field(
        default=5,
        ge=1,
        le=50,
        description="Maximum event image size in MB"
    )

    EVENTS_FETCH_LIMIT: int = Field(
        default=50,
        ge=1,
        le=1000,
        description="Maximum number of events loaded by the events list"
    )

    REDIRECT_DELAY_SECONDS: float = Field(
        default=2.0,
        ge=0.0,
        description="Delay before the console follows a successful form's redirect"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        # Load from .env file in project root
        env_file=".env",
        env_file_encoding="utf-8",
        # Don't fail if .env doesn't exist (useful for production where
        # env vars are set directly)
        env_ignore_empty=True,
        # Case-sensitive environment variable names
        case_sensitive=True,
    )

    @model_validator(mode="after")
    def _demo_login_not_in_production(self) -> "Settings":
        if self.DEMO_LOGIN_ENABLED and self.ENVIRONMENT == "production":
            raise ValueError("DEMO_LOGIN_ENABLED must be false in production")
        return self

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Example: "http://localhost:5173, https://admin.boothbuzz.com"
        -> ["http://localhost:5173", "https://admin.boothbuzz.com"]
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def max_image_size_bytes(self) -> int:
        """Convert MB to bytes for image size validation."""
        return self.MAX_IMAGE_SIZE_MB * 1024 * 1024

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.

    Returns:
        Settings: The application settings instance
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
