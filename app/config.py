# =============================================================================
# app/config.py - Catalog Service Settings
# =============================================================================
# Port, environment, CORS and seeding options for the album catalog, read
# from the environment or a local .env file through pydantic-settings.
#
#   from app.config import settings
#   settings.API_PORT          # 3001 unless API_PORT is set
#
# Every field has a default, so a bare checkout starts without a .env.
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Runtime options for the catalog API.

    ENVIRONMENT decides whether 500 responses carry the exception text;
    SEED_CATALOG decides whether the store starts with the fixture albums.
    """

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment (production hides internal error details)"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    API_PORT: int = Field(
        default=3001,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    # -------------------------------------------------------------------------
    # CORS
    # -------------------------------------------------------------------------

    # Comma-separated string that gets parsed; "*" allows every origin
    CORS_ORIGINS: str = Field(
        default="*",
        description="Allowed CORS origins (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # Catalog
    # -------------------------------------------------------------------------

    SEED_CATALOG: bool = Field(
        default=True,
        description="Load the built-in seed albums when the process starts"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        # Load from .env file in project root
        env_file=".env",
        env_file_encoding="utf-8",
        # Treat empty env vars as unset so defaults still apply
        env_ignore_empty=True,
        # Case-sensitive environment variable names
        case_sensitive=True,
        # Ignore unrelated keys that share the .env file
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """Split CORS_ORIGINS on commas, dropping blanks ('*' stays a single entry)."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def is_development(self) -> bool:
        """True when ENVIRONMENT is development."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """True when ENVIRONMENT is production (hides internal error text)."""
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """Build the Settings once per process; later calls reuse it."""
    return Settings()


# Shared instance imported by the app and the store wiring
settings = get_settings()
