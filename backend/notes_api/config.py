"""
Notes API — Application Configuration
======================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or a .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by the app factory, the health route and the entry point.
When:  Loaded once at module import time; tests build their own instances.

Environment designator:
    The deployment platform sets NODE_ENV, so that name is checked first,
    then APP_ENV, then ENVIRONMENT. Only "development" turns on verbose
    error details.
"""

from typing import List, Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for local development.
    Attributes are grouped by concern for readability.
    """

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3001, ge=1, le=65535)

    # ── Environment ───────────────────────────────────────────────────────
    environment: str = Field(
        default="development",
        validation_alias=AliasChoices("NODE_ENV", "APP_ENV", "environment"),
        description="Environment designator; 'development' enables verbose errors",
    )

    service_name: str = Field(default="Note API Backend")

    # ── Frontend ──────────────────────────────────────────────────────────
    # What: Directory holding the built frontend, served at the site root
    # Skipped silently when the directory does not exist (API-only deploys)
    static_dir: Optional[str] = Field(default="dist")

    # ── Logging ───────────────────────────────────────────────────────────
    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated origins, or "*" for any origin
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def is_development(self) -> bool:
        return self.environment.strip().lower() == "development"

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


# Singleton instance used when the app factory is not given explicit settings
settings = Settings()
