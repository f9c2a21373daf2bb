"""
Album Catalog API - Application Configuration
=============================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or a .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by main.py; tests build their own Settings instances and pass
       them to create_app().
When:  Loaded once at module import time.
"""

from typing import List, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for local development.
    Attributes are grouped by concern for readability.
    """

    # ── Application ───────────────────────────────────────────────────────
    app_name: str = Field(default="Album Catalog API")

    # What: Exposes /docs, /redoc and /openapi.json
    # Off by default so that only the registered API paths answer requests.
    enable_docs: bool = Field(default=False)

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="localhost")
    backend_port: int = Field(default=8080, ge=1024, le=65535)

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

    # ── HTTP ──────────────────────────────────────────────────────────────
    # Format: Comma-separated origins, or "*" for any origin
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # Responses smaller than this are sent uncompressed
    gzip_minimum_size: int = Field(default=500, ge=0)

    # ── Error Bodies ──────────────────────────────────────────────────────
    # What: How framework-level errors (404, 500) are rendered.
    #   json:  {"error": ..., "message": ..., "request_id": ...}
    #   plain: text/plain bodies pinned to the two texts below
    # The plain defaults match the bodies existing clients of the service
    # were written against.
    error_body_style: Literal["json", "plain"] = Field(default="json")
    not_found_text: str = Field(default="404 page not found")
    server_error_text: str = Field(default="Internal Server Error")

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


# Singleton instance used by the module-level app in main.py
settings = Settings()
