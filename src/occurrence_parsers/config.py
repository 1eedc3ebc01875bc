"""Application configuration via environment variables with OCCURRENCE_PARSERS_ prefix."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Occurrence parser service configuration.

    All settings are read from environment variables prefixed with
    ``OCCURRENCE_PARSERS_``.  Nothing here affects the parsing engine itself:
    the catalogs are fixed, these knobs only select which engine instance the
    outer surfaces (API, CLI) use and how they report.
    """

    model_config = SettingsConfigDict(env_prefix="OCCURRENCE_PARSERS_")

    # ── Logging ────────────────────────────────────────────────────────────
    log_level: str = "INFO"

    # ── Dates ──────────────────────────────────────────────────────────────
    # When set, 2-digit-year patterns are enabled and resolved from this year
    date_base_year: int | None = Field(default=None, ge=1)

    # ── Coordinates ────────────────────────────────────────────────────────
    coordinate_decimals: int = Field(default=5, ge=0, le=10)

    # ── API ─────────────────────────────────────────────────────────────────
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    cors_origins: list[str] = Field(default=["http://localhost:3000"])
