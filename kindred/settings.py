"""
kindred.settings
================

Configuration settings for the kindred domain model.

Defaults can be overridden via environment variables (``KINDRED_*``) or a
``.env`` file in the working directory.  Library code reads
:pydata:`settings` at the point of use, so tests may monkeypatch its
attributes.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# ---------------------------------------------------------------------------
# Base directories
# ---------------------------------------------------------------------------
BASE_DIR = Path(__file__).resolve().parent.parent

# Locale settings
# ---------------------------------------------------------------------------
LOCAL_COUNTRY = os.environ.get("KINDRED_LOCAL_COUNTRY", "UNITED_STATES_OF_AMERICA")
LENGTH_UNIT = os.environ.get("KINDRED_LENGTH_UNIT", "METER")

# Logging settings
# ---------------------------------------------------------------------------
LOG_LEVEL = os.environ.get("KINDRED_LOG_LEVEL", "WARNING")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


# ---------------------------------------------------------------------------
# Pydantic settings model
# ---------------------------------------------------------------------------
class Settings(BaseSettings):
    """Pydantic model for library settings, loaded from environment variables."""

    local_country: str = Field(
        default=LOCAL_COUNTRY,
        description="Country name (e.g. UNITED_STATES_OF_AMERICA) used when an address has no country",
    )
    length_unit: str = Field(
        default=LENGTH_UNIT,
        description="Default LengthUnit name for distances and elevations",
    )
    log_level: str = Field(default=LOG_LEVEL, description="Log level used by the command line")

    model_config = SettingsConfigDict(
        env_prefix="KINDRED_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


# Initialize settings
settings = Settings()
