"""
Application settings loaded from environment variables.
It centralizes cross-cutting concerns like settings and logging used by the listing screens.
Keeping these helpers isolated reduces duplication and keeps the query core focused on composition rules.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Final

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, ValidationError

PROJECT_ROOT: Final[Path] = Path(__file__).resolve().parents[2]

REQUIRED_ENV_VARS: Final[tuple[str, ...]] = (
    "PROJECT_NAME",
    "ENV",
    "LOG_LEVEL",
)


class Settings(BaseModel):
    """Typed runtime configuration."""

    model_config = ConfigDict(extra="ignore")

    PROJECT_NAME: str
    ENV: str
    LOG_LEVEL: str
    LISTING_SCREENS_PATH: str = str(PROJECT_ROOT / "configs" / "listing_screens.yaml")


def load_settings(*, load_env: bool = True) -> Settings:
    """Load and validate environment settings from `.env` and process environment."""

    if load_env:
        load_dotenv()

    missing = [key for key in REQUIRED_ENV_VARS if not os.getenv(key)]
    if missing:
        missing_values = ", ".join(sorted(missing))
        raise RuntimeError(
            f"Missing required environment variables: {missing_values}. "
            "Populate these values in `.env` before using the listing screens."
        )

    # Blank optional values fall back to the model defaults.
    environment = {key: value for key, value in os.environ.items() if value.strip() != ""}
    try:
        return Settings.model_validate(environment)
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached accessor for application settings."""

    return load_settings()
