"""
Logging configuration helpers.
Query core modules log through the shared `listing` logger; this module decides where those records go.
"""

from __future__ import annotations

import logging

from library_listing.common.settings import get_settings

LISTING_LOGGER_NAME = "listing"
_LOGGING_CONFIGURED = False


def _resolve_level(level_name: str) -> int:
    level = logging.getLevelName(level_name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(*, level_override: str | None = None) -> None:
    """Configure process-wide logging once, from `LOG_LEVEL` unless a level is passed explicitly."""

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    level = _resolve_level(level_override or get_settings().LOG_LEVEL)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    logging.getLogger(LISTING_LOGGER_NAME).setLevel(level)
    _LOGGING_CONFIGURED = True
