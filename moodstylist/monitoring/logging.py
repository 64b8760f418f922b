"""Logging setup shared by the outfit API and the stylist bot."""

from __future__ import annotations

import logging

from moodstylist.config.settings import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging() -> None:
    """Configure the root logger at ``LOG_LEVEL``; both entrypoints call this before serving."""

    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
