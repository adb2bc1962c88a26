"""
Logging Setup

Configures the root logger from application settings.
Service modules only call logging.getLogger(__name__).
"""

import logging
from typing import Optional

from tradebot.core.config import settings


def setup_logging(level: Optional[str] = None) -> None:
    """Configure root logging once for the process."""
    level_name = (level or settings.log_level).upper()
    if settings.debug:
        level_name = "DEBUG"

    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=settings.log_format,
    )
    logging.getLogger(__name__).debug(f"Logging configured at {level_name}")
