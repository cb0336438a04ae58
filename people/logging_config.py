"""Logging setup for People Service."""

import logging
from typing import Optional

from .config import config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging with the service format."""
    logging.basicConfig(level=config.get_log_level(level), format=LOG_FORMAT)
