"""Logging setup for applications embedding the transit model."""

import logging
import sys

from transit_enabler.adapters.config.app_config import AppConfig

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(config: AppConfig | None = None) -> None:
    """Configure root logging to stderr at the configured level."""
    level = config.log_level_value if config is not None else logging.INFO
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stderr,
    )
    # basicConfig leaves the level alone when the root logger already has handlers
    logging.getLogger().setLevel(level)
    logging.getLogger(__name__).debug(f"Logging configured at {logging.getLevelName(level)}")
