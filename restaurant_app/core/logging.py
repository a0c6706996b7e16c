"""Logging configuration."""
import logging
import sys

from restaurant_app.core import config


def setup_logging() -> None:
    """Configure application logging."""
    logging.basicConfig(
        level=config.settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )
