"""Logging setup for the explorer CLI and view helpers.

View helpers log through module loggers from get_logger; only the CLI
configures handlers.
"""

import logging
import sys
from typing import Optional

from explorer.config import Config


def setup_logging(config: Optional[Config] = None, log_level: Optional[str] = None) -> None:
    """Configure Python logging.

    Args:
        config: Config object (uses log_level from config if provided)
        log_level: Override log level (takes precedence over config)
    """
    level_str = log_level or (config.log_level if config else "INFO")

    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    level = level_map.get(level_str.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )

    # web3 logs provider and middleware chatter at DEBUG
    logging.getLogger("web3").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a module logger.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
