"""Root logger setup."""

import logging
import sys

from pythonjsonlogger import jsonlogger

from reading_tracker.config import LoggingConfig

PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(config: LoggingConfig | None = None) -> None:
    """Install a single stdout handler on the root logger.

    Args:
        config: Logging settings. Defaults to INFO with plain text output.
    """
    config = config or LoggingConfig()

    logger = logging.getLogger()
    logger.setLevel(config.level.upper())

    handler = logging.StreamHandler(sys.stdout)
    if config.json_format:
        formatter: logging.Formatter = jsonlogger.JsonFormatter(JSON_FORMAT)
    else:
        formatter = logging.Formatter(PLAIN_FORMAT)
    handler.setFormatter(formatter)
    logger.handlers = [handler]
