import logging
import os

from watchsat.errors import ConfigError


LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def init_logger(level: str = "WARNING") -> None:
    """
    The LOGLEVEL environment variable wins over `level`.
    """
    level = os.environ.get("LOGLEVEL", level).upper()
    if level not in LEVELS:
        raise ConfigError(f"unknown log level {level!r}, expected one of {', '.join(LEVELS)}")
    logging.basicConfig(format='%(levelname)s: %(message)s', level=level)
