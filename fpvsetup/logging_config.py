import logging
import sys
from environs import Env

from fpvsetup.domain.validators import ValidationError

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
PACKAGE_LOGGER = "fpvsetup"


def resolve_log_level(env: Env) -> int:
    """Numeric level from LOGGING_LEVEL (default INFO); DEBUG=true forces DEBUG."""
    if env.bool("DEBUG", default=False):
        return logging.DEBUG

    level_name = env.str("LOGGING_LEVEL", "INFO").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValidationError(
            f"LOGGING_LEVEL must be a level name such as DEBUG or INFO, got '{level_name}'"
        )
    return level


def setup_logging(env: Env) -> None:
    """Set up logging configuration."""
    level = resolve_log_level(env)
    if logging.root.handlers:  # Check if logging is already configured
        return

    # Logs go to stderr so that stdout stays clean for --json output
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)

    # Module loggers are children of the package logger and inherit its level
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
