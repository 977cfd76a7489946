import logging
import logging.config
from typing import Optional

from src.settings import settings


def get_logging_config(level: Optional[str] = None) -> dict:
    """Get logging configuration dict for constant-term recovery.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR).
               Defaults to CONSTANT_TERM_LOG_LEVEL environment variable or INFO.

    Returns:
        Dictionary suitable for logging.config.dictConfig()
    """
    if level is None:
        level = settings.log_level

    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'default': {
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            },
            'simple': {
                'format': '%(levelname)s - %(message)s'
            }
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'formatter': 'simple',
                'stream': 'ext://sys.stderr'
            }
        },
        'loggers': {
            'constant_term': {
                'level': level.upper(),
                'handlers': ['console'],
                'propagate': False
            }
        }
    }


def configure_logging(level: Optional[str] = None, config: Optional[dict] = None) -> None:
    """
    Configure constant-term logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR).
               Defaults to CONSTANT_TERM_LOG_LEVEL environment variable or INFO.
        config: Optional custom logging config dict, used instead of the default.
                Must follow logging.config.dictConfig format.

    Examples:
        >>> from src.logging_config import configure_logging
        >>> configure_logging(level='DEBUG')
    """
    if config is None:
        config = get_logging_config(level)

    logging.config.dictConfig(config)
