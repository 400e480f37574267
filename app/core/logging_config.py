"""
Logging configuration.

Console-only setup applied once at startup via dictConfig.
Modules log through logging.getLogger(__name__).
"""
import logging
import logging.config
import sys
from typing import Any, Dict

from app.core.config import get_settings


def get_logging_config(level: str = "INFO") -> Dict[str, Any]:
    """Get logging configuration dictionary."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "detailed": {
                "format": "%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s:%(lineno)d | %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S"
            },
            "simple": {
                "format": "%(asctime)s | %(levelname)-8s | %(message)s",
                "datefmt": "%H:%M:%S"
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "detailed",
                "stream": sys.stdout
            }
        },
        "loggers": {
            "app": {
                "level": level,
                "handlers": ["console"],
                "propagate": False
            },
            "pymongo": {
                "level": "WARNING",
                "handlers": ["console"],
                "propagate": False
            }
        },
        "root": {
            "level": "WARNING",
            "handlers": ["console"]
        }
    }


def setup_logging(level: str = None) -> logging.Logger:
    """Apply the logging configuration and return the app logger."""
    level = (level or get_settings().log_level).upper()
    logging.config.dictConfig(get_logging_config(level))
    logger = logging.getLogger("app")
    logger.debug("Logging configured at level %s", level)
    return logger
