"""Console logging configuration.

Usage:
    from cardrelay.logging_config import configure_logging
    configure_logging("INFO")
"""

import logging
import logging.config


def build_logging_config(level: str = "INFO") -> dict:
    """Build a dictConfig mapping for console logging."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "console": {
                "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "console",
                "stream": "ext://sys.stdout",
            },
        },
        "root": {
            "level": level.upper(),
            "handlers": ["console"],
        },
        "loggers": {
            # httpx logs full request URLs, which carry Trello credentials
            "httpx": {"level": "WARNING"},
        },
    }


def configure_logging(level: str = "INFO") -> None:
    """Apply logging configuration.

    Call once at application startup.
    """
    logging.config.dictConfig(build_logging_config(level))
