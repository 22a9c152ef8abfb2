"""Logging configuration for the command-line entry point.

The library itself only creates module loggers; applications embedding it
configure handlers themselves. The CLI calls ``configure_logging`` once.
"""

from __future__ import annotations

import logging
from logging.config import dictConfig

from .config import DEFAULT_SETTINGS, DiagnosticsSettings


def _dict_config(settings: DiagnosticsSettings) -> dict[str, object]:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": settings.log_format},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": settings.log_level,
                "formatter": "default",
                "stream": "ext://sys.stderr",
            }
        },
        "loggers": {
            "argdiag": {
                "level": settings.log_level,
                "handlers": ["console"],
                "propagate": False,
            },
        },
    }


def configure_logging(settings: DiagnosticsSettings = DEFAULT_SETTINGS) -> None:
    """Attach the console handler to the ``argdiag`` logger once.

    When the logger already has handlers only the level is updated, so
    repeated CLI invocations in one process do not duplicate output.
    """
    package_logger = logging.getLogger("argdiag")
    if package_logger.handlers:
        package_logger.setLevel(settings.log_level_number)
        return
    dictConfig(_dict_config(settings))
