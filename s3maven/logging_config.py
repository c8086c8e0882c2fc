"""Process-wide logging setup."""

from __future__ import annotations

import logging.config

LOG_FORMAT = "%(asctime)s %(levelname)-5s [%(threadName)s] %(name)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"default": {"format": LOG_FORMAT}},
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                },
            },
            "loggers": {
                # keep SDK chatter out of INFO logs
                "botocore": {"level": "WARNING"},
                "boto3": {"level": "WARNING"},
                "httpx": {"level": "WARNING"},
            },
            "root": {"level": level.upper(), "handlers": ["console"]},
        }
    )
