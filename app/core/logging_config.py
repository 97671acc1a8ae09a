from __future__ import annotations

import logging
from logging.config import dictConfig

from app.core.config import Settings

PLAIN_FORMAT = "%(levelname)s %(asctime)s %(name)s %(message)s"
JSON_FORMAT = (
    '{"level":"%(levelname)s","time":"%(asctime)s","logger":"%(name)s","message":"%(message)s"}'
)


def configure_logging(settings: Settings) -> None:
    formatters: dict[str, dict[str, object]] = {
        "standard": {
            "format": JSON_FORMAT if settings.log_json else PLAIN_FORMAT,
        }
    }

    handlers: dict[str, dict[str, object]] = {
        "default": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        }
    }

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": formatters,
            "handlers": handlers,
            "root": {
                "level": settings.log_level,
                "handlers": ["default"],
            },
            # SDK clients log full request lines at INFO.
            "loggers": {
                "httpx": {"level": "WARNING"},
                "openai": {"level": "WARNING"},
                "anthropic": {"level": "WARNING"},
            },
        }
    )

    logging.getLogger("uvicorn.error").setLevel(settings.log_level)
