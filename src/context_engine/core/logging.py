import json
import logging
import logging.config
import sys
from typing import Optional

import pydantic

ROOT_LOGGER_NAME = "context_engine"

# Create default logger first
logger = logging.getLogger(ROOT_LOGGER_NAME)
logger.addHandler(logging.NullHandler())

_RESERVED_ATTRS = set(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """
    Formats log records as a JSON object, including any 'extra' data.
    """

    def format(self, record):
        log_object = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Values passed via `extra=` land directly on the record.
        for key, value in vars(record).items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                log_object[key] = value

        if record.exc_info:
            log_object["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_object, default=str)


class LogConfig(pydantic.BaseModel):
    """Logging configuration for the context engine"""

    LOGGER_NAME: str = ROOT_LOGGER_NAME
    LOG_LEVEL: str = "INFO"

    version: int = 1
    disable_existing_loggers: bool = False
    formatters: dict = {
        "default": {
            "()": JsonFormatter,
            "datefmt": "%Y-%m-%dT%H:%M:%S%z",
        },
    }
    handlers: dict = {
        "default": {
            "formatter": "default",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stdout",
        },
    }
    loggers: dict = {}

    @pydantic.model_validator(mode="after")
    def _attach_root_logger(self) -> "LogConfig":
        self.loggers = {
            self.LOGGER_NAME: {"handlers": ["default"], "level": self.LOG_LEVEL},
            **self.loggers,
        }
        return self


def setup_logging(config: Optional[LogConfig] = None) -> None:
    """Configure logging for the engine"""
    if config is None:
        config = LogConfig()

    logging.config.dictConfig(config.model_dump(exclude={"LOGGER_NAME", "LOG_LEVEL"}))

    def handle_exception(exc_type, exc_value, exc_traceback):
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return
        logger.error(
            "Uncaught exception", exc_info=(exc_type, exc_value, exc_traceback)
        )

    sys.excepthook = handle_exception


def get_logger(namespace: str) -> logging.Logger:
    """Return a child logger, e.g. ``processor.InputTemplateProcessor``."""
    return logger.getChild(namespace)


# Expose standard logging methods
def info(msg: str, *args, **kwargs):
    logger.info(msg, *args, **kwargs)
