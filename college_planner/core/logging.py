"""Structured logging for the College Planner service.

Log lines are key=value records. Student email addresses are PII, so any
extra field whose name ends in "email" is masked before it is written.
"""

import logging
import sys
from typing import Any

from pydantic import ValidationError


def mask_email(email: str) -> str:
    """ana.lopez@example.com -> a***@example.com"""
    local, sep, domain = str(email).partition("@")
    if not sep:
        return "***"
    return f"{local[:1]}***@{domain}"


def _masked(fields: dict[str, Any]) -> dict[str, Any]:
    return {
        key: mask_email(value) if key.endswith("email") and value else value
        for key, value in fields.items()
    }


class StructuredFormatter(logging.Formatter):
    """key=value formatter carrying user_id and masked context fields."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "module": record.module,
            "function": record.funcName,
            "message": record.getMessage(),
        }

        user_id = getattr(record, "user_id", None)
        if user_id:
            log_data["user_id"] = user_id

        extra_data = getattr(record, "extra_data", None)
        if extra_data:
            log_data.update(_masked(extra_data))

        line = " ".join(f"{k}={v}" for k, v in log_data.items())
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def _level_for_env() -> int:
    try:
        from college_planner.core.config import get_settings

        env = get_settings().PLANNER_ENV
    except ValidationError:
        # Required settings missing (e.g. during test collection)
        return logging.INFO
    return logging.DEBUG if env == "dev" else logging.INFO


def get_logger(name: str) -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger writing structured lines to stdout, DEBUG in dev and INFO elsewhere
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)
        logger.setLevel(_level_for_env())

    return logger


def log_with_context(logger: logging.Logger, level: int, msg: str, **kwargs: Any) -> None:
    """
    Log with additional context fields.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        msg: Log message
        **kwargs: Context fields; user_id is promoted to its own field,
            fields named *email are masked
    """
    user_id = kwargs.pop("user_id", None)
    extra: dict[str, Any] = {"extra_data": kwargs}
    if user_id is not None:
        extra["user_id"] = user_id

    logger.log(level, msg, extra=extra)
