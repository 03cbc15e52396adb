"""Configuration for fallible.

Only the adapters (``run`` and ``run_async``) consult configuration, to decide
whether and how loudly to log the exceptions they capture.
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import lru_cache

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class LogLevel(str, Enum):
    """Log level for captured exceptions."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    def to_logging(self) -> int:
        return logging.getLevelName(self.value.upper())


class ResultConfig(BaseSettings):
    """Adapter configuration.

    All settings can be overridden via environment variables with the FALLIBLE_ prefix.
    Example: FALLIBLE_LOG_CAPTURED_ERRORS=false, FALLIBLE_CAPTURE_LOG_LEVEL=warning
    """

    model_config = {"env_prefix": "FALLIBLE_"}

    log_captured_errors: bool = Field(
        default=True, description="Log exceptions captured by run/run_async"
    )
    capture_log_level: LogLevel = Field(
        default=LogLevel.DEBUG, description="Level of the captured-exception log record"
    )


@lru_cache(maxsize=1)
def get_config() -> ResultConfig:
    """Return the process-wide configuration, read once from the environment.

    An invalid FALLIBLE_* value falls back to the defaults with a warning, so
    reading configuration never raises from inside an adapter.
    """
    try:
        return ResultConfig()
    except ValidationError as exc:
        logger.warning("Invalid fallible configuration, using defaults: %s", exc)
        return ResultConfig.model_construct()
