"""Adapters from exception-raising code to Result values.

    result = run(lambda: json.loads(payload))
    result = await run_async(lambda: client.fetch(url))

Each adapter calls its computation exactly once. Only ``Exception`` subclasses
are captured; ``KeyboardInterrupt``, ``SystemExit`` and task cancellation
propagate to the caller.
"""

from __future__ import annotations

import logging
from typing import Awaitable, Callable, TypeVar

from fallible.config import get_config
from fallible.result import Failure, Result, Success

logger = logging.getLogger(__name__)

T = TypeVar("T")


def run(fn: Callable[[], T]) -> Result[T, Exception]:
    """Call ``fn`` and wrap its outcome in a Result."""
    try:
        return Success(fn())
    except Exception as exc:
        _log_captured(fn, exc)
        return Failure(exc)


async def run_async(fn: Callable[[], Awaitable[T]]) -> Result[T, Exception]:
    """Await ``fn()`` and wrap its outcome in a Result."""
    try:
        return Success(await fn())
    except Exception as exc:
        _log_captured(fn, exc)
        return Failure(exc)


def _log_captured(fn: Callable[..., object], exc: Exception) -> None:
    config = get_config()
    if not config.log_captured_errors:
        return
    name = getattr(fn, "__qualname__", repr(fn))
    logger.log(
        config.capture_log_level.to_logging(),
        "Captured %s from %s: %s",
        type(exc).__name__,
        name,
        exc,
    )
