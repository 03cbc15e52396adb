"""Exceptions raised by fallible itself."""

from __future__ import annotations

from typing import Any


class FallibleError(Exception):
    """Base exception for all fallible errors."""


class UnwrapError(FallibleError, ValueError):
    """A value was unwrapped from the wrong variant.

    Signals a programming mistake: the caller assumed a variant without
    checking ``is_success()`` or ``is_failure()`` first.
    """

    def __init__(self, message: str, *, result: Any = None) -> None:
        super().__init__(message)
        self.result = result
