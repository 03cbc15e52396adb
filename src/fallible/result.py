"""Result type for explicit error handling without exceptions.

Provides a Rust-inspired Result[T, E] pattern for operations that can fail.
A result is either a Success holding a value or a Failure holding an error;
callers handle both cases explicitly, by predicate or by pattern matching:

    match parse(text):
        case Success(value):
            ...
        case Failure(error):
            ...
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, NoReturn, TypeVar, Union

from fallible.errors import UnwrapError

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")


class ResultBase(ABC, Generic[T, E]):
    """Operations shared by both result variants."""

    __slots__ = ()

    @abstractmethod
    def and_combine(self, other: Result[U, F]) -> Result[U, E | F]:
        """Return ``other`` if this is a Success, otherwise this Failure."""

    @abstractmethod
    def and_then(self, fn: Callable[[T], Result[U, F]]) -> Result[U, E | F]:
        """Chain a step that may itself fail.

        ``fn`` receives the success value and its result is returned as is.
        On a Failure, ``fn`` is not called and the failure propagates.
        """

    @abstractmethod
    def is_success(self) -> bool:
        """Return True if this is a Success."""

    @abstractmethod
    def is_failure(self) -> bool:
        """Return True if this is a Failure."""

    @abstractmethod
    def map(self, fn: Callable[[T], U]) -> Result[U, E]:
        """Transform the success value, leaving a Failure untouched."""

    @abstractmethod
    def map_error(self, fn: Callable[[E], F]) -> Result[T, F]:
        """Transform the error, leaving a Success untouched."""

    @abstractmethod
    def unwrap(self) -> T:
        """Return the success value.

        Raises:
            UnwrapError: If this is a Failure.
        """

    @abstractmethod
    def unwrap_error(self) -> E:
        """Return the error.

        Raises:
            UnwrapError: If this is a Success.
        """

    @abstractmethod
    def unwrap_or(self, default: T) -> T:
        """Return the success value, or ``default`` for a Failure."""


@dataclass(frozen=True, slots=True)
class Success(ResultBase[T, NoReturn]):
    """Successful result containing a value."""

    value: T

    def and_combine(self, other: Result[U, F]) -> Result[U, F]:
        return other

    def and_then(self, fn: Callable[[T], Result[U, F]]) -> Result[U, F]:
        return fn(self.value)

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def map(self, fn: Callable[[T], U]) -> Success[U]:
        return Success(fn(self.value))

    def map_error(self, fn: Callable[[Any], F]) -> Success[T]:
        return self

    def unwrap(self) -> T:
        return self.value

    def unwrap_error(self) -> NoReturn:
        raise UnwrapError("called unwrap_error on a Success value", result=self)

    def unwrap_or(self, default: T) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Failure(ResultBase[NoReturn, E]):
    """Error result containing an error value."""

    error: E

    def and_combine(self, other: Result[U, F]) -> Failure[E]:
        return self

    def and_then(self, fn: Callable[[Any], Result[U, F]]) -> Failure[E]:
        return self

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def map(self, fn: Callable[[Any], U]) -> Failure[E]:
        return self

    def map_error(self, fn: Callable[[E], F]) -> Failure[F]:
        return Failure(fn(self.error))

    def unwrap(self) -> NoReturn:
        exc = UnwrapError("called unwrap on a Failure value", result=self)
        # Keep the original traceback reachable when the error is an exception.
        if isinstance(self.error, BaseException):
            raise exc from self.error
        raise exc

    def unwrap_error(self) -> E:
        return self.error

    def unwrap_or(self, default: T) -> T:  # type: ignore[override]
        return default


Ok = Success
Err = Failure

Result = Union[Success[T], Failure[E]]
