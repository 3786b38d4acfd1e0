from __future__ import annotations

from typing import Never, Literal, overload, Any

import attrs
from typing_extensions import TypeIs


@attrs.frozen(repr=False, str=False)
class Success[T]:
    """Outcome of an operation that completed and produced a value."""

    value: T

    def unwrap(self) -> T:
        return self.value

    @staticmethod
    def is_success() -> Literal[True]:
        return True

    @staticmethod
    def is_failure() -> Literal[False]:
        return False

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@attrs.frozen(repr=False, str=False)
class Failure[E]:
    """Outcome of an operation that could not produce a value.

    The error can be any object, it is not required to be an exception.
    """

    error: E

    def unwrap(self) -> Never:
        """Raise the error held by this failure.

        Raises:
            ValueError: If the error is not an exception and thus can't be raised.
        """

        if not isinstance(self.error, BaseException):
            raise ValueError(f"Can't unwrap non-exception error {self.error!r}")
        raise self.error

    @staticmethod
    def is_success() -> Literal[False]:
        return False

    @staticmethod
    def is_failure() -> Literal[True]:
        return True

    def __str__(self) -> str:
        return str(self.error)

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"


type Result[T, E] = Success[T] | Failure[E]


def is_success[T](result: Result[T, Any]) -> TypeIs[Success[T]]:
    return result.is_success()


def is_failure[E](result: Result[Any, E]) -> TypeIs[Failure[E]]:
    return result.is_failure()


def is_failure_type[E](result: Result, error_type: type[E]) -> TypeIs[Failure[E]]:
    """Check if the result is a failure holding an error of the given type."""

    return is_failure(result) and isinstance(result.error, error_type)


@overload
def unwrap[T](result: Success[T]) -> T: ...


@overload
def unwrap(result: Failure[Any]) -> Never: ...


@overload
def unwrap[T](result: Result[T, Any]) -> T: ...


def unwrap(result):
    """Return the value of a success or raise the error of a failure."""

    return result.unwrap()
