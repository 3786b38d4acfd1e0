"""Boundaries converting raised exceptions into failure values."""

from __future__ import annotations

import logging
from collections.abc import Callable, Awaitable
from typing import Optional

from ._result import Success, Failure, Result

logger = logging.getLogger(__name__)

type ErrorHandler[E] = Callable[[Exception], E]


def from_call[T, E](
    operation: Callable[[], T], error_handler: Optional[ErrorHandler[E]] = None
) -> Result[T, E]:
    """Call a function and capture its outcome as a result.

    Args:
        operation: The function to call, without arguments.
            Use a lambda or :func:`functools.partial` to bind arguments.
        error_handler: If given, it is called with the exception raised by
            the operation and the value it returns is stored in the failure.
            If omitted, the exception itself is stored in the failure, without
            checking that it matches the error type expected by the caller.

    Returns:
        A success containing the value returned by the operation, or a failure
        if the operation raised an exception.

        Only :class:`Exception` subclasses are captured.
        Other exceptions, like :class:`KeyboardInterrupt` or cancellation
        exceptions, propagate to the caller.
        If the error handler raises an exception, it propagates as well.
    """

    try:
        value = operation()
    except Exception as error:
        logger.debug("%r raised %r, returning failure", operation, error)
        return _failure_from_exception(error, error_handler)
    return Success(value)


async def from_awaitable[T, E](
    pending: Awaitable[T], error_handler: Optional[ErrorHandler[E]] = None
) -> Result[T, E]:
    """Wait for an awaitable to settle and capture its outcome as a result.

    This is the asynchronous counterpart of :func:`from_call`.
    The awaitable is awaited exactly once, it is not retried, timed out or
    cancelled by this function.

    Example:
        .. code-block:: python

            result = await from_awaitable(client.fetch(url), error_handler=str)
            if is_failure(result):
                logger.warning("Failed to fetch %s: %s", url, result.error)

    Returns:
        A success containing the value the awaitable resolved to, or a failure
        if awaiting it raised an exception.
        The returned coroutine doesn't raise the exceptions of the awaitable,
        with the exception of cancellation and other non-:class:`Exception`
        signals.
    """

    try:
        value = await pending
    except Exception as error:
        logger.debug("%r raised %r, returning failure", pending, error)
        return _failure_from_exception(error, error_handler)
    return Success(value)


def _failure_from_exception[E](
    error: Exception, error_handler: Optional[ErrorHandler[E]]
) -> Failure[E]:
    if error_handler is None:
        # Unchecked: the caller is trusted to expect the raw exception.
        return Failure(error)  # type: ignore[arg-type]
    try:
        mapped = error_handler(error)
    except Exception as handler_error:
        handler_error.add_note(
            f"Raised by error handler {error_handler!r} while handling {error!r}"
        )
        raise
    return Failure(mapped)
