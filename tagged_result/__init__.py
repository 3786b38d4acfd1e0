"""Defines the result type and its variants: success and failure.

The Result type is a union type of Success and Failure, where Success contains a
successful value and Failure contains an error.

It is meant to be used as a return type for functions that can fail, but where
we want the calling code to deal explicitly with both cases instead of relying on
exceptions propagating up the stack.

The functions :func:`from_call` and :func:`from_awaitable` convert code that raises
exceptions into code that returns results.

Example:
    .. code-block:: python

        from typing import assert_never

        from tagged_result import Success, Failure, is_success, is_failure_type

        def read_file(file_path: str) -> Success[str] | Failure[FileNotFoundError]:
            try:
                with open(file_path) as file:
                    return Success(file.read())
            except FileNotFoundError as error:
                return Failure(error)

        result = read_file("file.txt")
        if is_failure_type(result, FileNotFoundError):
            print("File not found")
        elif is_success(result):
            print(result.value)
        else:
            assert_never(result)
"""

from ._adapters import from_call, from_awaitable
from ._result import (
    Failure,
    Result,
    Success,
    is_failure,
    is_failure_type,
    is_success,
    unwrap,
)

__all__ = [
    "Failure",
    "Result",
    "Success",
    "from_awaitable",
    "from_call",
    "is_failure",
    "is_failure_type",
    "is_success",
    "unwrap",
]
