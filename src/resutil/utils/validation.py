from __future__ import annotations

"""
Argument Validation Helpers.

Fail-fast guards used at every public entry point. Each guard returns the
value it checked so it can be used inline.
"""

from typing import Optional, TypeVar

from resutil.domain.errors import InvalidArgumentError

T = TypeVar("T")


def assert_nonnull(value: Optional[T], name: str) -> T:
    """
    Reject a missing argument.

    Args:
        value: Argument to check.
        name: Argument name used in the error message.

    Returns:
        T: The unchanged value.

    Raises:
        InvalidArgumentError: If value is None.
    """
    if value is None:
        raise InvalidArgumentError(f"Argument '{name}' must not be None")
    return value


def assert_nonempty_string(value: Optional[str], name: str) -> str:
    """Reject None, non-string and empty string arguments."""
    assert_nonnull(value, name)
    if not isinstance(value, str):
        raise InvalidArgumentError(
            f"Argument '{name}' must be a string, received {type(value).__name__}"
        )
    if not value:
        raise InvalidArgumentError(f"Argument '{name}' must not be an empty string")
    return value


def assert_natural_number(value: Optional[int], name: str) -> int:
    """Reject None, non-integer and negative arguments. Zero is accepted."""
    assert_nonnull(value, name)
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"Argument '{name}' must be an integer, received {type(value).__name__}"
        )
    if value < 0:
        raise InvalidArgumentError(f"Argument '{name}' must not be negative, received {value}")
    return value
