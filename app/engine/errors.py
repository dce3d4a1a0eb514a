"""Engine error types.

Two classes of problem exist: a malformed category (unknown enum value,
non-positive body dimension) raises InvalidArgumentError; degenerate data
(empty series, zero denominators) never raises and yields sentinel values.
"""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

E = TypeVar("E", bound=Enum)


class InvalidArgumentError(ValueError):
    """A caller supplied a value outside the accepted domain of a field."""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


def require_member(enum_cls: type[E], value: object, field: str) -> E:
    """Coerce `value` into `enum_cls` or raise InvalidArgumentError naming `field`."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(str(m.value) for m in enum_cls)
        raise InvalidArgumentError(
            field, f"unknown value {value!r} (expected one of: {allowed})"
        ) from None


def require_positive(value: float, field: str) -> float:
    if value is None or value <= 0:
        raise InvalidArgumentError(field, f"must be greater than 0, got {value!r}")
    return value
