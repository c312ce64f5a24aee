"""Tagged results returned by the message bus.

Every command yields either `Ok(value)` or `Err(error)`. Business-rule failures
never escape as exceptions to callers of the bus.
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeAlias, TypeVar

from savings_ledger.domain.errors import ErrorCode

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome carrying the command's value."""

    value: T

    @property
    def ok(self) -> bool:
        """Always True."""
        return True


@dataclass(frozen=True, slots=True)
class Err:
    """Failed outcome carrying the error code and a human-readable message."""

    error: ErrorCode
    message: str = ""

    @property
    def ok(self) -> bool:
        """Always False."""
        return False


Result: TypeAlias = Ok[Any] | Err
