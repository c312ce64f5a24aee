"""Domain-layer error definitions."""

from enum import Enum


class ErrorCode(Enum):
    """Stable error codes reported to callers in failed results."""

    AMOUNT_ZERO = "ERR_AMOUNT_ZERO"
    INSUFFICIENT_BALANCE = "ERR_INSUFFICIENT_BALANCE"


# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors.

    Every concrete error maps to exactly one `ErrorCode` so the service layer
    can turn it into a tagged failure result.
    """

    code: ErrorCode


# ============================================================================
#                           Amount related errors
# ============================================================================


class AmountZeroError(DomainError):
    """Raised when an amount that must be positive is zero or negative."""

    code = ErrorCode.AMOUNT_ZERO

    def __init__(self, field: str, amount: int) -> None:
        super().__init__(f"{field} must be greater than zero, got {amount}.")
        self.field = field
        self.amount = amount


class InsufficientBalanceError(DomainError):
    """Raised when a withdrawal exceeds the account balance."""

    code = ErrorCode.INSUFFICIENT_BALANCE

    def __init__(self, account: str, balance: int, amount: int) -> None:
        super().__init__(
            f"Account '{account}' cannot withdraw {amount}; balance is {balance}."
        )
        self.account = account
        self.balance = balance
        self.amount = amount
