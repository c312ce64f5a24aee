"""Balance mutation rules for deposits and withdrawals."""

from . import errors
from .value_objects import AccountBalance


def credit(current: AccountBalance, amount: int) -> AccountBalance:
    """Return the balance after depositing `amount`.

    Raises:
        AmountZeroError: If `amount` is zero or negative.
    """
    if amount <= 0:
        raise errors.AmountZeroError("amount", amount)
    return AccountBalance(current.balance + amount)


def debit(account: str, current: AccountBalance, amount: int) -> AccountBalance:
    """Return the balance after withdrawing `amount`.

    Raises:
        AmountZeroError: If `amount` is zero or negative.
        InsufficientBalanceError: If `amount` exceeds the current balance.
    """
    if amount <= 0:
        raise errors.AmountZeroError("amount", amount)
    if amount > current.balance:
        raise errors.InsufficientBalanceError(account, current.balance, amount)
    return AccountBalance(current.balance - amount)
