"""Read-only queries that need no ledger state."""

from savings_ledger.domain import interest
from savings_ledger.domain.value_objects import InterestPolicy


def quote_interest(balance: int, blocks: int, policy: InterestPolicy) -> int:
    """Return the interest `balance` would earn over `blocks` blocks.

    Applies the same formula as an accrual, without touching any account.

    Raises:
        ValueError: If `balance` or `blocks` is negative.
    """
    if balance < 0:
        raise ValueError(f"balance must be >= 0, got {balance}")
    if blocks < 0:
        raise ValueError(f"blocks must be >= 0, got {blocks}")
    return interest.compute_interest(balance, blocks, policy)
