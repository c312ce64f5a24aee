"""Simple-interest arithmetic for accrual checkpoints."""

from .value_objects import InterestPolicy


def blocks_elapsed(current_block: int, last_block: int | None) -> int:
    """Return the number of blocks since the last checkpoint.

    An account with no checkpoint counts from `current_block` itself, so its
    first accrual settles zero blocks. Only `None` means "no checkpoint": a
    checkpoint stored at block 0 is honoured, so interest accrues from block 0
    rather than being skipped as if the account were new. A regressing
    `current_block` yields a negative count; callers decide how to report it.
    """
    if last_block is None:
        return 0
    return current_block - last_block


def compute_interest(balance: int, blocks_passed: int, policy: InterestPolicy) -> int:
    """Compute simple interest owed on `balance` over `blocks_passed` blocks.

    Uses integer floor division, matching fixed-point accrual:

        floor(balance * rate_percent * blocks_passed / (100 * blocks_per_period))

    Args:
        balance: Current account balance.
        blocks_passed: Blocks elapsed since the last checkpoint.
        policy: Rate and period length to apply.

    Returns:
        The interest amount. Zero for a zero balance or zero elapsed blocks.
    """
    numerator = balance * policy.rate_percent * blocks_passed
    return numerator // (100 * policy.blocks_per_period)
