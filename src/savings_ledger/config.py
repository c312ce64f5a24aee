"""Configuration utilities for SAVINGS LEDGER.

This module centralizes small helpers and constants related to application configuration.
"""

import os

from savings_ledger.domain.value_objects import InterestPolicy

RATE_PERCENT_ENV = "SAVINGS_LEDGER_RATE_PERCENT"  # pragma: no mutate
BLOCKS_PER_PERIOD_ENV = "SAVINGS_LEDGER_BLOCKS_PER_PERIOD"  # pragma: no mutate

DEFAULT_POLICY = InterestPolicy()


class InvalidConfigError(Exception):
    """Raised when a configuration value cannot be used."""

    def __init__(self, name: str, value: object, reason: str) -> None:
        super().__init__(f"Invalid {name}={value!r}: {reason}")
        self.name = name
        self.value = value


def _read_int(name: str, default: int) -> int:
    if not (raw := os.environ.get(name)):
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise InvalidConfigError(name, raw, "expected an integer") from e


def build_interest_policy(rate_percent: int, blocks_per_period: int) -> InterestPolicy:
    """Validate interest terms and build an `InterestPolicy`.

    Args:
        rate_percent: Whole-number annual rate; must be >= 0.
        blocks_per_period: Blocks per rate period; must be > 0.

    Raises:
        InvalidConfigError: If either value is out of range.
    """
    if rate_percent < 0:
        raise InvalidConfigError("rate_percent", rate_percent, "must be >= 0")
    if blocks_per_period <= 0:
        raise InvalidConfigError("blocks_per_period", blocks_per_period, "must be > 0")
    return InterestPolicy(rate_percent=rate_percent, blocks_per_period=blocks_per_period)


def get_interest_policy() -> InterestPolicy:
    """Get the interest policy from the environment.

    Reads `SAVINGS_LEDGER_RATE_PERCENT` (default 5) and
    `SAVINGS_LEDGER_BLOCKS_PER_PERIOD` (default 52560). Unset or empty
    variables fall back to the defaults.

    Raises:
        InvalidConfigError: If a variable is not an integer or out of range.
    """
    return build_interest_policy(
        _read_int(RATE_PERCENT_ENV, DEFAULT_POLICY.rate_percent),
        _read_int(BLOCKS_PER_PERIOD_ENV, DEFAULT_POLICY.blocks_per_period),
    )
