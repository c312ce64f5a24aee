"""Ledger store interface.

A `LedgerStore` holds the three per-account mappings the ledger works on:
balances, interest checkpoints and savings goals. Reads never raise for an
unseen account; they return a defined zero value (or None where "missing"
must stay distinguishable from a stored zero).
"""

from __future__ import annotations

import abc

from savings_ledger.domain.value_objects import (
    AccountBalance,
    InterestCheckpoint,
    SavingsGoal,
)


class LedgerStore(abc.ABC):
    """Contract for per-account ledger state."""

    # --- Balances ---

    @abc.abstractmethod
    def get_balance(self, account: str) -> AccountBalance:
        """Return the account balance, or `AccountBalance(0)` if unseen."""

    @abc.abstractmethod
    def put_balance(self, account: str, balance: AccountBalance) -> None:
        """Create or replace the balance record of an account."""

    # --- Interest checkpoints ---

    @abc.abstractmethod
    def get_checkpoint(self, account: str) -> InterestCheckpoint | None:
        """Return the last interest checkpoint, or None if never settled."""

    @abc.abstractmethod
    def put_checkpoint(self, account: str, checkpoint: InterestCheckpoint) -> None:
        """Create or replace the interest checkpoint of an account."""

    # --- Savings goals ---

    @abc.abstractmethod
    def get_goal(self, account: str) -> SavingsGoal | None:
        """Return the active savings goal, or None if the account has none."""

    @abc.abstractmethod
    def put_goal(self, account: str, goal: SavingsGoal) -> None:
        """Create or replace the savings goal of an account."""
