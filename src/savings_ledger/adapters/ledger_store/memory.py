"""In-memory ledger store."""

from __future__ import annotations

from dataclasses import dataclass, field

from savings_ledger.domain.value_objects import (
    AccountBalance,
    InterestCheckpoint,
    SavingsGoal,
)
from savings_ledger.interfaces.ledger_store import LedgerStore


@dataclass(slots=True)
class InMemoryLedgerData:
    """Backing mappings for `InMemoryLedgerStore`.

    Each mapping is keyed by account id. Records are frozen value objects, so a
    shallow copy of the mappings is a complete snapshot of the ledger.
    """

    balances: dict[str, AccountBalance] = field(default_factory=dict)
    checkpoints: dict[str, InterestCheckpoint] = field(default_factory=dict)
    goals: dict[str, SavingsGoal] = field(default_factory=dict)

    def copy(self) -> InMemoryLedgerData:
        """Return a snapshot that shares no mappings with this instance."""
        return InMemoryLedgerData(
            balances=dict(self.balances),
            checkpoints=dict(self.checkpoints),
            goals=dict(self.goals),
        )

    def restore(self, snapshot: InMemoryLedgerData) -> None:
        """Replace the contents of every mapping with those of `snapshot`."""
        for name in ("balances", "checkpoints", "goals"):
            bucket = getattr(self, name)
            bucket.clear()
            bucket.update(getattr(snapshot, name))


class InMemoryLedgerStore(LedgerStore):
    """Dict-backed implementation of `LedgerStore`."""

    def __init__(self, data: InMemoryLedgerData | None = None) -> None:
        self.data = data if data is not None else InMemoryLedgerData()

    def get_balance(self, account: str) -> AccountBalance:
        return self.data.balances.get(account, AccountBalance(0))

    def put_balance(self, account: str, balance: AccountBalance) -> None:
        self.data.balances[account] = balance

    def get_checkpoint(self, account: str) -> InterestCheckpoint | None:
        return self.data.checkpoints.get(account)

    def put_checkpoint(self, account: str, checkpoint: InterestCheckpoint) -> None:
        self.data.checkpoints[account] = checkpoint

    def get_goal(self, account: str) -> SavingsGoal | None:
        return self.data.goals.get(account)

    def put_goal(self, account: str, goal: SavingsGoal) -> None:
        self.data.goals[account] = goal
