"""Module including value objects used across the domain layer."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

BLOCKS_PER_YEAR = 52560
DEFAULT_RATE_PERCENT = 5


class GoalStatus(Enum):
    """Enumeration of time-based savings goal statuses"""

    ONGOING = "ongoing"
    COMPLETED = "completed"


@dataclass(frozen=True, slots=True)
class AccountBalance:
    """Value object representing the balance held by an account."""

    balance: int = 0


@dataclass(frozen=True, slots=True)
class InterestCheckpoint:
    """Block height at which interest was last settled for an account."""

    block: int


@dataclass(frozen=True, slots=True)
class SavingsGoal:
    """Value object representing a savings goal.

    `deadline` is an absolute block height.
    """

    target: int
    deadline: int


@dataclass(frozen=True, slots=True)
class InterestPolicy:
    """Simple-interest terms applied by the ledger.

    Attributes:
        rate_percent: Whole-number annual interest rate (5 means 5%).
        blocks_per_period: Number of blocks in one rate period (~1 year).
    """

    rate_percent: int = DEFAULT_RATE_PERCENT
    blocks_per_period: int = BLOCKS_PER_YEAR


@dataclass(frozen=True, slots=True)
class GoalProgress:
    """Derived report on an account's progress toward its savings goal.

    `status` is None when the account has no goal; the report then carries
    zeroes for every other field.
    """

    target: int
    deadline: int
    progress: int
    status: GoalStatus | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return the report as a plain dict, omitting `status` when absent."""
        report: dict[str, Any] = {
            "target": self.target,
            "deadline": self.deadline,
            "progress": self.progress,
        }
        if self.status is not None:
            report["status"] = self.status.value
        return report


NO_GOAL_PROGRESS = GoalProgress(target=0, deadline=0, progress=0)
