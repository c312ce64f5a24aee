"""Savings goal rules."""

from . import errors
from .value_objects import (
    NO_GOAL_PROGRESS,
    GoalProgress,
    GoalStatus,
    SavingsGoal,
)


def make_goal(target: int, duration_blocks: int, current_block: int) -> SavingsGoal:
    """Build a savings goal ending `duration_blocks` after `current_block`.

    The duration is not validated: a negative value yields a deadline already
    in the past, so the goal reports as completed immediately.

    Raises:
        AmountZeroError: If `target` is zero or negative.
    """
    if target <= 0:
        raise errors.AmountZeroError("target", target)
    return SavingsGoal(target=target, deadline=current_block + duration_blocks)


def goal_status(goal: SavingsGoal, current_block: int) -> GoalStatus:
    """Return the time-based status of a goal; funding level is not considered."""
    if current_block >= goal.deadline:
        return GoalStatus.COMPLETED
    return GoalStatus.ONGOING


def measure_progress(
    goal: SavingsGoal | None, balance: int, current_block: int
) -> GoalProgress:
    """Report progress of `balance` toward `goal` at `current_block`.

    Progress is `floor(balance * 100 / target)` and is not clamped, so an
    over-funded goal reports more than 100.
    """
    if goal is None:
        return NO_GOAL_PROGRESS
    return GoalProgress(
        target=goal.target,
        deadline=goal.deadline,
        progress=balance * 100 // goal.target,
        status=goal_status(goal, current_block),
    )
