"""Command handlers for the savings ledger.

Each handler runs inside one unit of work and commits only after every write
has succeeded. Domain errors propagate to the message bus, which turns them
into failed results; the unit of work rolls back on exit.
"""

import logging
from collections.abc import Callable

from savings_ledger.domain import balances, goals, interest
from savings_ledger.domain.value_objects import (
    AccountBalance,
    GoalProgress,
    InterestCheckpoint,
    InterestPolicy,
)
from savings_ledger.interfaces.unit_of_work import AbstractUnitOfWork
from savings_ledger.service_layer import commands

logger = logging.getLogger(__name__)


def deposit(cmd: commands.Deposit, uow: AbstractUnitOfWork) -> int:
    """Credit an account and return its new balance."""

    with uow:
        updated = balances.credit(uow.store.get_balance(cmd.account), cmd.amount)
        uow.store.put_balance(cmd.account, updated)
        uow.commit()

    logger.debug(
        "Deposited %s to %s; balance=%s", cmd.amount, cmd.account, updated.balance
    )
    return updated.balance


def withdraw(cmd: commands.Withdraw, uow: AbstractUnitOfWork) -> int:
    """Debit an account and return its new balance."""

    with uow:
        updated = balances.debit(
            cmd.account, uow.store.get_balance(cmd.account), cmd.amount
        )
        uow.store.put_balance(cmd.account, updated)
        uow.commit()

    logger.debug(
        "Withdrew %s from %s; balance=%s", cmd.amount, cmd.account, updated.balance
    )
    return updated.balance


def accrue_interest(
    cmd: commands.AccrueInterest, uow: AbstractUnitOfWork, policy: InterestPolicy
) -> int:
    """Settle interest since the last checkpoint and return the amount credited.

    The balance record and the checkpoint are written even when the interest is
    zero, so an unseen account ends up holding an explicit zero balance.
    """

    with uow:
        current = uow.store.get_balance(cmd.account)
        checkpoint = uow.store.get_checkpoint(cmd.account)
        last_block = checkpoint.block if checkpoint is not None else None

        blocks_passed = interest.blocks_elapsed(cmd.current_block, last_block)
        if blocks_passed < 0:
            logger.warning(
                "Block height regressed for %s: checkpoint=%s, current=%s",
                cmd.account,
                last_block,
                cmd.current_block,
            )
        amount = interest.compute_interest(current.balance, blocks_passed, policy)

        uow.store.put_balance(cmd.account, AccountBalance(current.balance + amount))
        uow.store.put_checkpoint(cmd.account, InterestCheckpoint(cmd.current_block))
        uow.commit()

    logger.debug(
        "Accrued %s for %s over %s blocks", amount, cmd.account, blocks_passed
    )
    return amount


def set_savings_goal(cmd: commands.SetSavingsGoal, uow: AbstractUnitOfWork) -> bool:
    """Record the savings goal of an account, replacing any previous goal."""

    goal = goals.make_goal(cmd.target, cmd.duration_blocks, cmd.current_block)
    with uow:
        uow.store.put_goal(cmd.account, goal)
        uow.commit()

    logger.debug("Savings goal for %s set to %s", cmd.account, goal)
    return True


def check_goal_progress(
    cmd: commands.CheckGoalProgress, uow: AbstractUnitOfWork
) -> GoalProgress:
    """Report progress toward the account's goal.

    Reads the store directly: nothing is written, so no unit of work is opened.
    """
    goal = uow.store.get_goal(cmd.account)
    current = uow.store.get_balance(cmd.account)

    return goals.measure_progress(goal, current.balance, cmd.current_block)


COMMAND_HANDLERS: dict[type, Callable[..., object]] = {
    commands.Deposit: deposit,
    commands.Withdraw: withdraw,
    commands.AccrueInterest: accrue_interest,
    commands.SetSavingsGoal: set_savings_goal,
    commands.CheckGoalProgress: check_goal_progress,
}
