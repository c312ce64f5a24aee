"""Module defining Commands."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


@dataclass(frozen=True)
class Deposit(Command):
    """Command to credit an amount to an account balance."""

    account: str
    amount: int


@dataclass(frozen=True)
class Withdraw(Command):
    """Command to debit an amount from an account balance."""

    account: str
    amount: int


@dataclass(frozen=True)
class AccrueInterest(Command):
    """Command to settle interest owed to an account up to `current_block`."""

    account: str
    current_block: int


@dataclass(frozen=True)
class SetSavingsGoal(Command):
    """Command to record (or replace) the savings goal of an account."""

    account: str
    target: int
    duration_blocks: int
    current_block: int


@dataclass(frozen=True)
class CheckGoalProgress(Command):
    """Command to report an account's progress toward its savings goal."""

    account: str
    current_block: int
