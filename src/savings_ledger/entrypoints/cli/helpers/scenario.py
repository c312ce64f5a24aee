"""Scenario file loading for `savings-ledger run`.

A scenario is a JSON object with optional seed state and a list of
operations::

    {
      "balances":    {"user1": 1000},
      "checkpoints": {"user1": 0},
      "goals":       {"user1": {"target": 5000, "deadline": 1010}},
      "operations": [
        {"op": "accrue", "account": "user1", "block": 52560},
        {"op": "set_goal", "account": "user1", "target": 5000,
         "duration": 1000, "block": 10},
        {"op": "progress", "account": "user1", "block": 900}
      ]
    }

Operations map one-to-one onto service-layer commands.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from savings_ledger.domain.value_objects import (
    AccountBalance,
    InterestCheckpoint,
    SavingsGoal,
)
from savings_ledger.service_layer import commands


class ScenarioError(ValueError):
    """Raised when a scenario document is malformed."""


@dataclass(frozen=True)
class Scenario:
    """Seed state plus the ordered commands of a scenario."""

    balances: dict[str, AccountBalance] = field(default_factory=dict)
    checkpoints: dict[str, InterestCheckpoint] = field(default_factory=dict)
    goals: dict[str, SavingsGoal] = field(default_factory=dict)
    operations: list[tuple[str, commands.Command]] = field(default_factory=list)


def _int(where: str, value: Any) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise ScenarioError(f"{where}: expected an integer, got {value!r}")
    return value


def _at_least(where: str, value: Any, minimum: int) -> int:
    value = _int(where, value)
    if value < minimum:
        raise ScenarioError(f"{where}: must be at least {minimum}, got {value}")
    return value


def _mapping(where: str, value: Any) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ScenarioError(f"{where}: expected an object, got {value!r}")
    return value


def _field(where: str, op: Mapping[str, Any], name: str) -> Any:
    try:
        return op[name]
    except KeyError as e:
        raise ScenarioError(f"{where}: missing field '{name}'") from e


def _account(where: str, op: Mapping[str, Any]) -> str:
    account = _field(where, op, "account")
    if not isinstance(account, str):
        raise ScenarioError(f"{where}: account must be a string, got {account!r}")
    return account


_OPERATION_BUILDERS: dict[str, Callable[[str, Mapping[str, Any]], commands.Command]] = {
    "deposit": lambda w, op: commands.Deposit(
        account=_account(w, op), amount=_int(w, _field(w, op, "amount"))
    ),
    "withdraw": lambda w, op: commands.Withdraw(
        account=_account(w, op), amount=_int(w, _field(w, op, "amount"))
    ),
    "accrue": lambda w, op: commands.AccrueInterest(
        account=_account(w, op), current_block=_int(w, _field(w, op, "block"))
    ),
    "set_goal": lambda w, op: commands.SetSavingsGoal(
        account=_account(w, op),
        target=_int(w, _field(w, op, "target")),
        duration_blocks=_int(w, _field(w, op, "duration")),
        current_block=_int(w, _field(w, op, "block")),
    ),
    "progress": lambda w, op: commands.CheckGoalProgress(
        account=_account(w, op), current_block=_int(w, _field(w, op, "block"))
    ),
}

OPERATION_NAMES = tuple(_OPERATION_BUILDERS)


def load_scenario(document: Any) -> Scenario:
    """Validate a decoded JSON document and build a `Scenario`.

    Args:
        document: The result of `json.load` on a scenario file.

    Returns:
        The seed state and commands described by the document.

    Raises:
        ScenarioError: If the document does not follow the scenario format.
    """
    root = _mapping("scenario", document)

    balances = {
        account: AccountBalance(_at_least(f"balances.{account}", value, 0))
        for account, value in _mapping("balances", root.get("balances", {})).items()
    }
    checkpoints = {
        account: InterestCheckpoint(_at_least(f"checkpoints.{account}", value, 0))
        for account, value in _mapping(
            "checkpoints", root.get("checkpoints", {})
        ).items()
    }
    goals = {}
    for account, value in _mapping("goals", root.get("goals", {})).items():
        where = f"goals.{account}"
        goal = _mapping(where, value)
        goals[account] = SavingsGoal(
            target=_at_least(f"{where}.target", _field(where, goal, "target"), 1),
            deadline=_int(where, _field(where, goal, "deadline")),
        )

    raw_operations = root.get("operations", [])
    if not isinstance(raw_operations, list):
        raise ScenarioError("operations: expected a list")

    operations: list[tuple[str, commands.Command]] = []
    for index, raw in enumerate(raw_operations):
        where = f"operations[{index}]"
        op = _mapping(where, raw)
        name = _field(where, op, "op")
        builder = _OPERATION_BUILDERS.get(name) if isinstance(name, str) else None
        if builder is None:
            raise ScenarioError(
                f"{where}: unknown op {name!r}; expected one of {', '.join(OPERATION_NAMES)}"
            )
        operations.append((name, builder(where, op)))

    return Scenario(
        balances=balances, checkpoints=checkpoints, goals=goals, operations=operations
    )
