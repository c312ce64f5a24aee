"""SAVINGS LEDGER ledger commands.

Behavior
- ``run`` loads a JSON scenario (seed state + operations), runs each operation
  against a fresh in-memory ledger and prints one JSON object per operation to
  **stdout**. Human-oriented notices go to **stderr**.
- ``quote`` prints the interest a balance would earn over a number of blocks.

Failure modes
- Malformed scenario: an error line on stderr and exit code 1.
- Rejected operations (e.g. a zero goal target) are not failures of the
  command; they are reported as ``{"error": "ERR_..."}`` lines.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from savings_ledger.bootstrap import bootstrap
from savings_ledger.domain.value_objects import GoalProgress
from savings_ledger.service_layer.queries import quote_interest
from savings_ledger.service_layer.results import Err

from .helpers import ScenarioError, error, load_scenario, success, warn

if TYPE_CHECKING:
    from savings_ledger.domain.value_objects import InterestPolicy
    from savings_ledger.service_layer.commands import Command
    from savings_ledger.service_layer.results import Result

logger = logging.getLogger(__name__)


def render_result(op: str, cmd: Command, result: Result) -> dict[str, Any]:
    """Render one operation outcome as a JSON-serializable dict."""
    line: dict[str, Any] = {"op": op, "account": getattr(cmd, "account", None)}
    if isinstance(result, Err):
        line["error"] = result.error.value
    elif isinstance(result.value, GoalProgress):
        line["ok"] = result.value.as_dict()
    else:
        line["ok"] = result.value
    return line


def _read_document(path: Path) -> Any:
    try:
        with path.open(encoding="utf-8") as fh:
            return json.load(fh)
    except json.JSONDecodeError as e:
        raise ScenarioError(f"not valid JSON: {e}") from e


@click.command()
@click.argument(
    "scenario_path",
    metavar="SCENARIO",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--dump-state/--no-dump-state",
    default=False,
    help="Print the final balances, checkpoints and goals as a last JSON line.",
)
@click.pass_obj
def run(obj: dict[str, Any], scenario_path: Path, dump_state: bool) -> None:
    """Run the operations of a JSON scenario against a fresh ledger."""
    policy: InterestPolicy = obj["policy"]

    try:
        scenario = load_scenario(_read_document(scenario_path))
    except ScenarioError as e:
        error(f"Invalid scenario {scenario_path}")
        click.echo(str(e), err=True)
        raise click.exceptions.Exit(1) from e

    app = bootstrap(policy=policy)
    for account, balance in scenario.balances.items():
        app.store.put_balance(account, balance)
    for account, checkpoint in scenario.checkpoints.items():
        app.store.put_checkpoint(account, checkpoint)
    for account, goal in scenario.goals.items():
        app.store.put_goal(account, goal)

    rejected = 0
    for op, cmd in scenario.operations:
        result = app.message_bus.handle(cmd)
        if not result.ok:
            rejected += 1
        click.echo(json.dumps(render_result(op, cmd, result)))

    if dump_state:
        data = app.store.data
        click.echo(
            json.dumps(
                {
                    "balances": {a: r.balance for a, r in data.balances.items()},
                    "checkpoints": {a: r.block for a, r in data.checkpoints.items()},
                    "goals": {
                        a: {"target": g.target, "deadline": g.deadline}
                        for a, g in data.goals.items()
                    },
                }
            )
        )

    total = len(scenario.operations)
    logger.info(
        "Scenario %s: %s operations, %s rejected", scenario_path, total, rejected
    )
    if rejected:
        warn(f"Ran {total} operations; {rejected} rejected.")
    else:
        success(f"Ran {total} operations.")


@click.command()
@click.option("--balance", type=int, required=True, help="Balance earning interest.")
@click.option("--blocks", type=int, required=True, help="Number of elapsed blocks.")
@click.pass_obj
def quote(obj: dict[str, Any], balance: int, blocks: int) -> None:
    """Print the interest BALANCE would earn over BLOCKS blocks."""
    try:
        amount = quote_interest(balance, blocks, obj["policy"])
    except ValueError as e:
        raise click.BadParameter(str(e)) from e
    click.echo(amount)
