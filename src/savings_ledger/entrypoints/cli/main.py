"""SAVINGS LEDGER CLI entry point.

Defines the top-level ``savings-ledger`` command (via Click-Extra) and
registers the subcommands exposed by the project.

Currently available commands
- ``savings-ledger run SCENARIO``: run a JSON scenario against a fresh ledger.
- ``savings-ledger quote``: print the interest a balance would earn.

Notes
- The CLI version is sourced from `savings_ledger.__version__` and displayed
  automatically by Click-Extra (``--version``).
- The interest policy is resolved once here and passed to subcommands through
  the Click context object.

Examples
    $ savings-ledger --version
    $ savings-ledger -v run scenario.json
    $ savings-ledger --rate-percent 7 quote --balance 1000 --blocks 52560
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from savings_ledger import __version__, config
from savings_ledger.logging import (
    config_console_handler,
    config_flight_recorder,
    log_startup,
)

from .helpers.log_level_parser import parse_log_level
from .ledger import quote, run

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """SAVINGS LEDGER command-line interface.

    A deterministic model of a savings contract: simple interest settled per
    block height, savings goals with block-height deadlines, and progress
    reports toward those goals.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (enables extra developer diagnostics beyond -vvv).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file (overrides default flight recorder path).",
    default=Path(user_log_dir("savings-ledger", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="SAVINGS_LEDGER_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="SAVINGS_LEDGER_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Enable the in-memory flight recorder. Keeps the last N log records "
        "(tunable via SAVINGS_LEDGER_FLIGHT_RECORDER_CAPACITY) at DEBUG granularity "
        "(unaffected by -v/-q) and writes them to --log-path when a WARNING/ERROR "
        "occurs, or on clean exit if --force-flush is set."
    ),
    default=True,
    envvar="SAVINGS_LEDGER_FLIGHT_RECORDER",
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help=(
        "Force-flush the flight recorder buffer to --log-path on program exit. "
        "Normally the buffer only dumps on WARNING/ERROR; console output is unaffected."
    ),
    default=False,
    envvar="SAVINGS_LEDGER_FORCE_FLUSH_FLIGHT_RECORDER",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). This changes the "
        "logger's own level, so it applies to BOTH console and flight-recorder. "
        "Repeatable (e.g. -L savings_ledger.service_layer=INFO) or via "
        "SAVINGS_LEDGER_LOGGER_LEVELS (comma/space list)."
    ),
    envvar="SAVINGS_LEDGER_LOGGER_LEVELS",
    show_envvar=True,
)
@click.option(
    "--rate-percent",
    type=int,
    default=config.DEFAULT_POLICY.rate_percent,
    envvar=config.RATE_PERCENT_ENV,
    show_default=True,
    show_envvar=True,
    help="Whole-number annual interest rate applied on accrual.",
)
@click.option(
    "--blocks-per-period",
    type=int,
    default=config.DEFAULT_POLICY.blocks_per_period,
    envvar=config.BLOCKS_PER_PERIOD_ENV,
    show_default=True,
    show_envvar=True,
    help="Number of blocks in one interest-rate period (about one year).",
)
@clickx.pass_context
def savings_ledger(  # pylint: disable=too-many-arguments, too-many-locals, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
    rate_percent: int,
    blocks_per_period: int,
) -> None:
    """SAVINGS LEDGER command-line interface."""

    # 0) resolve the interest policy
    try:
        policy = config.build_interest_policy(rate_percent, blocks_per_period)
    except config.InvalidConfigError as e:
        raise click.BadParameter(str(e)) from e
    ctx.ensure_object(dict)["policy"] = policy

    # 1) compute effective verbosity
    base_level = logging.WARNING
    level = base_level - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[Handler] = []

    # 2) configure console handler
    use_color = ctx.color is not False
    handlers.append(
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    )

    # 3) configure flight recorder
    if flight_recorder:
        handlers.append(
            config_flight_recorder(
                path=log_path,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush_flight_recorder,
            )
        )

    # 4) configure root logger; handlers filter
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity if flight_recorder else None,
        force_flush_fr=force_flush_flight_recorder,
        logger_levels=logger_levels,
        policy=policy,
    )

    ctx.call_on_close(logging.shutdown)


savings_ledger.add_command(run)
savings_ledger.add_command(quote)
