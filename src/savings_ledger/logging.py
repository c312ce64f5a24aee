"""Logging setup for the SAVINGS LEDGER command line.

Two handlers are attached to the root logger by the CLI:

- a Rich console handler on stderr whose level follows ``-v``/``-q``;
- a "flight recorder": a `MemoryHandler` that keeps the most recent records at
  DEBUG granularity and only writes them to the log file once something at
  WARNING or above happens (or at exit with ``--force-flush``).

Records coming from other libraries are tagged with a short ``[name]`` prefix
on the console so they stand out from the ledger's own messages.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

    from savings_ledger.domain.value_objects import InterestPolicy

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "savings_ledger"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]

CONSOLE_FORMAT = "%(prefix)s %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)


class ThirdPartyPrefixFilter(logging.Filter):
    """Set ``record.prefix`` to ``[top-level-package]`` for foreign loggers.

    Ledger records get an empty prefix. Never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(PROJECT_PREFIX):
            record.prefix = ""
        else:
            record.prefix = f"[{record.name.partition('.')[0]}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr console handler.

    Args:
        level: Minimum level shown; forced to DEBUG when `debug_mode` is set.
        debug_mode: Show timestamps, logger names and source locations.
        color: Emit ANSI colors (mirrors click-extra's ``--color/--no-color``).

    Returns:
        RichHandler: Handler ready to be attached to the root logger.
    """
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter(fmt=DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(fmt=CONSOLE_FORMAT))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build the flight recorder writing to `path`.

    The target file is opened lazily: a run that never flushes leaves no file
    behind.

    Args:
        path: Log file written on flush (truncated on first write).
        capacity: Number of records kept in memory.
        flush_level: Records at or above this level trigger a flush.
        flush_on_close: Also flush whatever is buffered when the handler closes.

    Returns:
        MemoryHandler: Buffering handler with a FileHandler target.
    """
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(RECORDER_FORMAT))

    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def log_startup(  # pylint: disable=too-many-arguments
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    log_path: Path | None,
    flight_recorder: bool,
    flight_capacity: int | None,
    force_flush_fr: bool,
    logger_levels: dict[str, int],
    policy: InterestPolicy,
) -> None:
    """Announce the run configuration.

    One INFO line summarizes the version, console level, flight-recorder state
    and interest policy. The remaining environment details (interpreter,
    platform, handlers, per-logger overrides) go out at DEBUG so they reach the
    flight recorder without cluttering the console.
    """
    logger.info(
        "SAVINGS LEDGER %s - console=%s, flight-recorder=%s, rate=%s%% per %s blocks",
        app_version,
        logging.getLevelName(level),
        "ON" if flight_recorder else "OFF",
        policy.rate_percent,
        policy.blocks_per_period,
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s, CWD: %s", os.getpid(), Path.cwd())
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            log_path or "<none>",
            flight_capacity,
            force_flush_fr,
        )
    overrides = {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()}
    logger.debug("Per-logger overrides: %s", overrides or "<none>")
