"""Parsing of ``-L/--logger-level`` values.

Accepts ``NAME=LEVEL`` items given either by repeating the option or as a
single comma/space separated string (the ``SAVINGS_LEDGER_LOGGER_LEVELS``
environment variable form).
"""

import logging
import re

import click

# Applied before user overrides so click-extra's own chatter stays quiet.
DEFAULT_LIB_LEVELS = {"click_extra": logging.WARNING}

_SEPARATORS = re.compile(r"[,\s]+")


def _split_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Flatten the raw option value into individual ``NAME=LEVEL`` items."""
    chunks = (value,) if isinstance(value, str) else tuple(value)
    return [item for chunk in chunks for item in _SEPARATORS.split(chunk) if item]


def _level_number(text: str) -> int:
    level = logging.getLevelNamesMapping().get(text.strip().upper())
    if level is None:
        raise click.BadParameter(f"Invalid log level: {text}")
    return level


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback turning ``NAME=LEVEL`` items into ``{name: level}``.

    The result always contains `DEFAULT_LIB_LEVELS`; later items override
    earlier ones for the same logger name.

    Raises:
        click.BadParameter: An item lacks ``=`` or names an unknown level.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _split_items(value):
        name, sep, level_text = item.partition("=")
        if not sep:
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        levels[name.strip()] = _level_number(level_text)
    return levels
