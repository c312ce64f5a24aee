"""CLI helpers for SAVINGS LEDGER.

Utilities used by the command-line interface: logger-level option parsing,
scenario file loading, and message emitters that write to stderr with
emoji→ASCII fallbacks.
"""

from .log_level_parser import parse_log_level
from .messages import error, success, warn
from .scenario import Scenario, ScenarioError, load_scenario

__all__ = [
    "parse_log_level",
    "error",
    "success",
    "warn",
    "Scenario",
    "ScenarioError",
    "load_scenario",
]
