"""Helpers for reading CLI output in tests."""

import json
from typing import Any


def json_lines(output: str) -> list[Any]:
    """Return the JSON objects printed one per line in `output`.

    Lines that are not JSON objects (log lines, status messages) are skipped.
    """
    return [json.loads(line) for line in output.splitlines() if line.startswith("{")]
