"""Global pytest fixtures and default marks for SAVINGS LEDGER."""

from __future__ import annotations

from pathlib import Path

import pytest

from savings_ledger.bootstrap import AppContainer, bootstrap
from savings_ledger.domain.value_objects import InterestPolicy

# pylint: disable=redefined-outer-name, unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()

# Marker applied to every item collected under each top-level folder
FOLDER_MARKERS = {"unit": "unit", "integration": "integration", "e2e": "e2e"}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add the folder's default mark to items that do not carry it yet."""
    for item in items:
        path = item.path.resolve()  # pytest>=8: pathlib.Path
        if TESTS_ROOT not in path.parents:
            continue
        folder = path.relative_to(TESTS_ROOT).parts[0]
        if (marker_name := FOLDER_MARKERS.get(folder)) is None:
            continue
        if not any(marker.name == marker_name for marker in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, marker_name))


@pytest.fixture
def policy() -> InterestPolicy:
    """The default interest policy (5% per 52560 blocks)."""
    return InterestPolicy()


@pytest.fixture
def app(policy: InterestPolicy) -> AppContainer:
    """A freshly bootstrapped, empty ledger."""
    return bootstrap(policy=policy)
