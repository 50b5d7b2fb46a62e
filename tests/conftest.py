"""Pytest configuration shared by the magic number linter tests.

Run pytest from this project's root; pythonpath in pyproject.toml puts src/
and tests/ on sys.path so helpers import as top-level modules.
"""

import pytest

from magic_numbers_linter.infrastructure.di.container import MagicNumbersContainer


@pytest.fixture(autouse=True)
def reset_container():
    """Every test starts without a cached container or configuration."""
    MagicNumbersContainer.reset()
    yield
    MagicNumbersContainer.reset()
