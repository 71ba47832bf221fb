"""Pytest configuration and fixtures."""

import pytest

from jvmsig import diagnostics


@pytest.fixture(autouse=True)
def restore_diagnostics():
    """Undo any change a test makes to the enabled diagnostics."""
    saved = set(diagnostics.enabled_diagnostics)
    yield
    diagnostics.enabled_diagnostics.clear()
    diagnostics.enabled_diagnostics.update(saved)
