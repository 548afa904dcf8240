"""Pytest configuration and shared fixtures for column-options tests."""

import pytest


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _isolated_environment(tmp_path, monkeypatch):
    """Keep settings and log files out of the developer's home directory."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path / "state"))
    monkeypatch.delenv("COLUMN_OPTIONS_LOG_FILE", raising=False)
    monkeypatch.delenv("COLUMN_OPTIONS_LOG_LEVEL", raising=False)
