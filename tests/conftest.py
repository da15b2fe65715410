"""Pytest configuration and shared fixtures for callout-picker tests."""

import pytest


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep config and log files out of the real home directory."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("CALLOUT_PICKER_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.delenv("CALLOUT_PICKER_LOG_FILE", raising=False)
    monkeypatch.delenv("CALLOUT_PICKER_LOG_LEVEL", raising=False)
    return tmp_path
