"""Shared pytest fixtures."""

import pytest

import core.audit


@pytest.fixture(autouse=True)
def isolated_event_log(tmp_path, monkeypatch):
    """Send analysis events to a temporary file for every test."""
    log_file = tmp_path / "logs" / "analysis_events.jsonl"
    monkeypatch.setattr(core.audit, "AUDIT_LOG_FILE", str(log_file))
    monkeypatch.setattr(core.audit, "AUDIT_LOG_ENABLED", True)
    return log_file
