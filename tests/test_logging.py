"""Tests for structured logging configuration."""

import io
import json
import sys
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from onlycare.cli import app
from onlycare.utils.logging import configure_logging, get_logger


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_events_go_to_stderr(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Log events are written to stderr, not stdout."""
        stdout, stderr = io.StringIO(), io.StringIO()
        monkeypatch.setattr(sys, "stdout", stdout)
        monkeypatch.setattr(sys, "stderr", stderr)
        configure_logging(level="INFO")

        get_logger("onlycare.tests").warning("stderr_event")

        assert "stderr_event" in stderr.getvalue()
        assert stdout.getvalue() == ""

    def test_logger_follows_replaced_stderr(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A module-level logger keeps working after the stderr it first saw is closed."""
        first = io.StringIO()
        monkeypatch.setattr(sys, "stderr", first)
        configure_logging(level="INFO")
        log = get_logger("onlycare.tests")
        log.warning("first_event")
        first.close()

        second = io.StringIO()
        monkeypatch.setattr(sys, "stderr", second)
        log.warning("second_event")

        assert "second_event" in second.getvalue()

    def test_json_output(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """JSON mode emits one parseable object per event."""
        stderr = io.StringIO()
        monkeypatch.setattr(sys, "stderr", stderr)
        configure_logging(level="INFO", json_output=True)

        get_logger("onlycare.tests").info("json_event", kind="user")

        event = json.loads(stderr.getvalue().strip().splitlines()[-1])
        assert event["event"] == "json_event"
        assert event["kind"] == "user"
        assert event["level"] == "info"

    def test_level_filters_events(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Events below the configured level are dropped."""
        stderr = io.StringIO()
        monkeypatch.setattr(sys, "stderr", stderr)
        configure_logging(level="WARNING")

        get_logger("onlycare.tests").info("hidden_event")

        assert "hidden_event" not in stderr.getvalue()


def test_repeated_cli_runs_log_warnings(tmp_path: Path, raw_transaction: dict[str, Any]) -> None:
    """Consecutive CLI runs in one process can all log timestamp warnings."""
    broken_time = dict(raw_transaction, created_at="garbage")
    path = tmp_path / "transactions.json"
    path.write_text(json.dumps({"data": [broken_time]}), encoding="utf-8")
    runner = CliRunner()

    for _ in range(2):
        result = runner.invoke(app, ["normalize", str(path), "-k", "transaction", "--json"])
        assert result.exit_code == 0, result.output
        assert result.exception is None
