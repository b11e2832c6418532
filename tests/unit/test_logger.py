"""
Tests for src.utils.logger: sinks, the decision log and redaction.
"""

import pytest
from loguru import logger

from src.utils.config import AppSettings, LoggingSettings, reload_settings
from src.utils.logger import (
    DECISION_LOG_NAME,
    _sanitize_for_logging,
    audit_log,
    decision_log_path,
    get_logger,
    setup_logging,
)


@pytest.fixture
def decision_records():
    """Collect records routed to the decision log."""
    records = []
    sink_id = logger.add(
        records.append,
        format="{extra[audit_type]} | {message}",
        filter=lambda record: "audit_type" in record["extra"],
    )
    yield records
    logger.remove(sink_id)


@pytest.fixture
def file_logging(monkeypatch, tmp_path):
    """Enable file sinks under tmp_path, restoring the test configuration afterwards."""
    monkeypatch.setenv("LOG_FILE_OUTPUT", "true")
    monkeypatch.setenv("LOG_FILE_PATH", str(tmp_path / "logs" / "shortlist.log"))
    reload_settings()
    setup_logging()
    yield tmp_path / "logs"
    logger.complete()
    monkeypatch.undo()
    reload_settings()
    setup_logging()


# ── _sanitize_for_logging ────────────────────────────────────────────────────


class TestSanitizeForLogging:
    def test_personal_fields_redacted(self):
        data = {"candidate_id": 7, "first_name": "Aisyah", "email": "a@example.com"}
        assert _sanitize_for_logging(data) == {
            "candidate_id": 7,
            "first_name": "***REDACTED***",
            "email": "***REDACTED***",
        }

    def test_nested_structures(self):
        data = {"results": [{"phone": "+60 12", "score": 4}]}
        assert _sanitize_for_logging(data) == {"results": [{"phone": "***REDACTED***", "score": 4}]}

    def test_reasons_kept(self):
        data = {"reasons": ["Age 41 outside range 25-35"]}
        assert _sanitize_for_logging(data) == data


# ── audit_log / decision_log_path ────────────────────────────────────────────


class TestAuditLog:
    def test_record_tagged_and_sanitized(self, decision_records):
        audit_log("candidate_eliminated", {"candidate_id": 2, "last_name": "Kumar"})
        assert len(decision_records) == 1
        line = str(decision_records[0])
        assert line.startswith("DECISION | candidate_eliminated")
        assert "Kumar" not in line

    def test_plain_logs_not_routed(self, decision_records):
        get_logger(__name__).info("Job 9: 3 candidates")
        assert decision_records == []

    def test_decision_log_next_to_app_log(self, tmp_path):
        settings = AppSettings(logging=LoggingSettings(file_path=tmp_path / "app.log"))
        assert decision_log_path(settings) == tmp_path / DECISION_LOG_NAME

    def test_file_sinks_split_decisions(self, file_logging):
        get_logger(__name__).info("plain message")
        audit_log("candidate_ranked", {"candidate_id": 1, "rank": 1})
        logger.complete()

        decisions = (file_logging / DECISION_LOG_NAME).read_text(encoding="utf-8")
        assert "candidate_ranked" in decisions
        assert "plain message" not in decisions
        assert "plain message" in (file_logging / "shortlist.log").read_text(encoding="utf-8")
