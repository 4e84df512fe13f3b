"""Tests for shared utilities: timestamps, event log and logger setup."""

import json
from datetime import datetime, timedelta, timezone

import pytest
from loguru import logger

from quill.utils.event_logging import get_recent_events, log_resume_event
from quill.utils.logger import setup_logger
from quill.utils.timestamp import format_timestamp, now, now_exact


class TestTimestamps:
    """Timestamp helpers."""

    @pytest.mark.unit
    def test_now_exact_is_parseable_utc(self):
        parsed = datetime.fromisoformat(now_exact())
        assert parsed.tzinfo is not None
        assert parsed.utcoffset() == timedelta(0)

    @pytest.mark.unit
    def test_now_is_compact(self):
        assert len(now()) == len("20251114_123456")

    @pytest.mark.unit
    def test_format_absolute(self):
        assert format_timestamp("2025-11-13T18:45:40.572549+00:00") == "2025-11-13 18:45:40"

    @pytest.mark.unit
    def test_format_relative(self):
        two_hours_ago = (datetime.now(timezone.utc) - timedelta(hours=2, minutes=5)).isoformat()
        assert format_timestamp(two_hours_ago, relative=True) == "2h ago"

    @pytest.mark.unit
    def test_unparseable_returned_unchanged(self):
        assert format_timestamp("yesterday") == "yesterday"


class TestEventLog:
    """JSON Lines resume event log."""

    @pytest.mark.unit
    def test_disabled_without_events_file(self, tmp_path):
        log_resume_event("resume_created", "r-1", "api")
        assert get_recent_events() == []
        assert not list(tmp_path.rglob("*.log"))

    @pytest.mark.unit
    def test_appends_one_json_line_per_event(self, events_file):
        log_resume_event("resume_created", "r-1", "api", user_id=1)
        log_resume_event("resume_exported", "r-1", "cli", format="pdf")

        lines = events_file.read_text().splitlines()
        assert len(lines) == 2
        first = json.loads(lines[0])
        assert first["event_type"] == "resume_created"
        assert first["user_id"] == 1
        assert "timestamp" in first

    @pytest.mark.unit
    def test_recent_events_filters_and_limits(self, events_file):
        for i in range(5):
            log_resume_event("resume_updated", f"r-{i % 2}", "api", fields=["title"])
        log_resume_event("resume_deleted", "r-0", "api")

        assert len(get_recent_events(n=3)) == 3
        assert {e["resume_id"] for e in get_recent_events(n=10, resume_id="r-1")} == {"r-1"}
        assert [e["event_type"] for e in get_recent_events(n=10, event_type="resume_deleted")] == ["resume_deleted"]

    @pytest.mark.unit
    def test_malformed_lines_skipped(self, events_file):
        log_resume_event("resume_created", "r-1", "api")
        with open(events_file, "a", encoding="utf-8") as f:
            f.write("not json\n")

        assert len(get_recent_events()) == 1


class TestLoggerSetup:
    """loguru session logs."""

    @pytest.mark.unit
    def test_setup_logger_writes_provenance(self, tmp_path):
        log_file = setup_logger("cli", tmp_path / "session", extra_provenance={"Store backend": "memory"})
        logger.debug("[store] debug detail")

        content = log_file.read_text()
        assert log_file == tmp_path / "session" / "cli.log"
        assert "Store backend: memory" in content
        assert "[store] debug detail" in content
