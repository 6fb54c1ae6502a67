"""
Tests for the run supervisor.
"""

from pathlib import Path
from typing import Any

import pytest

from zaqar.collector import Collector
from zaqar.core import MatcherError, MatcherSpec, PipelineError, Source
from zaqar.supervisor import RunSupervisor, create_supervisor


def source(name: str, path: Path, pattern: str = "ERROR") -> Source:
    """Build a source with a single pattern matcher."""
    return Source(name=name, path=str(path), matchers=(MatcherSpec("pattern", pattern),))


class TestRunSupervisor:
    """Tests for RunSupervisor."""

    def test_runs_every_source(
        self, write_log: Any, collector: Collector, notifier: Any
    ) -> None:
        """Test that all sources are scanned and reported independently."""
        sources = [
            source("app", write_log("app.log", ["ERROR app"])),
            source("db", write_log("db.log", ["ok", "ERROR db 1", "ERROR db 2"])),
            source("quiet", write_log("quiet.log", ["ok"])),
        ]

        supervisor = create_supervisor(sources, collector)
        supervisor.run()

        assert sorted(supervisor.completed) == ["app", "db", "quiet"]
        assert collector.errors("app") == ["ERROR app"]
        assert collector.errors("db") == ["ERROR db 1", "ERROR db 2"]
        assert collector.has_errors("quiet") is False
        assert sorted(notifier.deliveries) == [
            ("Log Errors: app", "ERROR app"),
            ("Log Errors: db", "ERROR db 1\nERROR db 2"),
        ]

    def test_no_sources(self) -> None:
        """Test that an empty supervisor returns immediately."""
        supervisor = RunSupervisor([])
        supervisor.run()

        assert supervisor.completed == []

    def test_missing_file_is_fatal(
        self, write_log: Any, tmp_path: Path, collector: Collector
    ) -> None:
        """Test that an unreadable source aborts the whole run."""
        sources = [
            source("app", write_log("app.log", ["ERROR app"])),
            source("gone", tmp_path / "gone.log"),
        ]

        supervisor = create_supervisor(sources, collector)

        with pytest.raises(PipelineError) as exc_info:
            supervisor.run()

        assert exc_info.value.source_name == "gone"

    def test_invalid_pattern_fails_before_any_scan(
        self, write_log: Any, collector: Collector, notifier: Any
    ) -> None:
        """Test that matcher errors surface while building, not while running."""
        sources = [
            source("app", write_log("app.log", ["ERROR app"])),
            source("bad", write_log("bad.log", ["ERROR"]), pattern="*ERROR"),
        ]

        with pytest.raises(MatcherError):
            create_supervisor(sources, collector)

        assert collector.names() == []
        assert notifier.deliveries == []

    def test_failed_delivery_does_not_stop_other_sources(
        self, write_log: Any, make_notifier: Any
    ) -> None:
        """Test that notification failures are not fatal."""
        notifier = make_notifier(succeed=False)
        collector = Collector(notifier)
        sources = [
            source("app", write_log("app.log", ["ERROR app"])),
            source("db", write_log("db.log", ["ERROR db"])),
        ]

        supervisor = create_supervisor(sources, collector)
        supervisor.run()

        assert sorted(supervisor.completed) == ["app", "db"]
        assert len(notifier.deliveries) == 2

    def test_bad_subject_template_is_not_fatal(
        self, write_log: Any, notifier: Any
    ) -> None:
        """Test that a subject that cannot be built does not abort the run."""
        collector = Collector(notifier, subject_template="Errors on {host}: {name}")
        supervisor = create_supervisor(
            [source("app", write_log("app.log", ["ERROR x"]))], collector
        )

        supervisor.run()

        assert supervisor.completed == ["app"]
        assert collector.errors("app") == ["ERROR x"]
        assert notifier.deliveries == []
