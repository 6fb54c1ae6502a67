"""
Pytest configuration and fixtures for Zaqar tests.
"""

import logging
import threading
from pathlib import Path
from typing import Any

import pytest

from zaqar.collector import Collector
from zaqar.core import Notifier


class RecordingNotifier(Notifier):
    """Notifier that remembers every delivery instead of sending it."""

    def __init__(self, config: dict[str, Any] | None = None, succeed: bool = True):
        super().__init__(config or {})
        self.succeed = succeed
        self.deliveries: list[tuple[str, str]] = []
        self._lock = threading.Lock()

    def deliver(self, subject: str, body: str) -> bool:
        with self._lock:
            self.deliveries.append((subject, body))
        return self.succeed


@pytest.fixture
def notifier() -> RecordingNotifier:
    """A notifier that records deliveries."""
    return RecordingNotifier()


@pytest.fixture
def collector(notifier: RecordingNotifier) -> Collector:
    """A collector wired to the recording notifier."""
    return Collector(notifier)


@pytest.fixture
def write_log(tmp_path: Path):
    """Write lines to a log file under tmp_path and return its path."""
    def _write(name: str, lines: list[str]) -> Path:
        path = tmp_path / name
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def make_notifier():
    """Factory for recording notifiers with a chosen delivery result."""
    return RecordingNotifier


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo setup_logging between tests so caplog sees zaqar records."""
    yield
    zaqar_logger = logging.getLogger("zaqar")
    zaqar_logger.handlers.clear()
    zaqar_logger.propagate = True
    zaqar_logger.setLevel(logging.NOTSET)
