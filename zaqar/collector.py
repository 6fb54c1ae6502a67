"""
Thread-safe aggregation of matched lines per source.
"""

import threading

from zaqar.core import Notifier
from zaqar.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_SUBJECT_TEMPLATE = "Log Errors: {name}"


class Collector:
    """
    Collects matched lines keyed by source name and reports them.

    A single lock guards the whole mapping. A name is present only once
    at least one line has been added for it, so absence means zero
    matches. Lines for a name keep the order in which they were added.
    """

    def __init__(
        self,
        notifier: Notifier,
        subject_template: str = DEFAULT_SUBJECT_TEMPLATE
    ) -> None:
        """
        Initialize the collector.

        Args:
            notifier: Delivery channel for per-source reports
            subject_template: Report subject, formatted with ``name``
        """
        self.notifier = notifier
        self.subject_template = subject_template
        self._errors: dict[str, list[str]] = {}
        self._lock = threading.Lock()

    def add(self, name: str, message: str) -> None:
        """Append a matched line for a source."""
        with self._lock:
            self._errors.setdefault(name, []).append(message)

    def has_errors(self, name: str) -> bool:
        """Check if a source has any matched lines."""
        with self._lock:
            return name in self._errors

    def errors(self, name: str) -> list[str]:
        """Return a copy of the matched lines for a source."""
        with self._lock:
            return list(self._errors.get(name, []))

    def names(self) -> list[str]:
        """Return the names of all sources with matched lines."""
        with self._lock:
            return list(self._errors)

    def subject(self, name: str) -> str:
        """Build the report subject for a source."""
        return self.subject_template.format(name=name)

    def send(self, name: str) -> bool:
        """
        Deliver one aggregated report for a source.

        Does nothing when the source has no matched lines. Delivery
        failures are logged and never raised.

        Args:
            name: Source name

        Returns:
            True if a report was delivered, False if there was nothing to
            send or delivery failed
        """
        lines = self.errors(name)
        if not lines:
            logger.debug("No matched lines for '%s', nothing to send", name)
            return False

        body = "\n".join(lines)
        logger.info("Sending %d matched line(s) for '%s'", len(lines), name)
        logger.info("Sending: %s", body)

        try:
            subject = self.subject(name)
        except (AttributeError, IndexError, KeyError, ValueError):
            logger.error(
                "Invalid subject template %r for '%s'",
                self.subject_template,
                name,
                exc_info=True
            )
            return False

        try:
            delivered = self.notifier.deliver(subject, body)
        except Exception:
            logger.error(
                "Error sending report via %s for '%s'",
                self.notifier.__class__.__name__,
                name,
                exc_info=True
            )
            return False

        if not delivered:
            logger.error("Could not send report for '%s'", name)
        return delivered
