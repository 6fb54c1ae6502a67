"""
Console notifier for Zaqar.
"""

from zaqar.core import Notifier
from zaqar.logging_config import get_logger
from zaqar.registry import register_notifier

logger = get_logger(__name__)


@register_notifier("console")
class ConsoleNotifier(Notifier):
    """
    Prints reports to stdout.

    Useful for testing and dry runs.

    Config:
        (none required)
    """

    def deliver(self, subject: str, body: str) -> bool:
        """Print the report to the console."""
        logger.debug("Console report: %s", subject)

        print(f"\n{'=' * 60}")
        print(subject)
        print(f"{'-' * 60}")
        print(body)
        print(f"{'=' * 60}\n")
        return True


# Export for dynamic importing
__all__ = ["ConsoleNotifier"]
