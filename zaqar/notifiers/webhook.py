"""
Webhook notifier for Zaqar.
"""

import requests

from zaqar.core import Notifier
from zaqar.logging_config import get_logger
from zaqar.registry import register_notifier

logger = get_logger(__name__)


@register_notifier("webhook")
class WebhookNotifier(Notifier):
    """
    Sends reports via HTTP webhook.

    Config:
        url: Webhook URL to send to
        method: HTTP method, POST or PUT (default: POST)
        headers: Optional HTTP headers
        timeout: Request timeout in seconds (default: 10)
    """

    def deliver(self, subject: str, body: str) -> bool:
        """Send the report as a JSON document."""
        url = self.config["url"]
        method = self.config.get("method", "POST").upper()
        headers = self.config.get("headers", {})
        timeout = self.config.get("timeout", 10)

        payload = {
            "subject": subject,
            "body": body,
            "lines": body.split("\n"),
        }

        try:
            if method == "POST":
                response = requests.post(url, json=payload, headers=headers, timeout=timeout)
            elif method == "PUT":
                response = requests.put(url, json=payload, headers=headers, timeout=timeout)
            else:
                raise ValueError(f"Unsupported HTTP method: {method}")

            response.raise_for_status()
            logger.info("Webhook report sent to %s: %s", url, subject)
            return True
        except requests.RequestException:
            logger.error("Failed to send webhook report: %s", subject, exc_info=True)
            return False


# Export for dynamic importing
__all__ = ["WebhookNotifier"]
