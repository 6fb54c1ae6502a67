"""
Mailgun notifier for Zaqar.
"""

from typing import Any

import requests
from pydantic import BaseModel, Field, field_validator

from zaqar.core import Notifier
from zaqar.logging_config import get_logger
from zaqar.registry import register_notifier

logger = get_logger(__name__)

MAILGUN_API_URL = "https://api.mailgun.net/v3"


class MailgunSettings(BaseModel):
    """Validated Mailgun notifier configuration."""
    domain: str
    api_key: str
    sender: str
    recipients: list[str] = Field(default_factory=list)
    base_url: str = MAILGUN_API_URL
    timeout: float = 10
    public_api_key: str | None = None  # accepted, unused

    @field_validator("recipients", mode="before")
    @classmethod
    def _single_recipient(cls, value: Any) -> Any:
        """Accept a single address as well as a list."""
        if isinstance(value, str):
            return [value]
        return value


@register_notifier("mailgun")
class MailgunNotifier(Notifier):
    """
    Sends reports as plain-text email via the Mailgun messages API.

    Config:
        domain: Mailgun sending domain
        api_key: Mailgun private API key
        sender: From address, e.g. "Ops <ops@example.com>"
        recipients: Address or list of addresses (default: [sender])
        base_url: API base URL (default: https://api.mailgun.net/v3)
        timeout: Request timeout in seconds (default: 10)
        public_api_key: Accepted for compatibility, not used

    Raises:
        pydantic.ValidationError: If required keys are missing or mistyped
    """

    def __init__(self, config: dict[str, Any]):
        super().__init__(config)
        settings = MailgunSettings.model_validate(config)
        self.domain = settings.domain
        self.api_key = settings.api_key
        self.sender = settings.sender
        self.recipients: list[str] = settings.recipients or [self.sender]
        self.base_url = settings.base_url.rstrip("/")
        self.timeout = settings.timeout

    @property
    def messages_url(self) -> str:
        """Endpoint that accepts new messages for the configured domain."""
        return f"{self.base_url}/{self.domain}/messages"

    def deliver(self, subject: str, body: str) -> bool:
        """Send the report via Mailgun."""
        payload = {
            "from": self.sender,
            "to": self.recipients,
            "subject": subject,
            "text": body,
        }

        try:
            response = requests.post(
                self.messages_url,
                auth=("api", self.api_key),
                data=payload,
                timeout=self.timeout
            )
            response.raise_for_status()
            logger.info("Mailgun report sent: %s", subject)
            return True
        except requests.RequestException:
            logger.error("Failed to send Mailgun report: %s", subject, exc_info=True)
            return False


# Export for dynamic importing
__all__ = ["MailgunNotifier"]
