"""Mock mail client for testing and local development."""

from dataclasses import dataclass

import logfire

from updoot.domain.service import MailClient


@dataclass(frozen=True)
class SentMail:
    """An email captured by MockMailClient."""

    to: str
    subject: str
    html: str


class MockMailClient(MailClient):
    """Records emails instead of sending them."""

    def __init__(self) -> None:
        self.outbox: list[SentMail] = []

    async def send(self, to: str, subject: str, html: str) -> None:
        """Capture the email in the outbox."""
        logfire.info("Mock email captured", subject=subject)
        self.outbox.append(SentMail(to=to, subject=subject, html=html))
