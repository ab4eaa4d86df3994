"""SMTP mail client."""

import asyncio
import smtplib
from email.message import EmailMessage

import logfire

from updoot.adapter.error import MailError
from updoot.config import MailSettings
from updoot.domain.service import MailClient


class SMTPMailClient(MailClient):
    """Sends HTML email through an SMTP relay.

    smtplib blocks, so each send runs in a worker thread.
    """

    def __init__(self, settings: MailSettings) -> None:
        """Initialize SMTP client.

        Args:
            settings: Mail settings (relay host, credentials, sender)
        """
        self.settings = settings

    def _build_message(self, to: str, subject: str, html: str) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self.settings.sender
        message["To"] = to
        message["Subject"] = subject
        message.set_content(html, subtype="html")
        return message

    def _send_sync(self, message: EmailMessage) -> None:
        with smtplib.SMTP(
            self.settings.host,
            self.settings.port,
            timeout=self.settings.timeout_seconds,
        ) as smtp:
            if self.settings.use_tls:
                smtp.starttls()
            if self.settings.username and self.settings.password:
                smtp.login(self.settings.username, self.settings.password)
            smtp.send_message(message)

    async def send(self, to: str, subject: str, html: str) -> None:
        """Send an HTML email.

        Raises:
            MailError: If the relay refused the message or was unreachable
        """
        with logfire.span("smtp.send", subject=subject, host=self.settings.host):
            message = self._build_message(to, subject, html)
            try:
                await asyncio.to_thread(self._send_sync, message)
            except (smtplib.SMTPException, OSError) as e:
                logfire.error("Email delivery failed", error=str(e))
                raise MailError(f"Failed to send email: {e}") from e
            logfire.info("Email sent", subject=subject)
