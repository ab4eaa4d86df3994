"""Outbound mail adapters."""

from .mock import MockMailClient, SentMail
from .smtp import SMTPMailClient

__all__ = ["MockMailClient", "SMTPMailClient", "SentMail"]
