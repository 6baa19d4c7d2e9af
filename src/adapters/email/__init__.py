"""Email adapters - Notifier implementations."""

from .console import ConsoleEmailSender
from .resend import ResendEmailSender

__all__ = ["ConsoleEmailSender", "ResendEmailSender"]
