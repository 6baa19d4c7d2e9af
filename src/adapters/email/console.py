"""
Console email sender adapter - Implements EmailSender protocol.

This module provides a console-based implementation of the domain's
email sender port, logging messages to stdout for development.
"""

import logging
import uuid

logger = logging.getLogger(__name__)


class ConsoleEmailSender:
    """
    Implements EmailSender protocol via console logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    For demo/development purposes - nothing leaves the process.
    """

    def send(self, to: str, subject: str, html: str, reply_to: str | None = None) -> str:
        """
        Log the message to console (simulates email delivery).

        Args:
            to: Recipient email address
            subject: Subject line
            html: HTML body, logged at DEBUG level only
            reply_to: Optional Reply-To address

        Returns:
            Synthetic message id prefixed with "console-"
        """
        message_id = f"console-{uuid.uuid4().hex}"
        logger.info("[EMAIL] To: %s Subject: %s Id: %s", to, subject, message_id)
        logger.debug("[EMAIL] Reply-To: %s Body: %s", reply_to, html)
        return message_id
