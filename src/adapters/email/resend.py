"""
Resend email sender adapter - Implements EmailSender protocol.

Delivers mail through the Resend HTTP API with requests.

Outside production the provider account may only send to the verified
administrative address, so every message is redirected there and the
body is prefixed with the recipient it was meant for.
"""

import logging
from html import escape

import requests

from src.domain.exceptions import NotificationError

logger = logging.getLogger(__name__)


class ResendEmailSender:
    """
    Implements EmailSender protocol via the Resend REST API.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(
        self,
        api_key: str | None,
        sender: str,
        admin_email: str,
        production: bool = False,
        api_url: str = "https://api.resend.com/emails",
        timeout: float = 10.0,
    ) -> None:
        self._api_key = api_key
        self._sender = sender
        self._admin_email = admin_email
        self._production = production
        self._api_url = api_url
        self._timeout = timeout

    def _target(self, to: str, html: str) -> tuple[str, str]:
        """Pick the real recipient and body for the current environment."""
        if self._production:
            return to, html
        note = f'<p style="color: #ff0000;">[TEST MODE] Original recipient: {escape(to)}</p>'
        return self._admin_email, note + html

    def send(self, to: str, subject: str, html: str, reply_to: str | None = None) -> str:
        """
        Send one email through the provider.

        Returns:
            Resend message id

        Raises:
            NotificationError: Missing credential, transport failure or
                provider error response
        """
        if not self._api_key:
            logger.error("Resend API key: Missing")
            raise NotificationError("Email provider credential is not configured")

        recipient, body = self._target(to, html)
        payload = {
            "from": self._sender,
            "to": [recipient],
            "subject": subject,
            "html": body,
        }
        if reply_to:
            payload["reply_to"] = reply_to

        try:
            resp = requests.post(
                self._api_url,
                json=payload,
                headers={"Authorization": f"Bearer {self._api_key}"},
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            logger.error("Resend request failed: %s", e)
            raise NotificationError("Failed to reach email provider") from e

        try:
            data = resp.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        if not resp.ok:
            detail = data.get("message") or resp.reason or "unknown error"
            logger.error("Resend API error %s: %s", resp.status_code, detail)
            raise NotificationError(f"Email provider error: {detail}")

        message_id = data.get("id")
        if not message_id:
            raise NotificationError("Email provider response has no message id")

        logger.info("Resend accepted message %s for %s", message_id, recipient)
        return message_id
