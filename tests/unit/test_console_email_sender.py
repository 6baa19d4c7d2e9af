"""
Unit tests for ConsoleEmailSender adapter.

Tests verify the console email sender implements EmailSender protocol
and logs messages in the expected format.
"""

import logging

import pytest

from src.adapters.email.console import ConsoleEmailSender


class TestConsoleEmailSenderProtocol:
    """Tests for EmailSender protocol compliance."""

    def test_implements_email_sender_protocol(self) -> None:
        """ConsoleEmailSender implements EmailSender protocol."""
        from src.domain.ports import EmailSender

        sender = ConsoleEmailSender()
        assert callable(sender.send)

        def accepts_email_sender(s: EmailSender) -> None:
            pass

        accepts_email_sender(sender)

    def test_no_explicit_inheritance(self) -> None:
        """ConsoleEmailSender uses structural subtyping, not inheritance."""
        assert ConsoleEmailSender.__bases__ == (object,)


class TestSend:
    """Tests for send method."""

    def test_send_returns_console_id(self) -> None:
        message_id = ConsoleEmailSender().send("ada@example.com", "Hello", "<p>Hi</p>")
        assert message_id.startswith("console-")

    def test_send_ids_are_unique(self) -> None:
        sender = ConsoleEmailSender()
        ids = {sender.send("ada@example.com", "Hello", "<p>Hi</p>") for _ in range(5)}
        assert len(ids) == 5

    def test_send_logs_recipient_and_subject(self, caplog: pytest.LogCaptureFixture) -> None:
        """Recipient and subject are logged at INFO level."""
        with caplog.at_level(logging.INFO):
            ConsoleEmailSender().send("ada@example.com", "Registration Confirmation", "<p>Hi</p>")

        info = [r for r in caplog.records if r.levelno == logging.INFO]
        assert len(info) == 1
        assert "[EMAIL] To: ada@example.com Subject: Registration Confirmation" in info[0].getMessage()

    def test_body_not_logged_at_info(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO):
            ConsoleEmailSender().send("ada@example.com", "Hello", "<p>secret body</p>")
        assert "secret body" not in caplog.text
