"""
Registrant notifications - email templates and the best-effort delivery boundary.

Email is a side effect of the workflows, never part of their outcome.
deliver_best_effort() is the single place where a Notifier failure is
absorbed: it always returns a DeliveryReport and never raises, so a slow or
failing provider can add latency to a request but cannot fail it.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from html import escape

from .exceptions import NotificationError
from .ports import EmailSender, RegistrationStatus

logger = logging.getLogger(__name__)

CONFIRMATION_SUBJECT = "Registration Confirmation - SUI Nigeria Event"
APPROVED_SUBJECT = "Registration Approved - SUI Nigeria Event"
UPDATE_SUBJECT = "Registration Update - SUI Nigeria Event"
TEST_SUBJECT = "Test Email - SUI Nigeria"

_APPROVED_TEXT = "Your registration has been approved! We look forward to seeing you at the event."
_REJECTED_TEXT = "Unfortunately, we are unable to accommodate your registration at this time."


@dataclass(frozen=True)
class EmailMessage:
    """A rendered email ready for the Notifier."""

    to: str
    subject: str
    html: str
    reply_to: str | None = None


@dataclass(frozen=True)
class DeliveryReport:
    """Logged outcome of a best-effort delivery."""

    delivered: bool
    message_id: str | None = None
    error: str | None = None


def event_title(event: str, titles: Mapping[str, str] | None = None) -> str:
    """Display title of an event; unknown ids are shown as-is."""
    return (titles or {}).get(event, event)


def _layout(heading: str, paragraphs: list[str], title: str) -> str:
    body = "\n".join(f"  <p>{paragraph}</p>" for paragraph in paragraphs)
    return (
        '<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">\n'
        f'  <h1 style="color: #25B96B;">{escape(heading)}</h1>\n'
        f"{body}\n"
        '  <div style="background-color: #f5f5f5; padding: 15px; border-radius: 5px; margin: 20px 0;">\n'
        '    <h2 style="color: #1A4D2E; margin-top: 0;">Event Details</h2>\n'
        f'    <p style="margin-bottom: 0;"><strong>Event:</strong> {escape(title)}</p>\n'
        "  </div>\n"
        "  <p>If you have any questions, please don't hesitate to reach out to us.</p>\n"
        "  <p>Best regards,<br>SUI Nigeria Team</p>\n"
        "</div>"
    )


def confirmation_message(
    email: str, full_name: str, event: str, titles: Mapping[str, str] | None = None
) -> EmailMessage:
    """Acknowledge a new registration that is awaiting approval."""
    title = event_title(event, titles)
    html = _layout(
        "Registration Confirmation",
        [
            f"Hello {escape(full_name)},",
            f"Thank you for registering for the {escape(title)}. "
            "We're excited to have you join us!",
            "Your registration is currently pending approval. "
            "We'll send you another email once your registration is confirmed.",
        ],
        title,
    )
    return EmailMessage(to=email, subject=CONFIRMATION_SUBJECT, html=html, reply_to=email)


def status_update_message(
    email: str,
    full_name: str,
    event: str,
    status: RegistrationStatus,
    titles: Mapping[str, str] | None = None,
) -> EmailMessage | None:
    """
    Tell the registrant their registration was approved or rejected.

    Returns None for PENDING; moving a registration back to review is silent.
    """
    if status == RegistrationStatus.APPROVED:
        subject, text = APPROVED_SUBJECT, _APPROVED_TEXT
    elif status == RegistrationStatus.REJECTED:
        subject, text = UPDATE_SUBJECT, _REJECTED_TEXT
    else:
        return None

    html = _layout(
        f"Registration {status.value.capitalize()}",
        [f"Hello {escape(full_name)},", text],
        event_title(event, titles),
    )
    return EmailMessage(to=email, subject=subject, html=html)


def provider_check_message(to: str) -> EmailMessage:
    """Plain message used to check the provider configuration."""
    return EmailMessage(
        to=to,
        subject=TEST_SUBJECT,
        html="This is a test email to verify the Resend configuration.",
    )


def deliver_best_effort(sender: EmailSender, message: EmailMessage) -> DeliveryReport:
    """
    Send a message, absorbing every failure into the returned report.

    Args:
        sender: Notifier capability
        message: Rendered email

    Returns:
        DeliveryReport with the provider id on success, the error text otherwise
    """
    try:
        message_id = sender.send(
            message.to, message.subject, message.html, reply_to=message.reply_to
        )
    except NotificationError as e:
        logger.warning("Email delivery failed for %s (%s): %s", message.to, message.subject, e)
        return DeliveryReport(delivered=False, error=str(e))
    except Exception as e:
        logger.exception("Unexpected error sending email to %s (%s)", message.to, message.subject)
        return DeliveryReport(delivered=False, error=str(e))

    logger.info("Email sent to %s (%s), id=%s", message.to, message.subject, message_id)
    return DeliveryReport(delivered=True, message_id=message_id)
