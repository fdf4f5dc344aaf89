"""
Outbound mail for new contact submissions.

Delivery problems are raised as NotificationFailedError so callers can tell
"saved but not notified" apart from "not saved".
"""
import asyncio
import smtplib
from email.message import EmailMessage
from html import escape
from typing import Awaitable, Callable

from config import email_config
from portfolio.models.contact.contact import ContactOut
from portfolio.utils.errors import NotificationFailedError
from portfolio.utils.logger_utils import logger

Notifier = Callable[[ContactOut], Awaitable[None]]


def build_contact_message(contact: ContactOut) -> EmailMessage:
    message = EmailMessage()
    message["Subject"] = f"New Contact Form Submission from {contact.name}"
    message["From"] = email_config["EMAIL_USER"]
    message["To"] = email_config["ADMIN_EMAIL"]
    message["Reply-To"] = contact.email

    submitted = contact.created_at.strftime("%Y-%m-%d %H:%M:%S UTC")
    message.set_content(
        f"Name: {contact.name}\nEmail: {contact.email}\n\n{contact.message}\n\nSubmitted at: {submitted}\n"
    )
    message.add_alternative(
        "<h3>New Contact Form Submission</h3>"
        f"<p><strong>Name:</strong> {escape(contact.name)}</p>"
        f"<p><strong>Email:</strong> {escape(contact.email)}</p>"
        "<p><strong>Message:</strong></p>"
        f"<p>{escape(contact.message)}</p>"
        f"<p><strong>Submitted at:</strong> {submitted}</p>",
        subtype="html",
    )
    return message


def _deliver(message: EmailMessage) -> None:
    with smtplib.SMTP(
        email_config["EMAIL_HOST"], email_config["EMAIL_PORT"], timeout=email_config["TIMEOUT_SECONDS"]
    ) as smtp:
        smtp.starttls()
        smtp.login(email_config["EMAIL_USER"], email_config["EMAIL_PASS"])
        smtp.send_message(message)


async def send_contact_notification(contact: ContactOut) -> None:
    if not (email_config["EMAIL_USER"] and email_config["EMAIL_PASS"] and email_config["ADMIN_EMAIL"]):
        raise NotificationFailedError("Email transport is not configured")

    try:
        # header values reject embedded line breaks with ValueError
        message = build_contact_message(contact)
        await asyncio.to_thread(_deliver, message)
    except (smtplib.SMTPException, OSError, ValueError) as e:
        raise NotificationFailedError(str(e)) from e
    logger.info(f"Sent contact notification for {contact.id}")


def get_notifier() -> Notifier:
    """FastAPI dependency; overridden in tests."""
    return send_contact_notification
