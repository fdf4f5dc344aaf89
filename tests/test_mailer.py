import asyncio
from datetime import datetime

import pytest

from config import email_config
from portfolio.models.contact.contact import ContactOut
from portfolio.services.notification import mailer
from portfolio.utils.errors import NotificationFailedError


def _contact(**overrides):
    data = {
        "id": "64b000000000000000000001",
        "name": "Ada <b>",
        "email": "ada@portfolio.dev",
        "message": "<script>x</script>",
        "createdAt": datetime(2025, 1, 2, 3, 4, 5),
        "read": False,
    }
    data.update(overrides)
    return ContactOut.model_validate(data)


@pytest.fixture
def configured(monkeypatch):
    monkeypatch.setitem(email_config, "EMAIL_USER", "site@portfolio.dev")
    monkeypatch.setitem(email_config, "EMAIL_PASS", "secret")
    monkeypatch.setitem(email_config, "ADMIN_EMAIL", "owner@portfolio.dev")


def test_unconfigured_transport_fails(monkeypatch):
    monkeypatch.setitem(email_config, "EMAIL_USER", None)
    with pytest.raises(NotificationFailedError):
        asyncio.run(mailer.send_contact_notification(_contact()))


def test_message_escapes_html(configured):
    message = mailer.build_contact_message(_contact())
    assert message["To"] == "owner@portfolio.dev"
    assert message["Reply-To"] == "ada@portfolio.dev"
    html = message.get_body(preferencelist=("html",)).get_content()
    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_delivery_errors_become_notification_failures(configured, monkeypatch):
    def _refuse(_message):
        raise ConnectionRefusedError("no smtp here")

    monkeypatch.setattr(mailer, "_deliver", _refuse)
    with pytest.raises(NotificationFailedError):
        asyncio.run(mailer.send_contact_notification(_contact()))


def test_header_injection_becomes_notification_failure(configured, monkeypatch):
    monkeypatch.setattr(mailer, "_deliver", lambda _message: None)
    with pytest.raises(NotificationFailedError):
        asyncio.run(mailer.send_contact_notification(_contact(name="Ada\nBcc: everyone@portfolio.dev")))
