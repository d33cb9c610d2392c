import threading

import pytest

from overseas.core.config import settings
from overseas.services import email as email_module
from overseas.services.email import EmailService


class FakeResponse:
    def __init__(self, status_code=202):
        self.status_code = status_code
        self.body = b""


class RecordingSendGrid:
    sent = []

    def __init__(self, api_key):
        self.api_key = api_key

    def send(self, message):
        RecordingSendGrid.sent.append((threading.get_ident(), message))
        return FakeResponse()


@pytest.fixture
def sendgrid(monkeypatch):
    RecordingSendGrid.sent = []
    monkeypatch.setattr(settings, "SENDGRID_API_KEY", "SG.test-key")
    monkeypatch.setattr(email_module, "SendGridAPIClient", RecordingSendGrid)
    return RecordingSendGrid


@pytest.mark.asyncio
async def test_sendgrid_call_runs_off_the_event_loop_thread(sendgrid):
    loop_thread = threading.get_ident()

    await EmailService._send_email_via_sendgrid(
        "asha@learners.io", "Welcome", "welcome.html", {"first_name": "Asha"}
    )

    assert len(sendgrid.sent) == 1
    sender_thread, message = sendgrid.sent[0]
    assert sender_thread != loop_thread
    assert message.subject.subject == "Welcome"


@pytest.mark.asyncio
async def test_published_email_reaches_sendgrid(sendgrid):
    await EmailService.send_email("asha@learners.io", "Welcome", "welcome.html", {"first_name": "Asha"})

    assert len(sendgrid.sent) == 1


@pytest.mark.asyncio
async def test_missing_api_key_skips_sending(monkeypatch, sendgrid):
    monkeypatch.setattr(settings, "SENDGRID_API_KEY", None)

    await EmailService._send_email_via_sendgrid(
        "asha@learners.io", "Welcome", "welcome.html", {"first_name": "Asha"}
    )

    assert sendgrid.sent == []
