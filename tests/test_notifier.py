from __future__ import annotations

import io

import pytest
import requests

from bpreads.errors import DeliveryError
from bpreads.notifier import ConsoleNotifier, MailgunNotifier, RunMode, select_notifier
from bpreads.settings import Settings


class FakeResponse:
    def __init__(self, status_code=200, text="ok"):
        self.status_code = status_code
        self.text = text


class FakeSession:
    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.posts = []

    def post(self, url, **kwargs):
        self.posts.append((url, kwargs))
        if self.exc:
            raise self.exc
        return self.response


def _mailgun(session) -> MailgunNotifier:
    return MailgunNotifier("abc123", "key-1", "me@example.com", session=session)


def test_mailgun_posts_message():
    session = FakeSession(FakeResponse())
    _mailgun(session).deliver('[{"url": "u", "title": "t"}]', "https://blog.test/post1")

    url, kwargs = session.posts[0]
    assert url == "https://api.mailgun.net/v3/sandboxabc123.mailgun.org/messages"
    assert kwargs["auth"] == ("api", "key-1")
    data = kwargs["data"]
    assert data["from"] == "mailgun me <postmaster@sandboxabc123.mailgun.org>"
    assert data["to"] == "<me@example.com>"
    assert data["subject"].startswith("big picture reads json ")
    assert data["text"] == '[{"url": "u", "title": "t"}]'
    assert data["h:X-Source-Post"] == "https://blog.test/post1"


def test_mailgun_error_status_raises():
    session = FakeSession(FakeResponse(status_code=401, text="Forbidden"))
    with pytest.raises(DeliveryError, match="Forbidden"):
        _mailgun(session).deliver("[]", "https://blog.test/post1")


def test_mailgun_transport_error_raises():
    session = FakeSession(exc=requests.exceptions.ConnectionError("down"))
    with pytest.raises(DeliveryError):
        _mailgun(session).deliver("[]", "https://blog.test/post1")


def test_console_notifier_writes_payload():
    stream = io.StringIO()
    ConsoleNotifier(stream).deliver("[]", "https://blog.test/post1")
    assert stream.getvalue() == "[]\n"


class TestSelectNotifier:
    configured = Settings(mailgun_sandbox_id="abc", mailgun_api_key="k", email_address="me@example.com")

    def test_local_mode_uses_console(self):
        assert isinstance(select_notifier(RunMode.LOCAL, self.configured), ConsoleNotifier)

    def test_deliver_mode_uses_mailgun(self):
        notifier = select_notifier(RunMode.DELIVER, self.configured)
        assert isinstance(notifier, MailgunNotifier)
        assert notifier.email_address == "me@example.com"

    def test_unconfigured_falls_back_to_console(self):
        assert isinstance(select_notifier(RunMode.DELIVER, Settings()), ConsoleNotifier)


def test_console_write_failure_raises_delivery_error():
    class BrokenPipe(io.StringIO):
        def write(self, s):
            raise BrokenPipeError("pipe closed")

    with pytest.raises(DeliveryError):
        ConsoleNotifier(BrokenPipe()).deliver("[]", "https://blog.test/post1")
