from __future__ import annotations

import json
import threading

import pytest
from requests import exceptions as req_exc

from forgiveme.adapters.http_client import HttpConfig, JsonSession
from forgiveme.adapters.webhook_notifier import WebhookNotifier, build_notifier
from forgiveme.domain.entities import ResponseRecord

URL = "https://hooks.example/forgive"

RECORD = ResponseRecord(
    id=1771061400123,
    name="Alex",
    answer="yes",
    time="2026-02-14T09:30:00.123Z",
    page_at="landing",
    extra={"note": "not sent"},
)


class _Resp:
    def __init__(self, status_code: int = 200, payload=None) -> None:
        self.status_code = status_code
        self._payload = payload
        self.text = ""

    def json(self):
        if self._payload is None:
            raise ValueError("no body")
        return self._payload


class _FakeRequestsSession:
    def __init__(self, responses=None, error: Exception | None = None) -> None:
        self.calls = []
        self.responses = list(responses or [_Resp()])
        self.error = error
        self.done = threading.Event()
        self.closed = False

    def post(self, url, data=None, headers=None, timeout=None):
        self.calls.append({"url": url, "data": data, "headers": headers, "timeout": timeout})
        self.done.set()
        if self.error is not None:
            raise self.error
        return self.responses.pop(0)

    def close(self) -> None:
        self.closed = True


def _factory(fake: _FakeRequestsSession):
    def make() -> JsonSession:
        session = JsonSession(HttpConfig(request_timeout_s=3))
        session.session = fake
        return session

    return make


def test_posts_record_fields_as_json() -> None:
    fake = _FakeRequestsSession()
    notifier = WebhookNotifier(URL, session_factory=_factory(fake), background=False)

    notifier.notify(RECORD)

    assert len(fake.calls) == 1
    call = fake.calls[0]
    assert call["url"] == URL
    assert call["headers"]["Content-Type"] == "application/json"
    assert call["timeout"] == 3
    assert json.loads(call["data"]) == {
        "id": 1771061400123,
        "name": "Alex",
        "answer": "yes",
        "time": "2026-02-14T09:30:00.123Z",
        "pageAt": "landing",
    }


@pytest.mark.parametrize(
    "fake",
    [
        _FakeRequestsSession(error=req_exc.ConnectionError("refused")),
        _FakeRequestsSession(error=req_exc.Timeout("slow")),
        _FakeRequestsSession(responses=[_Resp(500)]),
        _FakeRequestsSession(responses=[_Resp(404, {"detail": "missing"})]),
    ],
)
def test_failures_are_swallowed_without_retry(fake) -> None:
    notifier = WebhookNotifier(URL, session_factory=_factory(fake), background=False)

    notifier.notify(RECORD)

    assert len(fake.calls) == 1
    assert fake.closed is True


def test_background_delivery_does_not_block_caller() -> None:
    fake = _FakeRequestsSession()
    notifier = WebhookNotifier(URL, session_factory=_factory(fake))

    notifier.notify(RECORD)

    assert fake.done.wait(timeout=5)
    assert fake.calls[0]["url"] == URL


def test_build_notifier_requires_url() -> None:
    assert build_notifier("") is None
    assert build_notifier("   ") is None
    assert build_notifier(None) is None
    notifier = build_notifier(f"  {URL} ")
    assert isinstance(notifier, WebhookNotifier)
    assert notifier.url == URL


def test_empty_url_is_rejected() -> None:
    with pytest.raises(ValueError):
        WebhookNotifier("")


def test_each_delivery_gets_its_own_session() -> None:
    fakes = []

    def make() -> JsonSession:
        fake = _FakeRequestsSession()
        fakes.append(fake)
        session = JsonSession(HttpConfig(request_timeout_s=3))
        session.session = fake
        return session

    notifier = WebhookNotifier(URL, session_factory=make, background=False)

    notifier.notify(RECORD)
    notifier.notify(RECORD)

    assert len(fakes) == 2
    assert [len(fake.calls) for fake in fakes] == [1, 1]
    assert all(fake.closed for fake in fakes)
