# pylint: disable=missing-module-docstring,missing-function-docstring,missing-class-docstring

from __future__ import annotations

import json
from typing import Any

import pytest
import requests

from loggly.adapters.transport.http import HttpTransport
from loggly.enums.status import ResponseStatus


def make_response(status_code: int, body: str) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = body.encode("utf-8")  # pylint: disable=protected-access
    return response


class FakeSession:
    def __init__(self, response: requests.Response | None = None, raises: Exception | None = None) -> None:
        self.response = response if response is not None else make_response(200, json.dumps({"response": "ok"}))
        self.raises = raises
        self.posts: list[dict[str, Any]] = []
        self.closed = False

    def post(self, url: str, **kwargs: Any) -> requests.Response:
        self.posts.append({"url": url, **kwargs})
        if self.raises is not None:
            raise self.raises
        return self.response

    def close(self) -> None:
        self.closed = True


def make_transport(session: FakeSession, **kwargs: Any) -> HttpTransport:
    return HttpTransport(session=session, **kwargs)  # type: ignore[arg-type]


# ---------------------------------------------------------------------
# Request shape
# ---------------------------------------------------------------------

def test_bulk_posts_to_bulk_input() -> None:
    session = FakeSession()
    transport = make_transport(session)

    assert transport.send_bulk("tok", "foo,bar", "E 1\nE 2\n") is ResponseStatus.OK

    post = session.posts[0]
    assert post["url"] == "https://logs-01.loggly.com/bulk/tok"
    assert post["data"] == b"E 1\nE 2\n"
    assert post["headers"]["X-LOGGLY-TAG"] == "foo,bar"
    assert post["headers"]["Content-Type"] == "text/plain; charset=utf-8"


def test_single_posts_to_inputs() -> None:
    session = FakeSession()
    transport = make_transport(session)

    transport.send_single("tok", None, "hello")

    assert session.posts[0]["url"] == "https://logs-01.loggly.com/inputs/tok"


def test_tag_header_omitted_without_tags() -> None:
    session = FakeSession()
    make_transport(session).send_bulk("tok", None, "event\n")

    assert "X-LOGGLY-TAG" not in session.posts[0]["headers"]


def test_custom_endpoint_and_timeout() -> None:
    session = FakeSession()
    transport = make_transport(session, endpoint="http://localhost:8080/", timeout_s=2.5)

    transport.send_bulk("tok", None, "event\n")

    assert session.posts[0]["url"] == "http://localhost:8080/bulk/tok"
    assert session.posts[0]["timeout"] == 2.5


def test_body_is_utf8_encoded() -> None:
    session = FakeSession()
    make_transport(session).send_bulk("tok", None, "héllo\n")

    assert session.posts[0]["data"] == "héllo\n".encode("utf-8")


# ---------------------------------------------------------------------
# Response mapping
# ---------------------------------------------------------------------

@pytest.mark.parametrize(
    ("status_code", "body", "expected"),
    [
        (200, '{"response": "ok"}', ResponseStatus.OK),
        (200, '{"response": "error"}', ResponseStatus.ERROR),
        (200, "not json", ResponseStatus.ERROR),
        (200, '["ok"]', ResponseStatus.ERROR),
        (403, '{"response": "ok"}', ResponseStatus.ERROR),
        (500, "", ResponseStatus.ERROR),
    ],
)
def test_response_mapping(status_code: int, body: str, expected: ResponseStatus) -> None:
    session = FakeSession(make_response(status_code, body))

    assert make_transport(session).send_bulk("tok", None, "e\n") is expected


def test_network_errors_propagate_to_caller() -> None:
    session = FakeSession(raises=requests.ConnectionError("refused"))

    with pytest.raises(requests.ConnectionError):
        make_transport(session).send_bulk("tok", None, "e\n")


# ---------------------------------------------------------------------
# Session ownership
# ---------------------------------------------------------------------

def test_injected_session_is_not_closed() -> None:
    session = FakeSession()
    make_transport(session).close()

    assert session.closed is False


def test_owned_session_is_closed(monkeypatch: pytest.MonkeyPatch) -> None:
    created: list[FakeSession] = []

    def fake_session() -> FakeSession:
        session = FakeSession()
        created.append(session)
        return session

    monkeypatch.setattr(requests, "Session", fake_session)

    HttpTransport().close()

    assert created[0].closed is True
