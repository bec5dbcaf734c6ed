# pylint: disable=missing-module-docstring,missing-function-docstring,missing-class-docstring

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import pytest

from loggly.adapters.transport.base import LogglyTransport
from loggly.client import LogglyClient
from loggly.enums.status import ResponseStatus


@dataclass
class FakeTransport(LogglyTransport):
    status: ResponseStatus = ResponseStatus.OK
    raises: Optional[Exception] = None
    single_calls: list[tuple[str, Optional[str], str]] = field(default_factory=list)
    bulk_calls: list[tuple[str, Optional[str], str]] = field(default_factory=list)
    closed: bool = False

    def send_single(self, token: str, tags: Optional[str], body: str) -> ResponseStatus:
        self.single_calls.append((token, tags, body))
        if self.raises is not None:
            raise self.raises
        return self.status

    def send_bulk(self, token: str, tags: Optional[str], body: str) -> ResponseStatus:
        self.bulk_calls.append((token, tags, body))
        if self.raises is not None:
            raise self.raises
        return self.status

    def close(self) -> None:
        self.closed = True

    @property
    def interactions(self) -> int:
        return len(self.single_calls) + len(self.bulk_calls)


TOKEN = "1e29e92a-b099-49c5-a260-4c56a71f7c89"


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def loggly(transport: FakeTransport) -> LogglyClient:
    return LogglyClient(TOKEN, transport, emit_diagnostics=False)
