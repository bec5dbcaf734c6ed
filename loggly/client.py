"""
Loggly client.

Responsibilities:
- Hold the customer token and transport for the client's lifetime
- Own the current TagSet
- Validate caller input, encode the batch, hand it to the dispatcher

Still NOT responsible for:
- HTTP details (adapters.transport)
- Retries, rate limiting or token management
- Serializing concurrent set_tags() against submissions

Usage example:

    with LogglyClient(token) as loggly:
        loggly.set_tags("web", "prod,eu")
        loggly.log("hello world")
        loggly.log_bulk("E 1", "E 2")
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from typing import Optional

from loggly.adapters.transport.base import LogglyTransport
from loggly.adapters.transport.http import HttpTransport
from loggly.callback import SubmissionCallback
from loggly.config import ClientConfig
from loggly.dispatch import Dispatcher
from loggly.errors import InvalidToken
from loggly.payload.encoder import encode_bulk
from loggly.payload.tags import TagSet


class LogglyClient:
    """
    Submits log events to Loggly.

    States:
    - UNTAGGED: no tags, the tag header is omitted
    - TAGGED: every submission carries the current tag header

    Every call to set_tags() moves between the two. There is no other state.
    """

    def __init__(
        self,
        token: str,
        transport: Optional[LogglyTransport] = None,
        *,
        emit_diagnostics: bool = True,
        owns_transport: Optional[bool] = None,
    ) -> None:
        _check_token(token)

        self._token = token
        # Closes the transport on close() when it was built for this client
        self._owns_transport = transport is None if owns_transport is None else owns_transport
        self._transport = transport if transport is not None else HttpTransport()
        self._dispatcher = Dispatcher(
            token=token,
            transport=self._transport,
            emit_diagnostics=emit_diagnostics,
        )
        self._tags = TagSet()

    @classmethod
    def from_config(cls, config: ClientConfig) -> LogglyClient:
        """Build a client and its HTTP transport from a ClientConfig."""
        _check_token(config.token)

        transport = HttpTransport(
            endpoint=config.endpoint,
            timeout_s=config.timeout_s,
        )
        client = cls(
            config.token,
            transport,
            emit_diagnostics=config.enable_json_logs,
            owns_transport=True,
        )
        if config.tags:
            client.set_tags(config.tags)
        return client

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def token(self) -> str:
        return self._token

    @property
    def tags(self) -> Optional[str]:
        """Current tag header value, or None when untagged."""
        return self._tags.render()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def set_tags(self, *tags: Optional[str]) -> None:
        """
        Replace the current tags.

        Each argument may be a comma-separated list. Empty or whitespace-only
        input leaves the client untagged; it is never an error. Only later
        submissions are affected.
        """
        self._tags = TagSet.parse(tags)

    def log(self, event: Optional[str]) -> bool:
        """
        Submit a single event.

        Returns False without contacting Loggly when event is None.
        """
        if event is None:
            self._dispatcher.reject("event is None")
            return False
        return self._submit([event])

    def log_bulk(self, *events: Optional[str] | Iterable[Optional[str]]) -> bool:
        """
        Submit several events in one request.

        Accepts either varargs (log_bulk("a", "b")) or a single iterable of
        events (list, tuple, deque, generator). Returns False without
        contacting Loggly when the container itself is None (log_bulk(None)).
        None elements inside a batch are passed through to encoding, so
        log_bulk(None, "") sends "None\n\n". An empty batch is still sent,
        as an empty body.
        """
        batch = _as_batch(events)
        if batch is None:
            self._dispatcher.reject("events is None")
            return False
        return self._submit(batch)

    async def log_async(
        self,
        event: Optional[str],
        callback: Optional[SubmissionCallback] = None,
    ) -> bool:
        """
        Awaitable log(). The blocking request runs in a worker thread.

        callback, if given, receives success() or failure(reason).
        """
        ok = await asyncio.to_thread(self.log, event)
        _notify(callback, ok, "event is None" if event is None else "submission failed")
        return ok

    async def log_bulk_async(
        self,
        events: Optional[Iterable[Optional[str]]],
        callback: Optional[SubmissionCallback] = None,
    ) -> bool:
        """Awaitable log_bulk() for a sequence of events."""
        batch = None if events is None else list(events)
        ok = await asyncio.to_thread(self.log_bulk, batch)
        _notify(callback, ok, "events is None" if events is None else "submission failed")
        return ok

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport:
            self._transport.close()

    def __enter__(self) -> LogglyClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _submit(self, batch: list[Optional[str]]) -> bool:
        # Read the tag reference once so header and body belong to one call
        tags = self._tags.render()
        body = encode_bulk(batch)
        return self._dispatcher.submit(tags=tags, body=body, event_count=len(batch))


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------

def _check_token(token: object) -> None:
    if not isinstance(token, str) or not token:
        raise InvalidToken("token must be a non-empty string")


def _as_batch(events: tuple) -> Optional[list[Optional[str]]]:
    """
    Normalize log_bulk() arguments into a batch.

    A lone None is a missing container. A lone non-string iterable (list,
    tuple, deque, generator, ...) is the batch itself. Anything else is the
    varargs batch.
    """
    if len(events) == 1:
        only = events[0]
        if only is None:
            return None
        if isinstance(only, Iterable) and not isinstance(only, (str, bytes)):
            return list(only)
    return list(events)


def _notify(callback: Optional[SubmissionCallback], ok: bool, reason: str) -> None:
    if callback is None:
        return
    if ok:
        callback.success()
    else:
        callback.failure(reason)
