"""
Loggly transport contract.

This module defines the *interface only*: no payload encoding, no tag
parsing, no retries and no success/failure folding live here.

Key invariants:
- The body is pre-encoded by the client. Transports send it verbatim.
- Tags arrive pre-rendered as a single header value, or None for no tags.
- A transport reports OK only when Loggly acknowledged the payload.
- A transport MAY raise on network failure; the dispatcher folds the
  exception into a failed submission.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from loggly.enums.status import ResponseStatus


class LogglyTransport(ABC):
    """
    Abstract interface for delivering encoded payloads to Loggly.

    The transport is a *dumb pipe*:
    token + tags + body -> vendor -> status.

    Client responsibilities (NOT here):
    - Input validation
    - Tag normalization
    - Payload encoding
    - Turning failures into a boolean result
    """

    @abstractmethod
    def send_single(
        self,
        token: str,
        tags: Optional[str],
        body: str,
    ) -> ResponseStatus:
        """
        Send one event to the single-event input.

        Args:
            token: Customer token identifying the Loggly account.
            tags: Rendered tag header value, or None to omit the header.
            body: Event text, sent as-is.

        Contract:
        - Must return ResponseStatus.OK only on an acknowledged submission.
        - Must NOT retry internally.
        """
        raise NotImplementedError

    @abstractmethod
    def send_bulk(
        self,
        token: str,
        tags: Optional[str],
        body: str,
    ) -> ResponseStatus:
        """
        Send a newline-delimited batch to the bulk input.

        Same contract as send_single(); the whole batch succeeds or fails
        as one.
        """
        raise NotImplementedError

    def close(self) -> None:
        """Release any held resources. Default: nothing to release."""
