"""
Submission dispatcher.

Responsibilities:
- Hand an encoded body, rendered tags and token to the transport
- Fold the transport outcome into a boolean
- Report failures as diagnostic events

Non-responsibilities:
- No encoding, no tag parsing
- No retries
- Never raises to the caller
"""

from __future__ import annotations

from typing import Optional

from loggly.adapters.transport.base import LogglyTransport
from loggly.enums.status import ResponseStatus
from loggly.observability.logger import log_event, now_ms


class Dispatcher:
    """
    Bridges the client to a LogglyTransport.

    log() and log_bulk() both go through send_bulk(): the wire body is the
    same newline-terminated format for one event or many.
    """

    def __init__(
        self,
        *,
        token: str,
        transport: LogglyTransport,
        emit_diagnostics: bool = True,
    ) -> None:
        self._token = token
        self._transport = transport
        self._emit_diagnostics = emit_diagnostics

    def submit(self, *, tags: Optional[str], body: str, event_count: int) -> bool:
        """
        Send one encoded batch.

        Returns True only when the transport reports ResponseStatus.OK.
        """
        try:
            status = self._transport.send_bulk(self._token, tags, body)
        except Exception as exc:  # pylint: disable=broad-exception-caught
            self._report(
                "LOGGLY_TRANSPORT_ERROR",
                event_count=event_count,
                error=f"{type(exc).__name__}: {exc}",
            )
            return False

        if status != ResponseStatus.OK:
            self._report(
                "LOGGLY_SUBMIT_FAILED",
                event_count=event_count,
                status=str(getattr(status, "value", status)),
            )
            return False

        return True

    def reject(self, reason: str) -> None:
        """Record a submission refused before reaching the transport."""
        self._report("LOGGLY_SUBMIT_REJECTED", reason=reason)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _report(self, event_type: str, **details: object) -> None:
        if not self._emit_diagnostics:
            return
        log_event(
            {
                "ts_ms": now_ms(),
                "event_type": event_type,
                **details,
            }
        )
