"""
JSONL diagnostic logger for the Loggly client.

The client reports its own problems here, never through Loggly itself:
a failed submission cannot be relied on to report its own failure.

Event types written by the dispatcher:
- LOGGLY_SUBMIT_REJECTED   None input refused before the transport
- LOGGLY_SUBMIT_FAILED     transport answered with a non-OK status
- LOGGLY_TRANSPORT_ERROR   transport raised (network, timeout, ...)

Output: one JSON object per line on stdout, flushed immediately.
"""

from __future__ import annotations

import json
import sys
import time
from typing import Any, Mapping, Callable


# ------------------------------------------------------------------
# Explicit output sink (patchable in tests)
# ------------------------------------------------------------------

def _stdout_print(line: str) -> None:
    sys.stdout.write(line + "\n")
    sys.stdout.flush()

_print: Callable[[str], None] = _stdout_print


def now_ms() -> int:
    """Wall-clock timestamp in milliseconds (coarse)."""
    return int(time.time() * 1000)


def log_event(event: Mapping[str, Any]) -> None:
    """
    Write one diagnostic event as a JSONL line.

    Expected keys: ts_ms, event_type, plus event-specific details such as
    event_count, status, error or reason.

    Never raises. An event whose details cannot be serialized (for example
    an exception object passed instead of its text) is replaced by a
    LOGGER_SERIALIZATION_ERROR line that keeps the original event_type and
    its repr, so the failure being reported is not lost.
    """
    try:
        line = json.dumps(event, ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError) as e:
        fallback: dict[str, Any] = {
            "ts_ms": event.get("ts_ms"),
            "event_type": "LOGGER_SERIALIZATION_ERROR",
            "failed_event_type": event.get("event_type"),
            "error": str(e),
            "event_repr": repr(event),
        }
        line = json.dumps(fallback, ensure_ascii=False, separators=(",", ":"))

    _print(line)
