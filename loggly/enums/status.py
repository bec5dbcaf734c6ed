"""
Transport response status.

Rules:
- The client only distinguishes OK from everything else.
- No structured error detail is carried here.
"""

from __future__ import annotations

from enum import Enum


class ResponseStatus(str, Enum):
    """
    Outcome of a single transport call.

    OK:
        Loggly accepted the payload.

    ERROR:
        Anything else (non-2xx, unexpected body, unreadable response).
    """

    OK = "ok"
    ERROR = "error"
