"""
Error taxonomy for the Loggly client.

Only construction errors are raised to callers. Caller-input errors and
transport failures are folded into a False return by the client.
"""

from __future__ import annotations


class LogglyClientError(Exception):
    """Base class for Loggly client errors."""


class InvalidToken(LogglyClientError, ValueError):
    """
    Raised when a client is constructed without a usable customer token.

    The token is required for every submission, so a missing or empty token
    is a programming error and fails at construction rather than per call.
    """
