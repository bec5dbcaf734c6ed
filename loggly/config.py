"""
Client configuration.

Responsibilities:
- Read environment variables
- Provide a typed, immutable config object

Non-responsibilities:
- No submission logic
- No wire constants (see constants.py)
- No runtime mutation
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from loggly.constants import HTTP_TIMEOUT_S_DEFAULT, LOGGLY_DEFAULT_ENDPOINT


@dataclass(frozen=True)
class ClientConfig:
    """
    Immutable client configuration.

    Constructed once at process startup and handed to
    LogglyClient.from_config().
    """

    # ------------------------------------------------------------------
    # Account
    # ------------------------------------------------------------------

    token: str

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    endpoint: str = LOGGLY_DEFAULT_ENDPOINT
    timeout_s: float = HTTP_TIMEOUT_S_DEFAULT

    # ------------------------------------------------------------------
    # Tagging
    # ------------------------------------------------------------------

    # Raw, un-normalized tag string (may be a comma list)
    tags: str | None = None

    # ------------------------------------------------------------------
    # Observability
    # ------------------------------------------------------------------

    enable_json_logs: bool = True

    # ------------------------------------------------------------------
    # Factory
    # ------------------------------------------------------------------

    @staticmethod
    def load_from_env() -> ClientConfig:
        """
        Load configuration from environment variables.

        Raises:
            KeyError if LOGGLY_TOKEN is missing.
            ValueError if LOGGLY_TIMEOUT_S is not a number.
        """
        return ClientConfig(
            token=os.environ["LOGGLY_TOKEN"],
            endpoint=os.environ.get("LOGGLY_ENDPOINT", LOGGLY_DEFAULT_ENDPOINT),
            timeout_s=float(os.environ.get("LOGGLY_TIMEOUT_S", HTTP_TIMEOUT_S_DEFAULT)),
            tags=os.environ.get("LOGGLY_TAGS"),
            enable_json_logs=os.environ.get("ENABLE_JSON_LOGS", "1") == "1",
        )
