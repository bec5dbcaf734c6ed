"""
CONSTANTS
---------
Single source of truth for wire-level values used by the Loggly client.

Rules:
- If changing a value changes what goes over the wire, it belongs here.
- No magic strings elsewhere in the codebase.
- Other modules MUST import from this file.
"""

from __future__ import annotations

from typing import Final

# =============================================================================
# Ingestion endpoint
# =============================================================================

LOGGLY_DEFAULT_ENDPOINT: Final[str] = "https://logs-01.loggly.com"

# Single-event and bulk paths; {token} is the customer token
LOGGLY_INPUTS_PATH: Final[str] = "/inputs/{token}"
LOGGLY_BULK_PATH: Final[str] = "/bulk/{token}"

LOGGLY_TAG_HEADER: Final[str] = "X-LOGGLY-TAG"
LOGGLY_CONTENT_TYPE: Final[str] = "text/plain; charset=utf-8"

# Loggly acknowledges accepted input with {"response": "ok"}
LOGGLY_OK_RESPONSE: Final[str] = "ok"

HTTP_TIMEOUT_S_DEFAULT: Final[float] = 10.0

# =============================================================================
# Payload encoding
# =============================================================================

# Newline delimits entries in a bulk body
EVENT_DELIMITER: Final[str] = "\n"

# Embedded newlines survive as carriage returns so one event stays one entry
EMBEDDED_NEWLINE_REPLACEMENT: Final[str] = "\r"

# =============================================================================
# Tags
# =============================================================================

TAG_SEPARATOR: Final[str] = ","
