"""
Bulk payload encoding.

Wire format (identical for one or many events):

    <event 1>\n<event 2>\n ... <event N>\n

Newlines inside an event are replaced with carriage returns so Loggly
keeps a multi-line event as a single entry; newline stays the entry
delimiter.

Usage example:

    body = encode_bulk(["E 1", "multi\\nline"])
    # "E 1\nmulti\rline\n"
"""

from __future__ import annotations

from typing import Iterable, Optional

from loggly.constants import EMBEDDED_NEWLINE_REPLACEMENT, EVENT_DELIMITER


def encode_event(event: Optional[str]) -> str:
    """
    Encode one event, without its trailing delimiter.

    None is coerced with str() rather than rejected.
    """
    return str(event).replace(EVENT_DELIMITER, EMBEDDED_NEWLINE_REPLACEMENT)


def encode_bulk(events: Iterable[Optional[str]]) -> str:
    """
    Encode a batch of events into a single request body.

    Pure function: the same batch always yields the same body. Every event,
    including the last, is followed by a newline. An empty batch yields "".
    """
    return "".join(encode_event(event) + EVENT_DELIMITER for event in events)
