"""
Tag normalization.

Tags arrive as raw caller strings, each of which may itself be a
comma-separated list. They are flattened into one ordered sequence and
rendered as the value of the X-LOGGLY-TAG header.

Rules:
- Every tag is stripped; empty tags are dropped.
- Order is preserved exactly as first seen.
- No de-duplication.
- An empty set renders as None (header omitted), never "".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from loggly.constants import TAG_SEPARATOR


@dataclass(frozen=True)
class TagSet:
    """
    Immutable, ordered set of normalized tags.

    Replaced wholesale by the client on every set_tags() call, so a
    submission in flight always sees one consistent value.
    """

    tags: tuple[str, ...] = ()

    @classmethod
    def parse(cls, raw_tags: Optional[Iterable[Optional[str]]]) -> TagSet:
        """
        Build a TagSet from raw tag arguments.

        Each raw string is split on commas; sub-tokens are stripped and
        empty ones discarded. None arguments are skipped.
        """
        if not raw_tags:
            return cls()

        parsed: list[str] = []
        for raw in raw_tags:
            if raw is None:
                continue
            for token in raw.split(TAG_SEPARATOR):
                token = token.strip()
                if token:
                    parsed.append(token)

        return cls(tags=tuple(parsed))

    @property
    def is_empty(self) -> bool:
        return not self.tags

    def render(self) -> Optional[str]:
        """Comma-joined header value, or None when there are no tags."""
        if not self.tags:
            return None
        return TAG_SEPARATOR.join(self.tags)
