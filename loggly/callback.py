"""
Completion callback for async submissions.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class SubmissionCallback(ABC):
    """
    Receives the outcome of log_async() / log_bulk_async().

    Exactly one of success() or failure() is called per submission.
    """

    @abstractmethod
    def success(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def failure(self, reason: str) -> None:
        raise NotImplementedError
