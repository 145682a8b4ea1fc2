"""
Remote Classifier Interface

Contract for the external, fallible service that performs richer
triage reasoning and writes weekly narratives and thought reframes.

Every method returns the raw response text. Callers treat it as
untrusted and do their own extraction and validation.
"""

from abc import ABC, abstractmethod
from typing import Optional


class RemoteClassifierError(Exception):
    """Base exception for remote classifier failures."""

    kind: str = "error"

    def __init__(self, message: str, original_error: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.original_error = original_error


class RemoteUnavailable(RemoteClassifierError):
    """Network failure, timeout or non-success status."""

    kind = "unavailable"


class RemoteMalformed(RemoteClassifierError):
    """Response arrived but has no usable JSON object or fails validation."""

    kind = "malformed"


class RemoteClassifier(ABC):
    """
    Abstract remote classifier.

    Implementations must raise RemoteUnavailable for transport problems
    and may return any text otherwise. They must not retry: one attempt
    per call, the caller falls back immediately.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Classifier name for logging and metrics."""

    @abstractmethod
    async def classify_triage(self, payload: dict) -> str:
        """Send a triage request body and return the raw response text."""

    @abstractmethod
    async def generate_insight(self, payload: dict) -> str:
        """Send a weekly insight request body and return the raw response text."""

    @abstractmethod
    async def generate_reframe(self, payload: dict) -> str:
        """Send a thought reframe request body and return the raw response text."""

    async def health_check(self) -> bool:
        return True

    async def close(self) -> None:
        """Release transport resources, if any."""
