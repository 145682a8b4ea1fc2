"""
LLM Provider Abstract Interface

Defines the contract for the language-model backends used by the
in-process classifier. Providers are swappable via configuration.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional

from haven.services.prompt.prompt_builder import BuiltPrompt


@dataclass
class LLMResponse:
    """
    Response from an LLM provider.

    Attributes:
        content: Generated text, untrusted
        finish_reason: Why generation stopped
        usage: Token usage statistics
        model: Model identifier used
        provider: Provider name
        latency_ms: Response time in milliseconds
        raw_response: Original API response (for debugging)
    """

    content: str
    finish_reason: str = "stop"
    usage: dict = field(default_factory=dict)
    model: str = ""
    provider: str = ""
    latency_ms: int = 0
    raw_response: Optional[Any] = None


class LLMProvider(ABC):
    """
    Abstract LLM provider interface.

    Implementations must raise LLMProviderError (or a subclass) for
    every failure so callers can fall back deterministically.
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Get provider name for logging/tracking."""

    @property
    @abstractmethod
    def default_model(self) -> str:
        """Get default model identifier."""

    @abstractmethod
    async def generate(
        self,
        prompt: BuiltPrompt,
        *,
        model: Optional[str] = None,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
    ) -> LLMResponse:
        """
        Generate completion from prompt.

        Raises:
            LLMProviderError: On provider-specific errors
        """

    @abstractmethod
    async def health_check(self) -> bool:
        """Check provider availability."""

    @abstractmethod
    def is_configured(self) -> bool:
        """Check if API key and settings are configured."""


class LLMProviderError(Exception):
    """Base exception for LLM provider errors."""

    def __init__(
        self,
        message: str,
        provider: str,
        is_retryable: bool = False,
        original_error: Optional[Exception] = None,
    ) -> None:
        super().__init__(message)
        self.provider = provider
        self.is_retryable = is_retryable
        self.original_error = original_error


class RateLimitError(LLMProviderError):
    """Rate limit exceeded error."""

    def __init__(
        self,
        provider: str,
        retry_after_seconds: Optional[int] = None,
    ) -> None:
        super().__init__(
            f"Rate limit exceeded for {provider}",
            provider=provider,
            is_retryable=True,
        )
        self.retry_after_seconds = retry_after_seconds


class ContentFilterError(LLMProviderError):
    """Content was filtered by provider's safety systems."""

    def __init__(self, provider: str, filter_reason: str = "") -> None:
        super().__init__(
            f"Content filtered by {provider}: {filter_reason}",
            provider=provider,
            is_retryable=False,
        )
        self.filter_reason = filter_reason
