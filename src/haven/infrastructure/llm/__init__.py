"""LLM provider abstraction package."""

from haven.infrastructure.llm.provider import (
    LLMProvider,
    LLMResponse,
    LLMProviderError,
    RateLimitError,
    ContentFilterError,
)
from haven.infrastructure.llm.provider_factory import (
    LLMProviderType,
    clear_provider_cache,
    get_llm_provider,
)

__all__ = [
    # Base types
    "LLMProvider",
    "LLMResponse",
    "LLMProviderError",
    "RateLimitError",
    "ContentFilterError",
    # Factory
    "LLMProviderType",
    "clear_provider_cache",
    "get_llm_provider",
]
