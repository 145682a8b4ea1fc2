"""
LLM Remote Classifier

Runs the classifier prompts against an LLM provider in-process. The
model output is returned unparsed; it is as untrusted as an HTTP body.
"""

from haven.config.logging_config import get_logger
from haven.infrastructure.llm.provider import LLMProvider, LLMProviderError
from haven.infrastructure.metrics import LLM_LATENCY, LLM_REQUESTS_TOTAL
from haven.infrastructure.remote.classifier import RemoteClassifier, RemoteUnavailable
from haven.services.prompt.prompt_builder import (
    BuiltPrompt,
    build_insight_prompt,
    build_reframe_prompt,
    build_triage_prompt,
)

logger = get_logger(__name__)


class LLMRemoteClassifier(RemoteClassifier):
    """Classifier backed by an LLMProvider."""

    def __init__(self, provider: LLMProvider) -> None:
        self._provider = provider

    @property
    def name(self) -> str:
        return f"llm:{self._provider.provider_name}"

    async def classify_triage(self, payload: dict) -> str:
        return await self._generate(build_triage_prompt(payload))

    async def generate_insight(self, payload: dict) -> str:
        return await self._generate(build_insight_prompt(payload))

    async def generate_reframe(self, payload: dict) -> str:
        return await self._generate(build_reframe_prompt(payload))

    async def _generate(self, prompt: BuiltPrompt) -> str:
        provider = self._provider.provider_name
        try:
            response = await self._provider.generate(prompt)
        except LLMProviderError as e:
            status = "rate_limited" if e.is_retryable else "error"
            LLM_REQUESTS_TOTAL.labels(provider=provider, status=status).inc()
            raise RemoteUnavailable(f"LLM provider {provider} failed", e) from e

        LLM_REQUESTS_TOTAL.labels(provider=provider, status="success").inc()
        LLM_LATENCY.labels(provider=provider).observe(response.latency_ms / 1000)
        return response.content

    async def health_check(self) -> bool:
        return await self._provider.health_check()
