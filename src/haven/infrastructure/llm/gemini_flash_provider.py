"""
Google Gemini Flash LLM Provider

Low-latency model backing the in-process classifier. A distressed user
is waiting on every call, so retries are limited to rate limits and the
caller bounds the total time.
"""

import time
from typing import Optional

import google.generativeai as genai
from google.generativeai.types import GenerationConfig, HarmBlockThreshold, HarmCategory
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from haven.config import get_settings
from haven.config.logging_config import get_logger
from haven.infrastructure.llm.provider import (
    ContentFilterError,
    LLMProvider,
    LLMProviderError,
    LLMResponse,
    RateLimitError,
)
from haven.services.prompt.prompt_builder import BuiltPrompt

logger = get_logger(__name__)


class GeminiFlashProvider(LLMProvider):
    """
    Google Gemini Flash provider.

    The system prompt differs per request type (triage, insight,
    reframe), so models are built per call rather than cached with a
    fixed system instruction.

    Usage:
        provider = GeminiFlashProvider()
        response = await provider.generate(prompt)
    """

    DEFAULT_MODEL = "gemini-1.5-flash"
    DEFAULT_TEMPERATURE = 0.3
    DEFAULT_MAX_TOKENS = 500

    # Dangerous-content threshold is relaxed so users can describe
    # self-harm thoughts without the request being silently blocked
    SAFETY_SETTINGS = {
        HarmCategory.HARM_CATEGORY_HARASSMENT: HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE,
        HarmCategory.HARM_CATEGORY_HATE_SPEECH: HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE,
        HarmCategory.HARM_CATEGORY_SEXUALLY_EXPLICIT: HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE,
        HarmCategory.HARM_CATEGORY_DANGEROUS_CONTENT: HarmBlockThreshold.BLOCK_ONLY_HIGH,
    }

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
    ) -> None:
        """
        Initialize Gemini Flash provider.

        Args:
            api_key: Gemini API key (defaults to env HAVEN_GEMINI_API_KEY)
            model: Model identifier (defaults to HAVEN_GEMINI_MODEL)
        """
        settings = get_settings()

        self._api_key = api_key or settings.gemini.api_key.get_secret_value()
        self._default_model = model or settings.gemini.model or self.DEFAULT_MODEL
        self._configured = False

        if self._api_key:
            genai.configure(api_key=self._api_key)
            self._configured = True

    @property
    def provider_name(self) -> str:
        return "gemini_flash"

    @property
    def default_model(self) -> str:
        return self._default_model

    def is_configured(self) -> bool:
        return self._configured

    @retry(
        retry=retry_if_exception_type(RateLimitError),
        stop=stop_after_attempt(2),
        wait=wait_exponential(multiplier=0.5, min=0.5, max=2),
        reraise=True,
    )
    async def generate(
        self,
        prompt: BuiltPrompt,
        *,
        model: Optional[str] = None,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
    ) -> LLMResponse:
        """
        Generate completion using Gemini Flash.

        Args:
            prompt: Built prompt with system and user messages
            model: Model override
            max_tokens: Max tokens override
            temperature: Temperature override

        Returns:
            LLMResponse with generated content
        """
        if not self.is_configured():
            raise LLMProviderError(
                "Gemini API key not configured",
                provider=self.provider_name,
            )

        model_name = model or self._default_model
        start_time = time.time()

        try:
            gemini_model = genai.GenerativeModel(
                model_name=model_name,
                safety_settings=self.SAFETY_SETTINGS,
                system_instruction=prompt.full_system_prompt,
            )
            generation_config = GenerationConfig(
                max_output_tokens=max_tokens or prompt.max_tokens or self.DEFAULT_MAX_TOKENS,
                temperature=temperature if temperature is not None else prompt.temperature,
            )

            response = await gemini_model.generate_content_async(
                prompt.user_message,
                generation_config=generation_config,
            )
        except Exception as e:
            self._handle_error(e)

        latency_ms = int((time.time() - start_time) * 1000)

        block_reason = getattr(response.prompt_feedback, "block_reason", None)
        if block_reason:
            logger.warning("Gemini content blocked", reason=str(block_reason))
            raise ContentFilterError(
                provider=self.provider_name,
                filter_reason=str(block_reason),
            )

        content = ""
        if response.candidates:
            candidate = response.candidates[0]
            if candidate.content and candidate.content.parts:
                content = candidate.content.parts[0].text or ""

            finish_reason = str(getattr(candidate, "finish_reason", "STOP"))
            if "SAFETY" in finish_reason:
                raise ContentFilterError(
                    provider=self.provider_name,
                    filter_reason="Response blocked by safety filters",
                )

        logger.debug(
            "Gemini Flash response generated",
            model=model_name,
            latency_ms=latency_ms,
            content_length=len(content),
        )

        return LLMResponse(
            content=content,
            finish_reason="stop",
            usage=self._estimate_usage(prompt.user_message, content),
            model=model_name,
            provider=self.provider_name,
            latency_ms=latency_ms,
            raw_response=response,
        )

    def _estimate_usage(self, input_text: str, output_text: str) -> dict:
        """Estimate token usage (~1.3 tokens per word)."""
        input_tokens = int(len(input_text.split()) * 1.3)
        output_tokens = int(len(output_text.split()) * 1.3)

        return {
            "prompt_tokens": input_tokens,
            "completion_tokens": output_tokens,
            "total_tokens": input_tokens + output_tokens,
        }

    def _handle_error(self, error: Exception) -> None:
        """Re-raise a provider error as the matching LLMProviderError type."""
        error_msg = str(error).lower()

        if "quota" in error_msg or "rate" in error_msg or "429" in error_msg:
            logger.warning("Gemini Flash rate limit", error=str(error))
            raise RateLimitError(
                provider=self.provider_name,
                retry_after_seconds=30,
            ) from error

        if "safety" in error_msg or "blocked" in error_msg:
            raise ContentFilterError(
                provider=self.provider_name,
                filter_reason=str(error),
            ) from error

        logger.error("Gemini Flash API error", error=str(error))
        raise LLMProviderError(
            f"Gemini Flash error: {error}",
            provider=self.provider_name,
            is_retryable=False,
            original_error=error,
        ) from error

    async def health_check(self) -> bool:
        """Check Gemini Flash availability."""
        if not self.is_configured():
            return False

        try:
            models = list(genai.list_models())
            return any("flash" in m.name.lower() for m in models)
        except Exception as e:
            logger.warning("Gemini Flash health check failed", error=str(e))
            return False
