"""
Remote Response Parsing

Each classifier call is one attempt bounded by a timeout. Its output is
untrusted text that may wrap a JSON object in prose. Only the first
balanced {...} block is parsed, and it is validated against a strict
model before anything typed is built.
"""

import asyncio
import time
from collections.abc import Awaitable
from typing import Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from haven.domain.enums.triage import Severity, SuggestedFlow
from haven.infrastructure.metrics import REMOTE_CLASSIFIER_LATENCY
from haven.infrastructure.remote.classifier import (
    RemoteClassifierError,
    RemoteMalformed,
    RemoteUnavailable,
)

ModelT = TypeVar("ModelT", bound=BaseModel)


async def call_remote(
    call: Awaitable[str],
    *,
    operation: str,
    timeout_seconds: float,
) -> str:
    """
    Await one classifier call within a time bound.

    Raises:
        RemoteUnavailable: Timeout, or any non-classifier exception
        RemoteClassifierError: Passed through from the classifier
    """
    start = time.monotonic()
    try:
        return await asyncio.wait_for(call, timeout=timeout_seconds)
    except asyncio.TimeoutError as e:
        raise RemoteUnavailable(f"No classifier response within {timeout_seconds}s", e) from e
    except RemoteClassifierError:
        raise
    except Exception as e:
        # Collaborators are untrusted; anything they raise is a transport failure
        raise RemoteUnavailable(f"Classifier raised {type(e).__name__}", e) from e
    finally:
        REMOTE_CLASSIFIER_LATENCY.labels(operation=operation).observe(time.monotonic() - start)


def extract_first_json_object(text: Optional[str]) -> Optional[str]:
    """
    Return the first balanced {...} substring of text.

    Braces inside JSON string literals are ignored. Scanning starts at
    the first "{"; if that object never closes, None is returned.

    >>> extract_first_json_object('Here: {"a": {"b": "}"}} thanks')
    '{"a": {"b": "}"}}'
    """
    if not text:
        return None

    start = text.find("{")
    if start == -1:
        return None

    depth = 0
    in_string = False
    escaped = False

    for index in range(start, len(text)):
        char = text[index]

        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue

        if char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return text[start:index + 1]

    return None


def parse_remote_json(text: Optional[str], model: type[ModelT]) -> ModelT:
    """
    Extract and validate the first JSON object in a remote response.

    Raises:
        RemoteMalformed: No object found, invalid JSON or failed validation
    """
    block = extract_first_json_object(text)
    if block is None:
        raise RemoteMalformed("No JSON object in classifier response")

    try:
        return model.model_validate_json(block)
    except ValidationError as e:
        raise RemoteMalformed(
            f"Classifier response failed validation ({e.error_count()} errors)", e
        ) from e


class _RemoteBody(BaseModel):
    model_config = ConfigDict(strict=True, extra="ignore", populate_by_name=True)


class RemoteTriageBody(_RemoteBody):
    """Triage response from the classifier."""

    severity: Severity
    suggested_flow: SuggestedFlow = Field(alias="suggestedFlow")
    reasoning: str
    is_crisis: bool = Field(default=False, alias="isCrisis")
    is_medical_concern: bool = Field(default=False, alias="isMedicalConcern")


class RemoteInsightBody(_RemoteBody):
    """Weekly insight response from the classifier."""

    insight: str = Field(min_length=1)
    experiment: str = Field(min_length=1)


class RemoteReframeBody(_RemoteBody):
    """Thought reframe response from the classifier."""

    validation: str = Field(min_length=1)
    balanced_thought: str = Field(min_length=1, alias="balancedThought")
