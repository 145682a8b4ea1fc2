"""Tests configuration and fixtures."""

import asyncio
import os
from typing import AsyncGenerator, Callable, Optional, Union

# Settings are cached on first use; pin the test environment before any import
os.environ["HAVEN_ENV"] = "development"
os.environ["HAVEN_DB_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["HAVEN_CLASSIFIER_MODE"] = "llm"
os.environ["HAVEN_GEMINI_API_KEY"] = ""
os.environ["HAVEN_OPENAI_API_KEY"] = ""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from haven.config import Settings, get_settings
from haven.infrastructure.database import DatabaseManager, reset_db_manager
from haven.infrastructure.llm import clear_provider_cache
from haven.infrastructure.remote import RemoteClassifier, RemoteUnavailable

# A canned reply: raw text, an exception to raise, or a coroutine function
Reply = Union[str, Exception, Callable]


class FakeClassifier(RemoteClassifier):
    """
    Scripted remote classifier that counts calls.

    Each operation replies with its canned value. Exceptions are
    raised, callables are awaited with the payload, and a configured
    delay simulates a slow network.
    """

    def __init__(
        self,
        *,
        triage: Reply = RemoteUnavailable("no triage reply configured"),
        insight: Reply = RemoteUnavailable("no insight reply configured"),
        reframe: Reply = RemoteUnavailable("no reframe reply configured"),
        delay: float = 0.0,
    ) -> None:
        self._replies = {"triage": triage, "insight": insight, "reframe": reframe}
        self._delay = delay
        self.calls: dict[str, int] = {"triage": 0, "insight": 0, "reframe": 0}
        self.payloads: dict[str, list[dict]] = {"triage": [], "insight": [], "reframe": []}

    @property
    def name(self) -> str:
        return "fake"

    async def _reply(self, operation: str, payload: dict) -> str:
        self.calls[operation] += 1
        self.payloads[operation].append(payload)
        if self._delay:
            await asyncio.sleep(self._delay)
        reply = self._replies[operation]
        if isinstance(reply, Exception):
            raise reply
        if callable(reply):
            return await reply(payload)
        return reply

    async def classify_triage(self, payload: dict) -> str:
        return await self._reply("triage", payload)

    async def generate_insight(self, payload: dict) -> str:
        return await self._reply("insight", payload)

    async def generate_reframe(self, payload: dict) -> str:
        return await self._reply("reframe", payload)


@pytest.fixture
def make_classifier() -> type[FakeClassifier]:
    """Factory for scripted classifiers: make_classifier(triage='{...}')."""
    return FakeClassifier


@pytest.fixture
def failing_classifier() -> FakeClassifier:
    """Classifier whose every call fails as unavailable."""
    return FakeClassifier()


@pytest.fixture
def test_settings() -> Settings:
    return get_settings()


@pytest.fixture(autouse=True)
def reset_singletons():
    """Fresh database manager and provider cache for every test."""
    reset_db_manager()
    clear_provider_cache()
    yield
    reset_db_manager()
    clear_provider_cache()


@pytest.fixture
async def db_manager() -> AsyncGenerator[DatabaseManager, None]:
    """Initialized in-memory episode store."""
    db = DatabaseManager(url="sqlite+aiosqlite:///:memory:")
    await db.initialize()
    yield db
    await db.close()


@pytest.fixture
async def db_session(db_manager: DatabaseManager) -> AsyncGenerator[AsyncSession, None]:
    async with db_manager.session() as session:
        yield session


def triage_json(
    severity: str = "moderate",
    flow: str = "breathing",
    reasoning: str = "ok",
    extra: Optional[str] = None,
) -> str:
    body = f'"severity": "{severity}", "suggestedFlow": "{flow}", "reasoning": "{reasoning}"'
    if extra:
        body = f"{body}, {extra}"
    return "{" + body + "}"


@pytest.fixture
def make_triage_json() -> Callable[..., str]:
    return triage_json
