"""
API Dependencies

FastAPI providers for the services behind the endpoints. Services are
built per request from explicit collaborators so tests can override
any of them through app.dependency_overrides.
"""

from functools import lru_cache
from typing import Optional
from zoneinfo import ZoneInfo

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from haven.config import Settings, get_settings
from haven.infrastructure.database import get_async_session
from haven.infrastructure.database.repositories import (
    EpisodeRepository,
    SafetyEventRepository,
)
from haven.infrastructure.remote import RemoteClassifier, create_llm_classifier
from haven.services.insights import WeeklyInsightGenerator
from haven.services.reframe import ThoughtReframeGenerator
from haven.services.safety import EmergencyResourceResolver
from haven.services.triage import TriageCoordinator


def get_remote_classifier(request: Request) -> Optional[RemoteClassifier]:
    """Classifier created during startup, or None before startup."""
    return getattr(request.app.state, "remote_classifier", None)


@lru_cache()
def get_service_classifier() -> RemoteClassifier:
    """In-process LLM classifier answering the classifier endpoints."""
    return create_llm_classifier()


@lru_cache()
def get_resource_resolver() -> EmergencyResourceResolver:
    return EmergencyResourceResolver()


def get_timezone(settings: Settings = Depends(get_settings)) -> ZoneInfo:
    return ZoneInfo(settings.timezone)


def get_triage_coordinator(
    classifier: Optional[RemoteClassifier] = Depends(get_remote_classifier),
    settings: Settings = Depends(get_settings),
) -> TriageCoordinator:
    return TriageCoordinator(classifier, timeout_seconds=settings.classifier.timeout_seconds)


def get_insight_generator(
    classifier: Optional[RemoteClassifier] = Depends(get_remote_classifier),
    settings: Settings = Depends(get_settings),
) -> WeeklyInsightGenerator:
    return WeeklyInsightGenerator(classifier, timeout_seconds=settings.classifier.timeout_seconds)


def get_reframe_generator(
    classifier: Optional[RemoteClassifier] = Depends(get_remote_classifier),
    settings: Settings = Depends(get_settings),
) -> ThoughtReframeGenerator:
    return ThoughtReframeGenerator(classifier, timeout_seconds=settings.classifier.timeout_seconds)


def get_episode_repository(
    session: AsyncSession = Depends(get_async_session),
) -> EpisodeRepository:
    return EpisodeRepository(session)


def get_safety_event_repository(
    session: AsyncSession = Depends(get_async_session),
) -> SafetyEventRepository:
    return SafetyEventRepository(session)
