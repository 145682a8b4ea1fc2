"""
Classifier Endpoints

The remote classifier as an HTTP service. Each endpoint runs the same
remote-with-fallback service the app uses, backed by the in-process
LLM classifier, so a well-formed request is always answered with 200.
"""

from fastapi import APIRouter, Depends

from haven.api.dependencies import get_service_classifier
from haven.api.schemas import InsightRequest, ReframeRequest, TriageRequest
from haven.config import Settings, get_settings
from haven.config.logging_config import get_logger
from haven.infrastructure.remote import RemoteClassifier
from haven.services.insights import WeeklyInsightGenerator
from haven.services.reframe import ThoughtReframeGenerator
from haven.services.triage import TriageCoordinator

logger = get_logger(__name__)
router = APIRouter()


@router.post("/triage", summary="Classify severity and pick the next flow")
async def classify_triage(
    request: TriageRequest,
    classifier: RemoteClassifier = Depends(get_service_classifier),
    settings: Settings = Depends(get_settings),
) -> dict:
    coordinator = TriageCoordinator(
        classifier,
        timeout_seconds=settings.classifier.timeout_seconds,
    )
    result = await coordinator.triage(request.to_input())
    return result.to_dict()


@router.post("/insights", summary="Write the weekly insight")
async def generate_insight(
    request: InsightRequest,
    classifier: RemoteClassifier = Depends(get_service_classifier),
    settings: Settings = Depends(get_settings),
) -> dict:
    generator = WeeklyInsightGenerator(
        classifier,
        timeout_seconds=settings.classifier.timeout_seconds,
    )
    insight = await generator.generate(request.to_stats())
    return insight.to_dict()


@router.post("/reframe", summary="Reframe an anxious thought")
async def generate_reframe(
    request: ReframeRequest,
    classifier: RemoteClassifier = Depends(get_service_classifier),
    settings: Settings = Depends(get_settings),
) -> dict:
    generator = ThoughtReframeGenerator(
        classifier,
        timeout_seconds=settings.classifier.timeout_seconds,
    )
    result = await generator.reframe(request.to_input())
    return result.to_dict()
