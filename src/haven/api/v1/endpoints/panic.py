"""
Panic Button Endpoints

Triage for the panic-button flow, follow-up suggestions, and the
crisis screen audit trail.

SAFETY-CRITICAL: A crisis or medical-concern result always carries
emergency resources. Failing to record the safety event never blocks
the response.
"""

from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field
from sqlalchemy.exc import SQLAlchemyError

from haven.api.dependencies import (
    get_resource_resolver,
    get_safety_event_repository,
    get_triage_coordinator,
)
from haven.api.schemas import CamelModel, TriageRequest
from haven.config import Settings, get_settings
from haven.config.logging_config import get_logger
from haven.domain.enums.triage import SafetyEventType
from haven.domain.models.triage import TriageResult
from haven.infrastructure.database.repositories import SafetyEventRepository
from haven.services.safety import EmergencyResourceResolver
from haven.services.triage import TriageCoordinator, suggest_next_steps

logger = get_logger(__name__)
router = APIRouter()


class PanicTriageRequest(TriageRequest):
    country_code: Optional[str] = Field(
        default=None,
        alias="countryCode",
        max_length=4,
        description="Jurisdiction for emergency resources",
    )


class NextStepsRequest(CamelModel):
    intensity: int = Field(..., ge=0, le=10)
    tools_used: list[str] = Field(default_factory=list, alias="toolsUsed")
    minutes_since_start: float = Field(default=0.0, ge=0.0, alias="minutesSinceStart")


class NextStepsResponse(BaseModel):
    suggestions: list[str]


def _safety_event_for(result: TriageResult) -> Optional[tuple[SafetyEventType, str]]:
    if result.is_crisis:
        return SafetyEventType.CRISIS_DETECTED, "Crisis support resources returned"
    if result.is_medical_concern:
        return SafetyEventType.MEDICAL_WARNING, "Medical check resources returned"
    return None


@router.post(
    "/triage",
    summary="Assess distress and choose the next exercise",
)
async def triage(
    request: PanicTriageRequest,
    coordinator: TriageCoordinator = Depends(get_triage_coordinator),
    safety_events: SafetyEventRepository = Depends(get_safety_event_repository),
    resolver: EmergencyResourceResolver = Depends(get_resource_resolver),
    settings: Settings = Depends(get_settings),
) -> dict:
    """
    Triage one panic-button press.

    Always returns a result. Crisis and medical-concern results add
    emergency resources for the caller's jurisdiction and are recorded
    as safety events.
    """
    result = await coordinator.triage(request.to_input())
    body = result.to_dict()
    body["resources"] = None

    event = _safety_event_for(result)
    if event is not None:
        resources = resolver.get_resources(request.country_code or settings.default_country_code)
        body["resources"] = resources.to_dict()

        event_type, action = event
        try:
            await safety_events.log_safety_event(event_type, action)
        except SQLAlchemyError as e:
            logger.error(
                "Failed to record safety event",
                event_type=event_type.value,
                error_type=type(e).__name__,
            )
            await safety_events.rollback()

    return body


@router.post(
    "/next-steps",
    response_model=NextStepsResponse,
    summary="Suggest what to do after an exercise",
)
async def next_steps(request: NextStepsRequest) -> NextStepsResponse:
    return NextStepsResponse(
        suggestions=suggest_next_steps(
            request.intensity,
            request.tools_used,
            request.minutes_since_start,
        )
    )


@router.post(
    "/crisis-screen-shown",
    status_code=status.HTTP_201_CREATED,
    summary="Record that the crisis screen was displayed",
)
async def crisis_screen_shown(
    safety_events: SafetyEventRepository = Depends(get_safety_event_repository),
) -> dict:
    event = await safety_events.log_safety_event(
        SafetyEventType.CRISIS_SCREEN_SHOWN,
        "Crisis screen displayed",
    )
    return event.to_dict()
