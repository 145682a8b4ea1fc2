"""
Reframe Endpoint

CBT thought reframe for the thought helper exercise.
"""

from fastapi import APIRouter, Depends

from haven.api.dependencies import get_reframe_generator
from haven.api.schemas import ReframeRequest
from haven.services.reframe import ThoughtReframeGenerator

router = APIRouter()


@router.post("", summary="Reframe an anxious thought")
async def reframe(
    request: ReframeRequest,
    generator: ThoughtReframeGenerator = Depends(get_reframe_generator),
) -> dict:
    result = await generator.reframe(request.to_input())
    return result.to_dict()
