"""
Vocabulary Endpoint

Default picker values for the check-in and episode screens.
"""

from fastapi import APIRouter

from haven.domain.vocabulary import DEFAULT_SYMPTOMS, DEFAULT_TOOLS, DEFAULT_TRIGGERS

router = APIRouter()


@router.get("", summary="Default symptoms, triggers and tools")
async def get_vocabulary() -> dict:
    return {
        "symptoms": list(DEFAULT_SYMPTOMS),
        "triggers": list(DEFAULT_TRIGGERS),
        "tools": list(DEFAULT_TOOLS),
    }
