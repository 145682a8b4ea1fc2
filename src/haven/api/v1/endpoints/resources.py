"""
Emergency Resource Endpoints

Lets the client prefetch hotlines so the crisis screen renders even
when the network drops later.
"""

from fastapi import APIRouter, Depends

from haven.api.dependencies import get_resource_resolver
from haven.services.safety import EmergencyResourceResolver

router = APIRouter()


@router.get("", summary="Jurisdictions with dedicated resources")
async def list_jurisdictions(
    resolver: EmergencyResourceResolver = Depends(get_resource_resolver),
) -> dict:
    return {"countries": resolver.list_supported_countries()}


@router.get("/{country_code}", summary="Emergency resources for a jurisdiction")
async def get_resources(
    country_code: str,
    resolver: EmergencyResourceResolver = Depends(get_resource_resolver),
) -> dict:
    """Unknown codes return the international resources."""
    return resolver.get_resources(country_code).to_dict()
