"""Safety services package - local crisis screening and resources."""

from haven.services.safety.safety_scanner import SafetyScanner, check_for_crisis
from haven.services.safety.emergency_resources import (
    EmergencyResource,
    EmergencyResourceResolver,
    JurisdictionResources,
)

__all__ = [
    "SafetyScanner",
    "check_for_crisis",
    "EmergencyResource",
    "EmergencyResourceResolver",
    "JurisdictionResources",
]
