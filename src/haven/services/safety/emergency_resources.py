"""
Emergency Resources

Jurisdiction-aware crisis hotlines returned alongside crisis and
medical-concern triage results.

LEGAL_REVIEW_REQUIRED: Verify every number before release in a region.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from haven.config.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class EmergencyResource:
    """
    A single emergency resource.

    Attributes:
        name: Resource name (e.g., "988 Suicide & Crisis Lifeline")
        resource_type: hotline, text or website
        contact: Phone number, text instruction or URL
        available_24_7: Whether available around the clock
    """

    name: str
    resource_type: str
    contact: str
    available_24_7: bool = True

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "type": self.resource_type,
            "contact": self.contact,
            "available24_7": self.available_24_7,
        }


@dataclass(frozen=True)
class JurisdictionResources:
    """Emergency resources for one country."""

    country_code: str
    country_name: str
    emergency_number: str = ""
    resources: tuple[EmergencyResource, ...] = field(default_factory=tuple)

    @property
    def crisis_hotline(self) -> Optional[EmergencyResource]:
        hotlines = [r for r in self.resources if r.resource_type == "hotline"]
        return hotlines[0] if hotlines else None

    def to_dict(self) -> dict:
        return {
            "countryCode": self.country_code,
            "countryName": self.country_name,
            "emergencyNumber": self.emergency_number,
            "resources": [r.to_dict() for r in self.resources],
        }


class EmergencyResourceResolver:
    """
    Resolve crisis resources for a country code.

    Unknown codes fall back to international directories. Built-in
    entries can be extended or replaced from a JSON file shaped like
    {"CA": {"country_name": "...", "emergency_number": "911",
    "resources": [{"name": ..., "resource_type": ..., "contact": ...}]}}.

    Usage:
        resolver = EmergencyResourceResolver()
        resources = resolver.get_resources("GB")
    """

    DEFAULT_RESOURCES = JurisdictionResources(
        country_code="INTL",
        country_name="International",
        emergency_number="Local emergency number",
        resources=(
            EmergencyResource(
                name="Find a Helpline",
                resource_type="website",
                contact="https://findahelpline.com",
            ),
        ),
    )

    BUILT_IN_RESOURCES: dict[str, JurisdictionResources] = {
        "US": JurisdictionResources(
            country_code="US",
            country_name="United States",
            emergency_number="911",
            resources=(
                EmergencyResource(
                    name="988 Suicide & Crisis Lifeline",
                    resource_type="hotline",
                    contact="988",
                ),
                EmergencyResource(
                    name="Crisis Text Line",
                    resource_type="text",
                    contact="Text HOME to 741741",
                ),
            ),
        ),
        "GB": JurisdictionResources(
            country_code="GB",
            country_name="United Kingdom",
            emergency_number="999",
            resources=(
                EmergencyResource(
                    name="Samaritans",
                    resource_type="hotline",
                    contact="116 123",
                ),
                EmergencyResource(
                    name="SHOUT",
                    resource_type="text",
                    contact="Text SHOUT to 85258",
                ),
            ),
        ),
    }

    # Common non-ISO spellings
    ALIASES: dict[str, str] = {"UK": "GB", "USA": "US"}

    def __init__(self, config_path: Optional[str] = None) -> None:
        self._resources = dict(self.BUILT_IN_RESOURCES)

        if config_path:
            self._load_config(Path(config_path))

    def _load_config(self, path: Path) -> None:
        if not path.exists():
            logger.warning("Emergency resources config not found", path=str(path))
            return

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            for country_code, entry in data.items():
                self._resources[country_code.upper()] = JurisdictionResources(
                    country_code=country_code.upper(),
                    country_name=entry.get("country_name", country_code),
                    emergency_number=entry.get("emergency_number", ""),
                    resources=tuple(
                        EmergencyResource(**r) for r in entry.get("resources", [])
                    ),
                )
        except (OSError, ValueError, TypeError) as e:
            # Built-in resources stay available when the override is broken
            logger.error("Failed to load emergency resources config", error=str(e))
            return

        logger.info(
            "Loaded emergency resources config",
            path=str(path),
            jurisdiction_count=len(data),
        )

    def get_resources(self, country_code: Optional[str]) -> JurisdictionResources:
        """
        Get resources for a jurisdiction.

        Args:
            country_code: ISO country code (e.g., "US", "GB"), any case

        Returns:
            Resources for the country, or the international fallback
        """
        code = (country_code or "").strip().upper()
        code = self.ALIASES.get(code, code)

        if code in self._resources:
            return self._resources[code]

        logger.info("No resources for jurisdiction, using default", country_code=code)
        return self.DEFAULT_RESOURCES

    def list_supported_countries(self) -> list[str]:
        return sorted(self._resources)
