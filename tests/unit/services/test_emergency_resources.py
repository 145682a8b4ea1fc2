"""
Unit Tests for Emergency Resources

Tests jurisdiction lookup and the international fallback.
"""

import json
from typing import Optional

import pytest

from haven.services.safety import EmergencyResourceResolver


@pytest.fixture
def resolver() -> EmergencyResourceResolver:
    return EmergencyResourceResolver()


def test_us_resources(resolver: EmergencyResourceResolver) -> None:
    """US resolves to 911 and the 988 lifeline."""
    resources = resolver.get_resources("US")

    assert resources.emergency_number == "911"
    assert resources.crisis_hotline.contact == "988"


@pytest.mark.parametrize("code", ["GB", "gb", "UK", " uk "])
def test_uk_aliases(resolver: EmergencyResourceResolver, code: str) -> None:
    """GB and UK codes resolve to the same resources."""
    resources = resolver.get_resources(code)

    assert resources.country_code == "GB"
    assert resources.crisis_hotline.contact == "116 123"


def test_unknown_falls_back_to_international(
    resolver: EmergencyResourceResolver, code: Optional[str]
) -> None:
    """Unknown or missing codes get the international resources."""
    resources = resolver.get_resources(code)

    assert resources.country_code == "INTL"
    assert resources.resources[0].contact == "https://findahelpline.com"


def test_supported_countries(resolver: EmergencyResourceResolver) -> None:
    """Dedicated jurisdictions are listed sorted."""
    assert resolver.list_supported_countries() == ["GB", "US"]


def test_config_file_adds_jurisdiction(tmp_path) -> None:
    """A JSON config file adds jurisdictions."""
    config = tmp_path / "resources.json"
    config.write_text(json.dumps({
        "CA": {
            "country_name": "Canada",
            "emergency_number": "911",
            "resources": [
                {"name": "Talk Suicide Canada", "resource_type": "hotline", "contact": "988"},
            ],
        }
    }))

    resolver = EmergencyResourceResolver(config_path=str(config))

    assert resolver.get_resources("ca").crisis_hotline.name == "Talk Suicide Canada"
    assert "CA" in resolver.list_supported_countries()


def test_to_dict_uses_wire_names(resolver: EmergencyResourceResolver) -> None:
    """Serialization uses camelCase wire names."""
    body = resolver.get_resources("US").to_dict()

    assert body["countryCode"] == "US"
    assert body["emergencyNumber"] == "911"
    assert {"name", "type", "contact"} <= set(body["resources"][0])
