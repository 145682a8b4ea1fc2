"""
Integration Tests - Classifier Service

The classifier endpoints over HTTP: answers, CORS headers, pre-flight
and method hygiene.
"""

import pytest
from fastapi.testclient import TestClient

from haven.api.classifier import create_classifier_app
from haven.api.dependencies import get_service_classifier
from haven.api.middleware import CORS_HEADERS


@pytest.fixture
def classifier_client(make_classifier, make_triage_json):
    fake = make_classifier(
        triage=make_triage_json(severity="moderate", flow="grounding", reasoning="Tight chest"),
        insight='{"insight": "Evenings were calmer.", "experiment": "Walk after dinner."}',
        reframe='{"validation": "That is hard.", "balancedThought": "What if it goes fine?"}',
    )
    app = create_classifier_app()
    app.dependency_overrides[get_service_classifier] = lambda: fake

    with TestClient(app) as client:
        client.fake = fake
        yield client


def _assert_cors(response):
    for header, value in CORS_HEADERS.items():
        assert response.headers[header] == value


class TestTriageEndpoint:
    """Tests for POST /triage."""

    def test_remote_result(self, classifier_client) -> None:
        """A valid model reply is returned in wire form."""
        response = classifier_client.post(
            "/triage",
            json={"intensity": 5, "symptoms": ["Tight chest"], "triggers": []},
        )

        assert response.status_code == 200
        assert response.json() == {
            "severity": "moderate",
            "suggestedFlow": "grounding",
            "isCrisis": False,
            "isMedicalConcern": False,
            "reasoning": "Tight chest",
        }
        _assert_cors(response)

    def test_crisis_message_skips_model(self, classifier_client) -> None:
        """Crisis text is answered without calling the model."""
        response = classifier_client.post(
            "/triage",
            json={"intensity": 2, "userMessage": "I don't want to end my life but"},
        )

        assert response.json()["suggestedFlow"] == "crisis_support"
        assert classifier_client.fake.calls["triage"] == 0

    def test_invalid_body_rejected(self, classifier_client) -> None:
        """An invalid body is rejected with CORS headers."""
        response = classifier_client.post("/triage", json={"intensity": 15})

        assert response.status_code == 422
        _assert_cors(response)


class TestInsightEndpoint:
    """Tests for POST /insights."""

    def test_zero_episodes(self, classifier_client) -> None:
        """Zero episodes return the fixed pair."""
        response = classifier_client.post("/insights", json={"episodeCount": 0})

        assert response.status_code == 200
        assert response.json()["insight"] == "No episodes recorded this week. That's great progress!"
        assert classifier_client.fake.calls["insight"] == 0

    def test_string_average_accepted(self, classifier_client) -> None:
        """avgIntensity may arrive as a string."""
        response = classifier_client.post(
            "/insights",
            json={
                "episodeCount": 3,
                "avgIntensity": "6.5",
                "topTriggers": [{"trigger": "Work", "count": 2}],
                "topTools": [{"tool": "Walk", "count": 1, "avgHelpfulness": 4}],
            },
        )

        assert response.json()["insight"] == "Evenings were calmer."
        assert classifier_client.fake.payloads["insight"][0]["avgIntensity"] == "6.5"


def test_reframe(classifier_client) -> None:
    """The reframe route returns validation and balancedThought."""
    response = classifier_client.post(
        "/reframe",
        json={"situation": "s", "automaticThought": "t", "emotion": "Worried"},
    )

    assert response.json()["balancedThought"] == "What if it goes fine?"


class TestTransportHygiene:
    """Tests for CORS and method handling."""

    @pytest.mark.parametrize("path", ["/triage", "/insights", "/reframe"])
    def test_options_preflight(self, classifier_client, path) -> None:
        """OPTIONS returns an empty 200 with CORS headers."""
        response = classifier_client.options(
            path,
            headers={"Origin": "https://anywhere.example", "Access-Control-Request-Method": "POST"},
        )

        assert response.status_code == 200
        assert response.content == b""
        _assert_cors(response)

    @pytest.mark.parametrize("method", ["get", "put", "delete"])
    def test_non_post_rejected(self, classifier_client, method) -> None:
        """Methods other than POST get 405."""
        response = getattr(classifier_client, method)("/triage")

        assert response.status_code == 405
        _assert_cors(response)
