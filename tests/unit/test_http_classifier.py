"""
Unit Tests for HTTP Remote Classifier

Transport behavior against httpx.MockTransport.
"""

import json

import httpx
import pytest

from haven.infrastructure.remote import HttpRemoteClassifier, RemoteUnavailable

BASE_URL = "https://classifier.test/classifier"


def _classifier(handler) -> HttpRemoteClassifier:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return HttpRemoteClassifier(BASE_URL + "/", client=client)


async def test_posts_payload_and_returns_raw_text() -> None:
    """The payload is POSTed as JSON and the raw body returned."""
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, text='noise {"severity": "mild"} noise')

    classifier = _classifier(handler)

    raw = await classifier.classify_triage({"intensity": 2, "symptoms": [], "triggers": []})

    assert raw == 'noise {"severity": "mild"} noise'
    assert seen["method"] == "POST"
    assert seen["url"] == f"{BASE_URL}/triage"
    assert seen["body"] == {"intensity": 2, "symptoms": [], "triggers": []}


@pytest.mark.parametrize(
    "operation,path",
    [("generate_insight", "/insights"), ("generate_reframe", "/reframe")],
)
async def test_operation_paths(operation, path) -> None:
    """Each operation posts to its own path."""
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text=request.url.path)

    raw = await getattr(_classifier(handler), operation)({})

    assert raw == f"/classifier{path}"


@pytest.mark.parametrize("status_code", [404, 405, 500, 503])
async def test_non_success_status_is_unavailable(status_code) -> None:
    """Non-200 responses are unavailable."""
    classifier = _classifier(lambda request: httpx.Response(status_code, text="{}"))

    with pytest.raises(RemoteUnavailable):
        await classifier.classify_triage({"intensity": 5})


async def test_network_error_is_unavailable() -> None:
    """Transport errors are unavailable."""
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(RemoteUnavailable) as exc_info:
        await _classifier(handler).generate_insight({"episodeCount": 1})

    assert isinstance(exc_info.value.original_error, httpx.ConnectError)


async def test_health_check_uses_options() -> None:
    """The health check sends OPTIONS to the triage path."""
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200 if request.method == "OPTIONS" else 405)

    assert await _classifier(handler).health_check() is True


async def test_injected_client_left_open() -> None:
    """close leaves an injected client open."""
    client = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200)))
    classifier = HttpRemoteClassifier(BASE_URL, client=client)

    await classifier.close()

    assert client.is_closed is False
    await client.aclose()
