"""
HTTP Remote Classifier

Posts JSON request bodies to a deployed classifier service exposing
/triage, /insights and /reframe.
"""

from typing import Optional

import httpx

from haven.config.logging_config import get_logger
from haven.infrastructure.remote.classifier import RemoteClassifier, RemoteUnavailable

logger = get_logger(__name__)


class HttpRemoteClassifier(RemoteClassifier):
    """
    Classifier client over HTTP(S).

    Usage:
        classifier = HttpRemoteClassifier("https://haven.example/classifier")
        raw = await classifier.classify_triage({"intensity": 5, ...})
    """

    TRIAGE_PATH = "/triage"
    INSIGHTS_PATH = "/insights"
    REFRAME_PATH = "/reframe"

    def __init__(
        self,
        base_url: str,
        *,
        timeout_seconds: float = 8.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Args:
            base_url: Service root, without trailing slash
            timeout_seconds: Transport timeout for each request
            client: Pre-built client (tests inject one with a MockTransport)
        """
        self._base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout_seconds)

    @property
    def name(self) -> str:
        return "http"

    async def classify_triage(self, payload: dict) -> str:
        return await self._post(self.TRIAGE_PATH, payload)

    async def generate_insight(self, payload: dict) -> str:
        return await self._post(self.INSIGHTS_PATH, payload)

    async def generate_reframe(self, payload: dict) -> str:
        return await self._post(self.REFRAME_PATH, payload)

    async def _post(self, path: str, payload: dict) -> str:
        url = f"{self._base_url}{path}"
        try:
            response = await self._client.post(url, json=payload)
        except httpx.HTTPError as e:
            raise RemoteUnavailable(f"Request to {path} failed: {type(e).__name__}", e) from e

        if response.status_code != 200:
            raise RemoteUnavailable(f"Classifier returned status {response.status_code} for {path}")

        return response.text

    async def health_check(self) -> bool:
        try:
            response = await self._client.options(f"{self._base_url}{self.TRIAGE_PATH}")
        except httpx.HTTPError as e:
            logger.warning("Classifier health check failed", error=type(e).__name__)
            return False
        return response.status_code == 200

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()
