"""
CORS Middleware

The classifier endpoints are called straight from browsers on any
origin: every response carries permissive CORS headers and pre-flight
requests are answered with an empty 200. The app API only accepts the
configured origins.
"""

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.middleware.cors import CORSMiddleware
from starlette.types import ASGIApp, Receive, Scope, Send

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


class ClassifierCORSMiddleware(BaseHTTPMiddleware):
    """Permissive CORS for the classifier service."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=CORS_HEADERS)

        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response


class AppCORSMiddleware(CORSMiddleware):
    """
    Origin-restricted CORS for the app API.

    Paths under the classifier mount are passed through untouched so
    the classifier's own headers and pre-flight answer apply.
    """

    def __init__(self, app: ASGIApp, *, exempt_prefix: str, **kwargs) -> None:
        super().__init__(app, **kwargs)
        self._exempt_prefix = exempt_prefix

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        path = scope.get("path", "")
        if scope["type"] == "http" and (
            path == self._exempt_prefix or path.startswith(self._exempt_prefix + "/")
        ):
            await self.app(scope, receive, send)
            return
        await super().__call__(scope, receive, send)
