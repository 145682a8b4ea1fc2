"""
Classifier Service Application

Mounted under /classifier by the main app, or served on its own. Kept
as a separate application so its permissive CORS policy applies to
these routes only.
"""

from fastapi import FastAPI

from haven.api.classifier.endpoints import router
from haven.api.middleware.cors import ClassifierCORSMiddleware


def create_classifier_app() -> FastAPI:
    """
    Create the classifier service.

    Non-POST methods on the routes are rejected with 405 by routing;
    OPTIONS never reaches routing.
    """
    app = FastAPI(
        title="HAVEN Classifier",
        description="Triage, weekly insight and thought reframe classifier",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.add_middleware(ClassifierCORSMiddleware)
    app.include_router(router)
    return app
