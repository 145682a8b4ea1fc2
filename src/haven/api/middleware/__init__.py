"""HTTP middleware."""

from haven.api.middleware.cors import (
    CORS_HEADERS,
    AppCORSMiddleware,
    ClassifierCORSMiddleware,
)
from haven.api.middleware.error_handler import ErrorHandlerMiddleware

__all__ = ["CORS_HEADERS", "AppCORSMiddleware", "ClassifierCORSMiddleware", "ErrorHandlerMiddleware"]
