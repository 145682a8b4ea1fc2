"""Metrics infrastructure package."""

from haven.infrastructure.metrics.prometheus_metrics import (
    # Triage
    TRIAGE_REQUESTS_TOTAL,
    SAFETY_MATCHES_TOTAL,
    SAFETY_EVENTS_TOTAL,
    # Remote classifier
    REMOTE_CLASSIFIER_FAILURES,
    REMOTE_CLASSIFIER_LATENCY,
    # LLM
    LLM_REQUESTS_TOTAL,
    LLM_LATENCY,
    # Generated text
    GENERATED_TEXT_TOTAL,
    # Helpers
    track_triage,
    track_remote_failure,
    track_generated_text,
    update_system_info,
    # Router
    metrics_router,
)

__all__ = [
    "TRIAGE_REQUESTS_TOTAL",
    "SAFETY_MATCHES_TOTAL",
    "SAFETY_EVENTS_TOTAL",
    "REMOTE_CLASSIFIER_FAILURES",
    "REMOTE_CLASSIFIER_LATENCY",
    "LLM_REQUESTS_TOTAL",
    "LLM_LATENCY",
    "GENERATED_TEXT_TOTAL",
    "track_triage",
    "track_remote_failure",
    "track_generated_text",
    "update_system_info",
    "metrics_router",
]
