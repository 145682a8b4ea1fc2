"""
Prometheus Metrics

Counters and histograms for triage, insights and the remote
classifier. Exposed at /metrics for scraping.

ARCHITECTURE: Metrics are decoupled from business logic.
Only increment/observe; never block on metrics operations.
"""

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    REGISTRY,
    Counter,
    Histogram,
    Info,
    generate_latest,
)
from fastapi import APIRouter, Response

# =============================================================================
# TRIAGE METRICS
# =============================================================================

TRIAGE_REQUESTS_TOTAL = Counter(
    "haven_triage_requests_total",
    "Triage decisions by the path that produced them",
    ["source", "severity"],  # source: safety, remote, fallback
)

SAFETY_MATCHES_TOTAL = Counter(
    "haven_safety_matches_total",
    "Safety scanner matches by kind",
    ["kind"],  # crisis, medical
)

SAFETY_EVENTS_TOTAL = Counter(
    "haven_safety_events_total",
    "Safety events recorded in the episode store",
    ["event_type"],
)

# =============================================================================
# REMOTE CLASSIFIER METRICS
# =============================================================================

REMOTE_CLASSIFIER_FAILURES = Counter(
    "haven_remote_classifier_failures_total",
    "Remote classifier failures that fell back to deterministic results",
    ["operation", "kind"],  # kind: unavailable, malformed, timeout
)

REMOTE_CLASSIFIER_LATENCY = Histogram(
    "haven_remote_classifier_latency_seconds",
    "Latency of remote classifier attempts",
    ["operation"],
    buckets=[0.1, 0.25, 0.5, 1.0, 2.0, 4.0, 8.0, 16.0],
)

# =============================================================================
# LLM METRICS
# =============================================================================

LLM_REQUESTS_TOTAL = Counter(
    "haven_llm_requests_total",
    "Total LLM requests by provider",
    ["provider", "status"],  # success, error, rate_limited
)

LLM_LATENCY = Histogram(
    "haven_llm_latency_seconds",
    "LLM response latency",
    ["provider"],
    buckets=[0.1, 0.25, 0.5, 1.0, 2.0, 5.0, 10.0],
)

# =============================================================================
# INSIGHT METRICS
# =============================================================================

GENERATED_TEXT_TOTAL = Counter(
    "haven_generated_text_total",
    "Weekly insights and reframes by the path that produced them",
    ["kind", "source"],  # kind: insight, reframe
)

SYSTEM_INFO = Info(
    "haven_system",
    "HAVEN system information",
)


def track_triage(source: str, severity: str) -> None:
    TRIAGE_REQUESTS_TOTAL.labels(source=source, severity=severity).inc()


def track_remote_failure(operation: str, kind: str) -> None:
    REMOTE_CLASSIFIER_FAILURES.labels(operation=operation, kind=kind).inc()


def track_generated_text(kind: str, source: str) -> None:
    GENERATED_TEXT_TOTAL.labels(kind=kind, source=source).inc()


def update_system_info(environment: str, version: str = "0.1.0") -> None:
    """Update system info metric with current environment."""
    SYSTEM_INFO.info({
        "version": version,
        "environment": environment,
    })


metrics_router = APIRouter(tags=["Metrics"])


@metrics_router.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    """Prometheus metrics in text exposition format."""
    return Response(
        content=generate_latest(REGISTRY),
        media_type=CONTENT_TYPE_LATEST,
    )
