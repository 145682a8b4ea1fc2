"""
Remote Classifier Factory

CONFIGURATION:
    HAVEN_CLASSIFIER_MODE=llm   # in-process LLM provider
    HAVEN_CLASSIFIER_MODE=http  # HAVEN_CLASSIFIER_BASE_URL service
"""

from typing import Optional

from haven.config import Settings, get_settings
from haven.config.logging_config import get_logger
from haven.infrastructure.llm.provider_factory import get_llm_provider
from haven.infrastructure.remote.classifier import RemoteClassifier
from haven.infrastructure.remote.http_classifier import HttpRemoteClassifier
from haven.infrastructure.remote.llm_classifier import LLMRemoteClassifier

logger = get_logger(__name__)


def create_remote_classifier(settings: Optional[Settings] = None) -> RemoteClassifier:
    """Create the classifier selected by HAVEN_CLASSIFIER_MODE."""
    settings = settings or get_settings()

    if settings.classifier.mode == "http":
        classifier: RemoteClassifier = HttpRemoteClassifier(
            settings.classifier.base_url,
            timeout_seconds=settings.classifier.timeout_seconds,
        )
    else:
        classifier = LLMRemoteClassifier(get_llm_provider())

    logger.info("Remote classifier created", classifier=classifier.name)
    return classifier


def create_llm_classifier() -> RemoteClassifier:
    """Classifier used by the classifier service endpoints themselves."""
    return LLMRemoteClassifier(get_llm_provider())
