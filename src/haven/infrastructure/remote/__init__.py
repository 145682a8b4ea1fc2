"""Remote classifier clients."""

from haven.infrastructure.remote.classifier import (
    RemoteClassifier,
    RemoteClassifierError,
    RemoteMalformed,
    RemoteUnavailable,
)
from haven.infrastructure.remote.http_classifier import HttpRemoteClassifier
from haven.infrastructure.remote.llm_classifier import LLMRemoteClassifier
from haven.infrastructure.remote.factory import create_llm_classifier, create_remote_classifier

__all__ = [
    "RemoteClassifier",
    "RemoteClassifierError",
    "RemoteMalformed",
    "RemoteUnavailable",
    "HttpRemoteClassifier",
    "LLMRemoteClassifier",
    "create_llm_classifier",
    "create_remote_classifier",
]
