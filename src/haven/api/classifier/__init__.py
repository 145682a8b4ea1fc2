"""Classifier HTTP service."""

from haven.api.classifier.app import create_classifier_app

__all__ = ["create_classifier_app"]
