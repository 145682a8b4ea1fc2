"""HTTP API: the app API under /api/v1 and the classifier service."""
