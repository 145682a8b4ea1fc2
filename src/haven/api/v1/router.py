"""
API v1 Router

Aggregates all v1 API endpoints.
"""

from fastapi import APIRouter

from haven.api.v1.endpoints.episodes import router as episodes_router
from haven.api.v1.endpoints.health import router as health_router
from haven.api.v1.endpoints.insights import router as insights_router
from haven.api.v1.endpoints.panic import router as panic_router
from haven.api.v1.endpoints.reframe import router as reframe_router
from haven.api.v1.endpoints.resources import router as resources_router
from haven.api.v1.endpoints.vocabulary import router as vocabulary_router

api_router = APIRouter()

api_router.include_router(health_router, prefix="/health", tags=["Health"])
api_router.include_router(panic_router, prefix="/panic", tags=["Panic"])
api_router.include_router(episodes_router, prefix="/episodes", tags=["Episodes"])
api_router.include_router(insights_router, prefix="/insights", tags=["Insights"])
api_router.include_router(reframe_router, prefix="/reframe", tags=["Reframe"])
api_router.include_router(resources_router, prefix="/resources", tags=["Resources"])
api_router.include_router(vocabulary_router, prefix="/vocabulary", tags=["Vocabulary"])
