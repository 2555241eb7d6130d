"""Main router for API v1."""

from fastapi import APIRouter

from app.api.v1.routes.test import router as test_router
from app.api.v1.routes.webhook import router as webhook_router

api_router = APIRouter()

api_router.include_router(webhook_router, tags=["webhook"])
# Include test routes for local conversation checks.
api_router.include_router(test_router, tags=["test"])
