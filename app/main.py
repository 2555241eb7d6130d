"""FastAPI entrypoint for the URL Shortener Bot."""

import logging

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from app.api.v1.router import api_router
from app.api.v1.routes.webhook import LIVENESS_TEXT
from app.core.settings import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title=settings.app_name, version=settings.app_version)


@app.get("/", response_class=PlainTextResponse)
async def health_check() -> str:
    """Simple liveness endpoint to validate service status."""
    return LIVENESS_TEXT


# Mount API v1 routes under /api/v1.
app.include_router(api_router, prefix="/api/v1")

logging.getLogger(__name__).info("Bot webhook handler initialized.")
