"""Webhook endpoints for inbound Telegram Bot API updates."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from app.api.dependencies import get_bot_service
from app.schemas.telegram import TelegramUpdate
from app.services.bot_service import BotService

logger = logging.getLogger(__name__)

LIVENESS_TEXT = "Telegram Bot Webhook is running."

router = APIRouter()


@router.post("/webhook", response_class=PlainTextResponse)
async def receive_webhook(
    payload: dict[str, Any],
    bot_service: BotService = Depends(get_bot_service),
) -> PlainTextResponse:
    """Receive one Telegram update and run it through the conversation engine."""
    try:
        update = TelegramUpdate.model_validate(payload)
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    try:
        await bot_service.handle_update(update)
    except Exception:
        logger.exception("Error while processing update %s.", update.update_id)
        return PlainTextResponse("Error", status_code=500)
    return PlainTextResponse("OK")


@router.get("/webhook", response_class=PlainTextResponse)
async def webhook_liveness() -> str:
    """Static liveness answer for non-POST requests."""
    return LIVENESS_TEXT
