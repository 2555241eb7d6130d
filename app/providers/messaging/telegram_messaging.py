"""Telegram Bot API messaging provider."""

from __future__ import annotations

import logging

import httpx

from app.core.errors import MessageDeliveryError
from app.interfaces.messaging_provider import MessagingProvider

logger = logging.getLogger(__name__)


class TelegramMessagingProvider(MessagingProvider):
    """Sends chat replies through the Bot API ``sendMessage`` method."""

    def __init__(
        self,
        bot_token: str | None,
        *,
        api_base_url: str = "https://api.telegram.org",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not bot_token:
            raise RuntimeError("BOT_TOKEN not configured")

        self._send_url = f"{api_base_url.rstrip('/')}/bot{bot_token}/sendMessage"
        self.timeout = timeout
        self._transport = transport

    async def send_message(self, chat_id: str, text: str) -> None:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(self._send_url, json={"chat_id": chat_id, "text": text})
        except httpx.HTTPError as exc:
            raise MessageDeliveryError(f"Telegram unreachable: {exc}") from exc

        if not response.is_success:
            raise MessageDeliveryError(
                f"Telegram sendMessage failed for chat {chat_id}: {response.status_code} {response.text}"
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise MessageDeliveryError(
                f"Telegram returned a non-JSON response for chat {chat_id}: {response.text}"
            ) from exc

        if not isinstance(payload, dict):
            raise MessageDeliveryError(f"Telegram returned an unexpected payload for chat {chat_id}: {payload!r}")
        if not payload.get("ok", False):
            raise MessageDeliveryError(
                f"Telegram rejected message for chat {chat_id}: {payload.get('description', 'unknown error')}"
            )
        logger.debug("Delivered message to chat %s.", chat_id)
