"""Mock messaging provider implementation."""

import logging

from app.interfaces.messaging_provider import MessagingProvider

logger = logging.getLogger(__name__)


class MockMessagingProvider(MessagingProvider):
    """Log-based sender for local testing that keeps every outbound message."""

    def __init__(self) -> None:
        self.sent_messages: list[dict[str, str]] = []

    async def send_message(self, chat_id: str, text: str) -> None:
        self.sent_messages.append({"chat_id": chat_id, "text": text})
        logger.info("[MockMessaging] -> chat_id=%s | text=%s", chat_id, text)
