"""Bot service entrypoint that delegates conversation handling to ConversationEngine."""

from __future__ import annotations

import logging

from app.interfaces.messaging_provider import MessagingProvider
from app.schemas.telegram import TelegramUpdate
from app.services.conversation_engine import ConversationEngine

logger = logging.getLogger(__name__)


class BotService:
    """Thin facade that forwards webhook updates to ConversationEngine and sends replies."""

    def __init__(self, engine: ConversationEngine, messaging_provider: MessagingProvider) -> None:
        self.engine = engine
        self.messaging_provider = messaging_provider

    async def handle_update(self, update: TelegramUpdate) -> None:
        """Process one webhook update and deliver every reply in order."""
        message = update.message
        if message is None:
            logger.info("Ignoring update %s without a message.", update.update_id)
            return

        chat_id = str(message.chat.id)

        async def send_reply(reply: str) -> None:
            await self.messaging_provider.send_message(chat_id=chat_id, text=reply)

        await self.engine.handle_incoming_text(chat_id, message.text, on_reply=send_reply)
