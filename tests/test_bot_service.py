"""Unit tests for BotService update handling."""

from __future__ import annotations

import unittest

from app.schemas.telegram import TelegramUpdate
from app.services.bot_service import BotService
from app.services.conversation_engine import (
    CANCELLED_TEXT,
    FALLBACK_TEXT,
    INVALID_URL_TEXT,
    SHORTENING_TEXT,
    ConversationEngine,
    ReplyCallback,
)
from app.services.conversation_manager import ConversationManager, ConversationState


class StubEngine:
    """Engine test double emitting canned replies and recording calls."""

    def __init__(self, replies: list[str]) -> None:
        self.replies = replies
        self.calls: list[tuple[str, str | None]] = []

    async def handle_incoming_text(
        self,
        conversation_id: str,
        text: str | None,
        on_reply: ReplyCallback | None = None,
    ) -> list[str]:
        self.calls.append((conversation_id, text))
        if on_reply is not None:
            for reply in self.replies:
                await on_reply(reply)
        return self.replies


class StubMessagingProvider:
    """Messaging provider test double that records outbound sends."""

    def __init__(self) -> None:
        self.sent_messages: list[dict[str, str]] = []

    async def send_message(self, chat_id: str, text: str) -> None:
        self.sent_messages.append({"chat_id": chat_id, "text": text})


class RecordingShortener:
    """Shortener that captures which messages were already sent when it is called."""

    def __init__(self, messaging_provider: StubMessagingProvider) -> None:
        self.messaging_provider = messaging_provider
        self.sent_before_call: list[str] = []

    async def shorten(self, long_url: str) -> str:
        self.sent_before_call = [sent["text"] for sent in self.messaging_provider.sent_messages]
        return "https://shh.ct.ws/ab12"


class BotServiceTestCase(unittest.IsolatedAsyncioTestCase):
    async def test_replies_are_sent_in_order(self) -> None:
        engine = StubEngine([INVALID_URL_TEXT, CANCELLED_TEXT])
        messaging_provider = StubMessagingProvider()
        service = BotService(engine=engine, messaging_provider=messaging_provider)
        update = TelegramUpdate.model_validate(
            {"update_id": 1, "message": {"message_id": 5, "chat": {"id": -100123}, "text": "/cancel"}}
        )

        await service.handle_update(update)

        self.assertEqual(engine.calls, [("-100123", "/cancel")])
        self.assertEqual(
            messaging_provider.sent_messages,
            [
                {"chat_id": "-100123", "text": INVALID_URL_TEXT},
                {"chat_id": "-100123", "text": CANCELLED_TEXT},
            ],
        )

    async def test_progress_message_is_sent_before_shortening(self) -> None:
        messaging_provider = StubMessagingProvider()
        shortener = RecordingShortener(messaging_provider)
        manager = ConversationManager()
        manager.set_state("7", ConversationState.AWAITING_URL)
        engine = ConversationEngine(conversation_manager=manager, shortener=shortener)
        service = BotService(engine=engine, messaging_provider=messaging_provider)
        update = TelegramUpdate.model_validate(
            {"update_id": 4, "message": {"message_id": 8, "chat": {"id": 7}, "text": "https://example.com"}}
        )

        await service.handle_update(update)

        self.assertEqual(shortener.sent_before_call, [SHORTENING_TEXT])
        self.assertEqual(len(messaging_provider.sent_messages), 2)
        self.assertIn("https://shh.ct.ws/ab12", messaging_provider.sent_messages[1]["text"])

    async def test_message_without_text_is_forwarded_as_none(self) -> None:
        engine = StubEngine([FALLBACK_TEXT])
        messaging_provider = StubMessagingProvider()
        service = BotService(engine=engine, messaging_provider=messaging_provider)
        update = TelegramUpdate.model_validate({"update_id": 2, "message": {"message_id": 6, "chat": {"id": 7}}})

        await service.handle_update(update)

        self.assertEqual(engine.calls, [("7", None)])
        self.assertEqual(messaging_provider.sent_messages, [{"chat_id": "7", "text": FALLBACK_TEXT}])

    async def test_update_without_message_is_ignored(self) -> None:
        engine = StubEngine([FALLBACK_TEXT])
        messaging_provider = StubMessagingProvider()
        service = BotService(engine=engine, messaging_provider=messaging_provider)

        await service.handle_update(TelegramUpdate(update_id=3))

        self.assertEqual(engine.calls, [])
        self.assertEqual(messaging_provider.sent_messages, [])


if __name__ == "__main__":
    unittest.main()
