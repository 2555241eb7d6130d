"""Shared service instances resolved through FastAPI dependencies."""

from functools import lru_cache

from app.core.settings import settings
from app.providers.messaging.telegram_messaging import TelegramMessagingProvider
from app.providers.shortener.shh_shortener import ShhShortener
from app.services.bot_service import BotService
from app.services.conversation_engine import ConversationEngine
from app.services.conversation_manager import ConversationManager


@lru_cache
def get_conversation_engine() -> ConversationEngine:
    """Process-wide engine; conversation state lives as long as the process."""
    shortener = ShhShortener(
        settings.shorten_service_url,
        short_url_host=settings.short_url_host,
        timeout=settings.shorten_timeout_seconds,
    )
    return ConversationEngine(
        conversation_manager=ConversationManager(),
        shortener=shortener,
        exclusive_commands=settings.exclusive_command_dispatch,
    )


@lru_cache
def get_bot_service() -> BotService:
    """Bot service wired to Telegram delivery."""
    messaging_provider = TelegramMessagingProvider(
        settings.bot_token,
        api_base_url=settings.telegram_api_base_url,
    )
    return BotService(engine=get_conversation_engine(), messaging_provider=messaging_provider)
