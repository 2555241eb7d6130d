"""Subset of the Telegram Bot API ``Update`` object consumed by the webhook."""

from pydantic import BaseModel, ConfigDict, Field


class TelegramChat(BaseModel):
    """Chat the message belongs to."""

    model_config = ConfigDict(extra="ignore")

    id: int
    type: str | None = None


class TelegramMessage(BaseModel):
    """Inbound chat message; ``text`` is absent for stickers, photos and the like."""

    model_config = ConfigDict(extra="ignore")

    message_id: int
    chat: TelegramChat
    text: str | None = None


class TelegramUpdate(BaseModel):
    """Webhook payload delivered by Telegram."""

    model_config = ConfigDict(extra="ignore")

    update_id: int
    message: TelegramMessage | None = Field(default=None, description="New incoming message, if any")
