"""Conversational flow for the /shorten dialogue."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from app.core.errors import ShortenerError, ShortUrlParseError, UrlValidationError
from app.interfaces.url_shortener import UrlShortener
from app.services.conversation_manager import ConversationManager, ConversationState

logger = logging.getLogger(__name__)

ReplyCallback = Callable[[str], Awaitable[None]]

COMMAND_PREFIX = "/"
START_COMMAND = "/start"
SHORTEN_COMMAND = "/shorten"
CANCEL_COMMAND = "/cancel"
URL_PREFIXES = ("http://", "https://")

HELP_TEXT = (
    "Hello! I am a bot that helps you shorten URLs.\n\n"
    "Commands:\n"
    f"{SHORTEN_COMMAND} - Shorten a URL.\n"
    f"{CANCEL_COMMAND} - Cancel the current operation."
)
ASK_URL_TEXT = "Please enter the long URL you want to shorten."
INVALID_URL_TEXT = "Please enter a valid URL (it must start with http:// or https://)."
SHORTENING_TEXT = "Shortening your URL..."
SHORT_URL_TEXT = "Your short URL: {short_url}"
PARSE_FAILURE_TEXT = "❌ Could not shorten the URL. The service response could not be parsed."
SHORTEN_FAILURE_TEXT = "❌ Could not shorten the URL: {error}. Please check that the URL is correct."
CANCELLED_TEXT = "Operation cancelled."
FALLBACK_TEXT = f"I don't understand. Use the {START_COMMAND} command to see the available commands."


def validate_long_url(text: str) -> str:
    """Return ``text`` if it looks like an http(s) URL, else raise UrlValidationError."""
    if not text.startswith(URL_PREFIXES):
        raise UrlValidationError(f"Not an http(s) URL: {text!r}")
    return text


class ConversationEngine:
    """Interprets inbound chat text against conversation state and commands.

    By default the state branch and the command branch are evaluated one after
    the other for the same message, so ``/cancel`` sent while a URL is expected
    yields both the invalid-URL prompt and the cancel confirmation. With
    ``exclusive_commands`` enabled, command text skips the state branch.
    """

    def __init__(
        self,
        conversation_manager: ConversationManager,
        shortener: UrlShortener,
        *,
        exclusive_commands: bool = False,
    ) -> None:
        self.conversation_manager = conversation_manager
        self.shortener = shortener
        self.exclusive_commands = exclusive_commands

    async def handle_incoming_text(
        self,
        conversation_id: str,
        text: str | None,
        on_reply: ReplyCallback | None = None,
    ) -> list[str]:
        """Process one inbound message and return the replies in emission order.

        When ``on_reply`` is given, each reply is also handed to it as soon as it
        is produced, so progress text reaches the user before the shortening call.
        """
        async with self.conversation_manager.lock(conversation_id):
            replies: list[str] = []
            await self._handle(conversation_id, text or "", _ReplySink(replies, on_reply))
            return replies

    async def _handle(self, conversation_id: str, text: str, sink: _ReplySink) -> None:
        current_state = self.conversation_manager.get_state(conversation_id)
        logger.info(
            "Received message from %s. Current state: %s. Text: %s",
            conversation_id,
            current_state.value,
            text or "[No Text]",
        )

        is_command = text.startswith(COMMAND_PREFIX)

        if current_state is ConversationState.AWAITING_URL and not (self.exclusive_commands and is_command):
            await self._handle_awaiting_url(conversation_id, text, sink)

        if is_command:
            await sink.emit(self._dispatch_command(conversation_id, text))
        elif current_state is ConversationState.NONE:
            await sink.emit(FALLBACK_TEXT)

    async def _handle_awaiting_url(self, conversation_id: str, text: str, sink: _ReplySink) -> None:
        try:
            long_url = validate_long_url(text)
        except UrlValidationError:
            await sink.emit(INVALID_URL_TEXT)
            return

        try:
            await sink.emit(SHORTENING_TEXT)
            logger.info("Attempting to shorten URL: %s", long_url)
            try:
                short_url = await self.shortener.shorten(long_url)
            except ShortUrlParseError as exc:
                logger.error("Failed to parse short URL from response: %s", exc.body)
                reply = PARSE_FAILURE_TEXT
            except ShortenerError as exc:
                logger.error("Error shortening URL %s: %s", long_url, exc)
                reply = SHORTEN_FAILURE_TEXT.format(error=exc)
            else:
                logger.info("Successfully shortened URL: %s to %s", long_url, short_url)
                reply = SHORT_URL_TEXT.format(short_url=short_url)
            await sink.emit(reply)
        finally:
            self.conversation_manager.reset_state(conversation_id)

    def _dispatch_command(self, conversation_id: str, text: str) -> str:
        command = text.split(" ")[0]

        if command == START_COMMAND:
            return HELP_TEXT

        if command == SHORTEN_COMMAND:
            self.conversation_manager.set_state(conversation_id, ConversationState.AWAITING_URL)
            return ASK_URL_TEXT

        if command == CANCEL_COMMAND:
            self.conversation_manager.reset_state(conversation_id)
            return CANCELLED_TEXT

        logger.info("Unhandled command %s from %s.", command, conversation_id)
        return FALLBACK_TEXT


class _ReplySink:
    """Collects replies and forwards each one to an optional callback."""

    def __init__(self, replies: list[str], on_reply: ReplyCallback | None) -> None:
        self.replies = replies
        self.on_reply = on_reply

    async def emit(self, reply: str) -> None:
        self.replies.append(reply)
        if self.on_reply is not None:
            await self.on_reply(reply)
