"""Conversation state manager stored in memory."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from enum import Enum


class ConversationState(str, Enum):
    """What the bot currently expects from a chat."""

    NONE = "none"
    AWAITING_URL = "shorten_ask_url"


@dataclass(slots=True)
class _ConversationLock:
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)
    holders: int = 0


class ConversationManager:
    """Tracks per-conversation state in RAM and serializes work per conversation."""

    def __init__(self) -> None:
        self._states: dict[str, ConversationState] = {}
        self._locks: dict[str, _ConversationLock] = {}

    def get_state(self, conversation_id: str) -> ConversationState:
        """Return current state, defaulting to NONE for unknown conversations."""
        return self._states.get(conversation_id, ConversationState.NONE)

    def set_state(self, conversation_id: str, state: ConversationState) -> None:
        """Set the state for a conversation."""
        if state is ConversationState.NONE:
            self._states.pop(conversation_id, None)
            return
        self._states[conversation_id] = state

    def reset_state(self, conversation_id: str) -> None:
        """Clear conversation state from memory."""
        self._states.pop(conversation_id, None)

    @asynccontextmanager
    async def lock(self, conversation_id: str) -> AsyncIterator[None]:
        """Hold the conversation's lock; events for other ids are not blocked."""
        entry = self._locks.get(conversation_id)
        if entry is None:
            entry = _ConversationLock()
            self._locks[conversation_id] = entry

        entry.holders += 1
        try:
            async with entry.lock:
                yield
        finally:
            entry.holders -= 1
            if entry.holders == 0:
                self._locks.pop(conversation_id, None)
