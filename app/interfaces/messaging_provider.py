"""Interface contract for messaging providers."""

from abc import ABC, abstractmethod


class MessagingProvider(ABC):
    """Defines outbound message delivery behavior."""

    @abstractmethod
    async def send_message(self, chat_id: str, text: str) -> None:
        """Deliver a text message to a chat; delivery errors are raised to the caller."""
        raise NotImplementedError
