"""Interface contract for URL shortening services."""

from abc import ABC, abstractmethod


class UrlShortener(ABC):
    """Turns a long URL into a short one with a single upstream call."""

    @abstractmethod
    async def shorten(self, long_url: str) -> str:
        """Return the short URL or raise a ShortenerError subclass."""
        raise NotImplementedError
