"""Error types raised by the conversation engine and its providers."""


class UrlValidationError(ValueError):
    """Raised when user text is not an http(s) URL."""


class ShortenerError(Exception):
    """Base error for a failed URL shortening attempt."""


class UpstreamHttpError(ShortenerError):
    """The shortening service answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"HTTP error! status: {status_code}, body: {body}")


class ShortUrlParseError(ShortenerError):
    """The shortening service answered 2xx but no short URL could be found."""

    def __init__(self, body: str) -> None:
        self.body = body
        super().__init__("Could not parse the short URL from the service response.")


class ShortenerTransportError(ShortenerError):
    """The shortening service could not be reached."""


class MessageDeliveryError(RuntimeError):
    """Outbound message could not be delivered to the chat."""
