"""Client for the shh.ct.ws form-based URL shortening endpoint."""

from __future__ import annotations

import logging
import re

import httpx

from app.core.errors import ShortenerTransportError, ShortUrlParseError, UpstreamHttpError
from app.interfaces.url_shortener import UrlShortener

logger = logging.getLogger(__name__)

DEFAULT_SHORT_URL_HOST = "shh.ct.ws"
SHORT_CODE_ALPHABET = "A-Za-z0-9"
LONG_URL_FIELD = "long_url"

# A short URL only counts when it is closed by an attribute quote or a tag
# boundary, e.g. href='https://host/abc' or >https://host/abc</a>.
SHORT_URL_TERMINATORS = "\"'<"


def build_short_url_pattern(host: str) -> re.Pattern[str]:
    """Compile the extraction pattern for short links served from ``host``."""
    return re.compile(
        rf"https://{re.escape(host)}/[{SHORT_CODE_ALPHABET}]+(?=[{re.escape(SHORT_URL_TERMINATORS)}])"
    )


def extract_short_url(body: str, pattern: re.Pattern[str]) -> str | None:
    """Return the first anchored short URL found in an HTML body, if any."""
    match = pattern.search(body)
    if match is None:
        return None
    return match.group(0)


class ShhShortener(UrlShortener):
    """Posts a long URL to the shortening form and scrapes the short link."""

    def __init__(
        self,
        endpoint_url: str,
        *,
        short_url_host: str = DEFAULT_SHORT_URL_HOST,
        timeout: float = 15.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.endpoint_url = endpoint_url
        self.timeout = timeout
        self._pattern = build_short_url_pattern(short_url_host)
        self._transport = transport

    async def shorten(self, long_url: str) -> str:
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                response = await client.post(
                    self.endpoint_url,
                    data={LONG_URL_FIELD: long_url},
                    headers={"Content-Type": "application/x-www-form-urlencoded"},
                )
        except httpx.HTTPError as exc:
            raise ShortenerTransportError(str(exc) or exc.__class__.__name__) from exc

        body = response.text
        if not response.is_success:
            raise UpstreamHttpError(status_code=response.status_code, body=body)

        logger.info("Received response from shortening service: %s", body)
        short_url = extract_short_url(body, self._pattern)
        if short_url is None:
            raise ShortUrlParseError(body=body)
        return short_url
