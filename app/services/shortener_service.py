import httpx
from aws_lambda_powertools import Logger
from httpx import HTTPError, InvalidURL

from app.models.post import ShortenedUrl
from app.settings import Settings


class ShortenerService:
    """Best-effort URL shortening; degrades to the original URL on any failure."""

    def __init__(self, settings: Settings):
        self._logger = Logger(utc=True)
        self._settings = settings

    async def shorten(self, url: str) -> ShortenedUrl:
        if not self._settings.shortener_enabled:
            self._logger.debug(f"Shortening is disabled, keeping {url=}")
            return ShortenedUrl.unchanged(url)
        try:
            async with httpx.AsyncClient(timeout=self._settings.shortener_timeout) as client:
                response = await client.get(
                    self._settings.shortener_base_url, params={"url": url}
                )
                response.raise_for_status()
        except (HTTPError, InvalidURL, UnicodeError) as exc:
            self._logger.warning(
                f"Failed to shorten {url=}, falling back to the original",
                error=repr(exc),
            )
            return ShortenedUrl.unchanged(url)
        shortened = response.text.strip()
        if not shortened:
            self._logger.warning(f"Empty shortening response for {url=}")
            return ShortenedUrl.unchanged(url)
        self._logger.info(f"Shortened {url=} to {shortened=}")
        return ShortenedUrl(url=shortened, original_url=url)
