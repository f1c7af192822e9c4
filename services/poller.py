"""Per-site polling loop."""
from __future__ import annotations

import asyncio
import logging

import aiohttp

from models import SiteWatch
from services.notifier import WebhookNotifier

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised when a watched page could not be fetched or decoded."""

    def __init__(self, url: str, cause: BaseException) -> None:
        super().__init__(f"Failed to fetch {url}: {cause!r}")
        self.url = url
        self.cause = cause


def marker_absent(body: str, marker: str) -> bool:
    """Availability rule: the page is in stock iff the marker is missing."""
    return marker not in body


class SitePoller:
    """Polls one site forever and notifies while it looks available."""

    def __init__(
        self,
        site: SiteWatch,
        session: aiohttp.ClientSession,
        notifier: WebhookNotifier,
    ) -> None:
        self.site = site
        self.session = session
        self.notifier = notifier

    async def fetch(self) -> str:
        """Return the page body as text, whatever the status code."""
        url = self.site.url
        logger.info("Making request to %s", url)
        try:
            async with self.session.get(url) as response:
                # undeclared or wrong charsets must not hide the page
                return await response.text(errors="replace")
        except asyncio.TimeoutError as exc:
            raise FetchError(url, exc) from exc
        except aiohttp.ClientError as exc:
            raise FetchError(url, exc) from exc

    async def is_available(self) -> bool:
        try:
            body = await self.fetch()
        except FetchError as exc:
            logger.warning("Treating %s as unavailable: %s", self.site.url, exc.cause)
            logger.debug("Fetch error details", exc_info=True)
            return False
        return marker_absent(body, self.site.out_of_stock_marker)

    async def check_once(self) -> bool:
        """Run one poll cycle. Returns True if a notification was attempted."""
        if not await self.is_available():
            return False

        logger.info("🚀 Is in stock on %s!", self.site.url)
        if not await self.notifier.send(self.site):
            logger.error("Failed to send webhook for %s", self.site.name)
        return True

    async def run(self) -> None:
        """Poll until cancelled; one cycle at a time, sleeping between them."""
        if self.site.interval_ms == 0:
            logger.warning("Polling %s without any delay between requests", self.site.url)

        while True:
            try:
                await self.check_once()
            except asyncio.CancelledError:
                logger.info("Poller for %s cancelled", self.site.name)
                raise
            except Exception:
                logger.exception("Unexpected error while checking %s", self.site.url)
            await asyncio.sleep(self.site.interval_seconds)


__all__ = ["FetchError", "SitePoller", "marker_absent"]
