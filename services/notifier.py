"""Webhook notifications for available products."""
from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

import aiohttp

from models import SiteWatch

logger = logging.getLogger(__name__)

USERNAME = "🖥  - Monitor"
EMBED_TITLE = "Monitor triggered"
EMBED_COLOR = 1841963
FOOTER_TEXT = "built by peet with ❤️"


def build_payload(site: SiteWatch) -> dict[str, Any]:
    return {
        "username": USERNAME,
        "embeds": [
            {
                "title": EMBED_TITLE,
                "color": EMBED_COLOR,
                "description": f"The product is available on {site.name}",
                "url": site.url,
                "footer": {"text": FOOTER_TEXT},
            }
        ],
    }


class WebhookNotifier:
    """Posts availability embeds to a single webhook URL."""

    def __init__(self, session: aiohttp.ClientSession, webhook_url: str) -> None:
        self.session = session
        self.webhook_url = webhook_url

    async def send(self, site: SiteWatch) -> bool:
        """Send one notification for ``site``. Returns True on success."""
        logger.info("Sending webhook for %s", site.name)
        payload = build_payload(site)
        logger.debug("Webhook payload: %s", json.dumps(payload, ensure_ascii=False))

        try:
            async with self.session.post(self.webhook_url, json=payload) as response:
                body = await response.text(errors="replace")
                logger.info("Response: %s %s", response.status, body)
                response.raise_for_status()
        except asyncio.TimeoutError:
            logger.warning("Timeout sending webhook for %s", site.name)
            return False
        except aiohttp.ClientResponseError as exc:
            logger.warning("Webhook rejected notification for %s (status %s)", site.name, exc.status)
            return False
        except aiohttp.ClientError as exc:
            logger.warning("Error sending webhook for %s: %s", site.name, exc)
            logger.debug("Webhook error details", exc_info=True)
            return False
        return True


__all__ = ["WebhookNotifier", "build_payload"]
