"""Runtime wiring: one polling task per configured site."""
from __future__ import annotations

import asyncio
import logging
from typing import List

import aiohttp

from models import MonitorConfig
from services.http import DEFAULT_TIMEOUT, create_session
from services.notifier import WebhookNotifier
from services.poller import SitePoller

logger = logging.getLogger(__name__)


def start_pollers(
    config: MonitorConfig,
    session: aiohttp.ClientSession,
) -> List[asyncio.Task]:
    """Spawn an independent poller task for every site in ``config``."""
    notifier = WebhookNotifier(session, config.webhook_url)
    tasks: List[asyncio.Task] = []
    for site in config.sites:
        logger.info("✨ Starting monitor for %s", site.name)
        poller = SitePoller(site, session, notifier)
        tasks.append(asyncio.create_task(poller.run(), name=f"poller:{site.name}"))
    return tasks


async def run_monitor(config: MonitorConfig, timeout: float = DEFAULT_TIMEOUT) -> None:
    """Run every poller until the process is stopped."""
    if not config.sites:
        logger.warning("No websites configured; nothing to monitor")

    async with create_session(timeout) as session:
        tasks = start_pollers(config, session)
        logger.info("Monitoring %s site(s), webhook target set", len(tasks))
        try:
            # pollers never return; an empty list leaves the process idle
            if tasks:
                await asyncio.gather(*tasks)
            else:
                await asyncio.Event().wait()
        finally:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)


__all__ = ["run_monitor", "start_pollers"]
