"""Shared HTTP client construction."""
from __future__ import annotations

import aiohttp

DEFAULT_TIMEOUT = 5.0


def create_session(timeout: float = DEFAULT_TIMEOUT) -> aiohttp.ClientSession:
    """Create the pooled session shared by every poller and the notifier.

    Must be called from inside a running event loop.
    """
    client_timeout = aiohttp.ClientTimeout(total=timeout)
    connector = aiohttp.TCPConnector(limit=100, limit_per_host=10)
    return aiohttp.ClientSession(timeout=client_timeout, connector=connector)
