from __future__ import annotations

import pytest

from services.http import DEFAULT_TIMEOUT, create_session


@pytest.mark.asyncio
async def test_create_session_uses_fixed_timeout_and_pool():
    session = create_session()
    try:
        assert DEFAULT_TIMEOUT == 5
        assert session.timeout.total == 5
        assert session.connector.limit == 100
        assert session.connector.limit_per_host == 10
    finally:
        await session.close()


@pytest.mark.asyncio
async def test_create_session_accepts_custom_timeout():
    session = create_session(timeout=1.5)
    try:
        assert session.timeout.total == 1.5
    finally:
        await session.close()
