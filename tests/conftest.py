"""Pytest configuration and fixtures."""
from __future__ import annotations

from pathlib import Path
from typing import Awaitable, Callable

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from config import settings
from models import SiteWatch


@pytest.fixture(autouse=True)
def mock_env_vars(monkeypatch, tmp_path) -> None:
    """Set up test environment variables"""
    monkeypatch.setenv('CONFIG_PATH', str(tmp_path / 'config.yaml'))
    monkeypatch.setenv('REQUEST_TIMEOUT', '5')
    monkeypatch.setenv('LOG_DIR', str(tmp_path / 'logs'))
    monkeypatch.setenv('LOG_LEVEL', 'INFO')
    settings.reload()


@pytest.fixture
def site() -> SiteWatch:
    return SiteWatch(
        url="http://shop.example/widget",
        name="Widget",
        interval_ms=100,
        out_of_stock_marker="Sold out",
    )


@pytest.fixture
def config_file(tmp_path) -> Callable[[str], Path]:
    """Write a YAML document to the configured CONFIG_PATH."""

    def _write(text: str) -> Path:
        path = tmp_path / 'config.yaml'
        path.write_text(text, encoding='utf-8')
        return path

    return _write


@pytest_asyncio.fixture
async def serve() -> Callable[[web.Application], Awaitable[TestServer]]:
    """Start local aiohttp applications and close them after the test."""
    servers: list[TestServer] = []

    async def _serve(app: web.Application) -> TestServer:
        server = TestServer(app)
        await server.start_server()
        servers.append(server)
        return server

    yield _serve

    for server in servers:
        await server.close()
