"""Configuration helpers for environment-driven settings."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

if os.getenv("PYTEST_CURRENT_TEST") is None:
    load_dotenv()


def _resolve_path(value: str) -> Path:
    path = Path(value)
    if not path.is_absolute():
        path = Path.cwd() / path
    return path


@dataclass(slots=True)
class Settings:
    """Runtime process settings sourced from environment variables."""

    CONFIG_PATH: Path = field(init=False)
    REQUEST_TIMEOUT: float = field(init=False)
    LOG_DIR: Path = field(init=False)
    LOG_LEVEL: int = field(init=False)

    def __post_init__(self) -> None:
        self.reload()

    def reload(self) -> None:
        config_path = os.getenv("CONFIG_PATH", "config.yaml").strip()
        if not config_path:
            raise ValueError("CONFIG_PATH cannot be empty")
        self.CONFIG_PATH = _resolve_path(config_path)

        try:
            timeout = float(os.getenv("REQUEST_TIMEOUT", "5"))
        except ValueError as exc:
            raise ValueError("REQUEST_TIMEOUT must be a number") from exc
        if timeout <= 0:
            raise ValueError("REQUEST_TIMEOUT must be positive")
        self.REQUEST_TIMEOUT = timeout

        self.LOG_DIR = _resolve_path(os.getenv("LOG_DIR", "logs").strip() or "logs")

        level_name = os.getenv("LOG_LEVEL", "INFO").strip().upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            raise ValueError(f"LOG_LEVEL must be a logging level name, got {level_name!r}")
        self.LOG_LEVEL = level


settings = Settings()
