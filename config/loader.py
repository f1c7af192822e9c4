"""Load and validate the YAML monitor configuration."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

import yaml

from models import MonitorConfig, SiteWatch

logger = logging.getLogger(__name__)

_SITE_STRING_KEYS = {
    "URL": "url",
    "name": "name",
    "no_stock_indicator": "out_of_stock_marker",
}


class ConfigError(ValueError):
    """Raised when the monitor configuration cannot be used."""


def _parse_site(index: int, entry: Any) -> SiteWatch:
    if not isinstance(entry, Mapping):
        raise ConfigError(f"websites[{index}] must be a mapping")

    values: dict[str, Any] = {}
    for key, attribute in _SITE_STRING_KEYS.items():
        if key not in entry:
            raise ConfigError(f"websites[{index}] is missing required key '{key}'")
        value = entry[key]
        if not isinstance(value, str):
            raise ConfigError(f"websites[{index}].{key} must be a string")
        values[attribute] = value

    if "interval" not in entry:
        raise ConfigError(f"websites[{index}] is missing required key 'interval'")
    interval = entry["interval"]
    # bool is an int subclass; `interval: yes` is a typo, not a delay
    if isinstance(interval, bool) or not isinstance(interval, int):
        raise ConfigError(f"websites[{index}].interval must be an integer (milliseconds)")
    if interval < 0:
        raise ConfigError(f"websites[{index}].interval cannot be negative")

    site = SiteWatch(interval_ms=interval, **values)
    if site.interval_ms == 0:
        logger.warning(
            "Site %s has interval 0; it will be polled back-to-back without delay",
            site.name,
        )
    return site


def parse_monitor_config(document: Any) -> MonitorConfig:
    """Validate an already-deserialized config document."""
    if not isinstance(document, Mapping):
        raise ConfigError("Config document must be a mapping with 'webhook' and 'websites' keys")

    if "webhook" not in document:
        raise ConfigError("Config is missing required key 'webhook'")
    webhook = document["webhook"]
    if not isinstance(webhook, str) or not webhook.strip():
        raise ConfigError("'webhook' must be a non-empty string")

    if "websites" not in document:
        raise ConfigError("Config is missing required key 'websites'")
    websites = document["websites"]
    if not isinstance(websites, list):
        raise ConfigError("'websites' must be a list")

    sites = tuple(_parse_site(index, entry) for index, entry in enumerate(websites))
    return MonitorConfig(webhook_url=webhook, sites=sites)


def load_monitor_config(path: Path) -> MonitorConfig:
    """Read ``path`` and return the validated monitor configuration.

    Raises:
        ConfigError: the file is missing, unreadable, not valid YAML or
            does not match the expected shape.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Unable to open {path}: {exc}") from exc

    try:
        document = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

    config = parse_monitor_config(document)
    logger.info("Loaded %s site(s) from %s", len(config.sites), path)
    return config


__all__ = ["ConfigError", "load_monitor_config", "parse_monitor_config"]
