"""Config package initialization"""
from .loader import ConfigError, load_monitor_config, parse_monitor_config
from .settings import Settings, settings

__all__ = ["ConfigError", "Settings", "load_monitor_config", "parse_monitor_config", "settings"]
