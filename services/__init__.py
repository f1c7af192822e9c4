"""Services package initialization"""
from .notifier import WebhookNotifier, build_payload
from .poller import FetchError, SitePoller
from .runtime import run_monitor, start_pollers

__all__ = ["FetchError", "SitePoller", "WebhookNotifier", "build_payload", "run_monitor", "start_pollers"]
