"""Models package initialization"""
from .site_watch import MonitorConfig, SiteWatch

__all__ = ['MonitorConfig', 'SiteWatch']
