"""
Data models for minigrep.

This module contains the configuration and result values passed between the
resolver, the driver and the line matcher.
"""

from .config import SearchConfig, Settings
from .search_results import SearchResults

__all__ = ['SearchConfig', 'Settings', 'SearchResults']
