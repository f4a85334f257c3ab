"""
Search tools for minigrep.

This module contains the line matcher used by the search driver.
"""

from .line_matcher import iter_lines, search, search_case_insensitive, select_search

__all__ = ['iter_lines', 'search', 'search_case_insensitive', 'select_search']
