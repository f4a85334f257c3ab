"""
minigrep - Core Package

A small command-line text search utility that reports which lines of a file
contain a query string, optionally ignoring case.
"""

__version__ = "0.1.0"
__author__ = "minigrep Team"
