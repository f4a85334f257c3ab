"""
Configuration package for minigrep.

This package resolves the per-invocation search configuration from arguments
and the environment, and loads the optional YAML settings file.
"""

from .parser import (
    SettingsParser,
    SettingsParseResult,
    load_settings,
    create_settings_template
)
from .resolver import (
    IGNORE_CASE_ENV_VAR,
    build,
    environ_lookup
)

__all__ = [
    'SettingsParser',
    'SettingsParseResult',
    'load_settings',
    'create_settings_template',
    'IGNORE_CASE_ENV_VAR',
    'build',
    'environ_lookup'
]
