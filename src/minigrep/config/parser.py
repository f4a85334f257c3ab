"""
YAML settings parser for minigrep.

This module loads the optional settings file, validates it into a Settings
object, and reports unknown keys as warnings. When no settings file can be
found the defaults are used.
"""

import yaml
from pathlib import Path
from typing import Dict, Any, Optional, List, Union
import logging
from dataclasses import dataclass

from pydantic import ValidationError

from ..errors import ConfigurationError
from ..models.config import Settings


logger = logging.getLogger(__name__)


@dataclass
class SettingsParseResult:
    """
    Result of a settings parsing operation.

    Attributes:
        settings: The parsed and validated settings
        warnings: List of non-fatal warnings
        settings_path: Path to the settings file used
        is_default: Whether default settings were used
    """
    settings: Settings
    warnings: List[str]
    settings_path: Optional[Path]
    is_default: bool


class SettingsParser:
    """
    YAML settings parser with validation and error handling.

    Handles settings file discovery, YAML parsing, and conversion to Settings
    objects, with helpful error messages for malformed files.
    """

    DEFAULT_SETTINGS_NAMES = [
        '.minigrep.yaml',
        '.minigrep.yml',
        'minigrep.yaml',
        'minigrep.yml'
    ]

    def __init__(self, strict_mode: bool = False):
        """
        Initialize the settings parser.

        Args:
            strict_mode: If True, treat warnings as errors
        """
        self.strict_mode = strict_mode
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def load_settings(self, settings_path: Optional[Union[str, Path]] = None) -> SettingsParseResult:
        """
        Load and parse settings from file or use defaults.

        Args:
            settings_path: Path to settings file. If None, searches the default locations.

        Returns:
            SettingsParseResult containing parsed settings and metadata

        Raises:
            ConfigurationError: If settings are invalid or the file cannot be read
        """
        if settings_path:
            # Use specified settings file
            settings_path = Path(settings_path)
            if not settings_path.exists():
                raise ConfigurationError(f"Settings file not found: {settings_path}")
            settings_data = self._load_yaml_file(settings_path)
            is_default = False
        else:
            # Search for default settings files
            settings_path, settings_data = self._find_and_load_settings()
            is_default = settings_data is None
            if is_default:
                settings_data = {}

        warnings = self._get_unknown_key_warnings(settings_data)

        # Handle strict mode
        if self.strict_mode and warnings:
            raise ConfigurationError(f"Settings warnings in strict mode: {'; '.join(warnings)}")

        # Validate the settings data
        settings = self._validate_settings_data(settings_data)

        self.logger.info(f"Settings loaded from {settings_path or 'defaults'}")

        return SettingsParseResult(
            settings=settings,
            warnings=warnings,
            settings_path=settings_path,
            is_default=is_default
        )

    def _search_paths(self) -> List[Path]:
        """Directories searched for a settings file, in priority order."""
        return [
            Path.cwd(),
            Path.home(),
            Path.home() / '.config' / 'minigrep',
        ]

    def _find_and_load_settings(self) -> tuple[Optional[Path], Optional[Dict[str, Any]]]:
        """
        Find and load a settings file from the default locations.

        Returns:
            Tuple of (settings_path, settings_data) or (None, None) if not found
        """
        for search_path in self._search_paths():
            for settings_name in self.DEFAULT_SETTINGS_NAMES:
                settings_file = search_path / settings_name
                if settings_file.exists() and settings_file.is_file():
                    try:
                        settings_data = self._load_yaml_file(settings_file)
                        self.logger.info(f"Found settings file: {settings_file}")
                        return settings_file, settings_data
                    except ConfigurationError as e:
                        self.logger.warning(f"Failed to load {settings_file}: {e}")
                        continue

        self.logger.info("No settings file found, using defaults")
        return None, None

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """
        Load and parse a YAML file.

        Args:
            file_path: Path to YAML file

        Returns:
            Parsed YAML data as dictionary

        Raises:
            ConfigurationError: If file cannot be read or parsed
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                content = f.read()

            # Handle empty files
            if not content.strip():
                self.logger.warning(f"Settings file is empty: {file_path}")
                return {}

            # Parse YAML
            data = yaml.safe_load(content)

            # Handle None result (empty YAML)
            if data is None:
                return {}

            # Ensure we have a dictionary
            if not isinstance(data, dict):
                raise ConfigurationError(f"Settings file must contain a YAML object, got {type(data).__name__}")

            return data

        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax in {file_path}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Cannot read settings file {file_path}: {e}") from e

    def _validate_settings_data(self, settings_data: Dict[str, Any]) -> Settings:
        """
        Validate settings data and build a Settings object.

        Raises:
            ConfigurationError: If a value is invalid
        """
        # Unknown keys were already reported as warnings
        known = {key: value for key, value in settings_data.items() if key in Settings.model_fields}
        try:
            return Settings.from_dict(known)
        except ValidationError as e:
            raise ConfigurationError(f"Settings validation failed: {e}") from e

    def _get_unknown_key_warnings(self, settings_data: Dict[str, Any]) -> List[str]:
        warnings = []
        for key in settings_data:
            if key not in Settings.model_fields:
                warnings.append(f"Unknown settings key ignored: {key}")
        return warnings

    def get_settings_template(self) -> str:
        """
        Get a template settings file with all options and comments.

        Returns:
            YAML template as string
        """
        defaults = Settings().to_dict()
        lines = [
            "# minigrep settings",
            "# Case-insensitive matching is controlled by the MG_IGNORE_CASE environment variable",
            "",
        ]

        sections = [
            ("encoding", "Text encoding used to read searched files"),
            ("log_level", "Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"),
        ]

        for key, comment in sections:
            lines.append(f"# {comment}")
            lines.append(yaml.dump({key: defaults[key]}, default_flow_style=False, sort_keys=False).rstrip())
            lines.append("")

        return "\n".join(lines)


def load_settings(settings_path: Optional[Union[str, Path]] = None, strict_mode: bool = False) -> SettingsParseResult:
    """
    Convenience function to load settings.

    Args:
        settings_path: Path to settings file (optional)
        strict_mode: Whether to treat warnings as errors

    Returns:
        SettingsParseResult containing parsed settings

    Raises:
        ConfigurationError: If settings are invalid
    """
    parser = SettingsParser(strict_mode=strict_mode)
    return parser.load_settings(settings_path)


def create_settings_template(output_path: Union[str, Path]) -> None:
    """
    Create a template settings file.

    Args:
        output_path: Where to save the template

    Raises:
        ConfigurationError: If the template cannot be written
    """
    parser = SettingsParser()
    template_content = parser.get_settings_template()

    try:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(template_content)

    except OSError as e:
        raise ConfigurationError(f"Cannot create template file {output_path}: {e}") from e
