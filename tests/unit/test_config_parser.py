"""
Unit tests for the settings parser.

Tests YAML settings loading, discovery, validation, and error handling of the
SettingsParser class.
"""

import pytest
import tempfile
import os
import yaml
from pathlib import Path
from unittest.mock import patch

from minigrep.config.parser import (
    SettingsParser,
    SettingsParseResult,
    load_settings,
    create_settings_template
)
from minigrep.errors import ConfigurationError
from minigrep.models.config import Settings


def write_yaml(directory: Path, name: str, content: str) -> Path:
    path = directory / name
    path.write_text(content, encoding='utf-8')
    return path


class TestSettingsParser:
    """Test cases for SettingsParser class."""

    def test_init_default(self):
        """Test default initialization."""
        parser = SettingsParser()
        assert parser.strict_mode is False
        assert parser.DEFAULT_SETTINGS_NAMES == [
            '.minigrep.yaml',
            '.minigrep.yml',
            'minigrep.yaml',
            'minigrep.yml'
        ]

    def test_init_strict_mode(self):
        parser = SettingsParser(strict_mode=True)
        assert parser.strict_mode is True

    def test_load_valid_file(self):
        """Test loading settings from a valid YAML file."""
        with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
            yaml.dump({'encoding': 'latin-1', 'log_level': 'debug'}, f)
            temp_path = f.name

        try:
            result = SettingsParser().load_settings(temp_path)

            assert isinstance(result, SettingsParseResult)
            assert result.settings.encoding == 'latin-1'
            assert result.settings.log_level == 'DEBUG'
            assert result.settings_path == Path(temp_path)
            assert result.is_default is False
            assert result.warnings == []
        finally:
            os.unlink(temp_path)

    def test_load_nonexistent_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Settings file not found"):
            SettingsParser().load_settings(tmp_path / "missing.yaml")

    def test_load_empty_file(self, tmp_path):
        """Empty files give default settings."""
        path = write_yaml(tmp_path, "empty.yaml", "   \n")
        result = SettingsParser().load_settings(path)

        assert result.settings == Settings()
        assert result.is_default is False

    def test_load_null_yaml(self, tmp_path):
        path = write_yaml(tmp_path, "null.yaml", "~\n")
        result = SettingsParser().load_settings(path)
        assert result.settings == Settings()

    def test_load_non_mapping(self, tmp_path):
        """A YAML list is not a valid settings file."""
        path = write_yaml(tmp_path, "list.yaml", "- encoding\n- utf-8\n")

        with pytest.raises(ConfigurationError, match="must contain a YAML object"):
            SettingsParser().load_settings(path)

    def test_load_invalid_yaml(self, tmp_path):
        path = write_yaml(tmp_path, "bad.yaml", "encoding: [utf-8\n")

        with pytest.raises(ConfigurationError, match="Invalid YAML syntax"):
            SettingsParser().load_settings(path)

    def test_load_invalid_value(self, tmp_path):
        path = write_yaml(tmp_path, "bad.yaml", "log_level: LOUD\n")

        with pytest.raises(ConfigurationError, match="Settings validation failed"):
            SettingsParser().load_settings(path)

    def test_unknown_keys_warn(self, tmp_path):
        """Unknown keys are ignored with a warning."""
        path = write_yaml(tmp_path, "extra.yaml", "encoding: utf-8\ncolor: true\n")
        result = SettingsParser().load_settings(path)

        assert result.settings.encoding == 'utf-8'
        assert result.warnings == ["Unknown settings key ignored: color"]

    def test_unknown_keys_strict_mode(self, tmp_path):
        path = write_yaml(tmp_path, "extra.yaml", "color: true\n")

        with pytest.raises(ConfigurationError, match="strict mode"):
            SettingsParser(strict_mode=True).load_settings(path)

    def test_read_error(self, tmp_path):
        """Read failures are reported as configuration errors."""
        path = write_yaml(tmp_path, "settings.yaml", "encoding: utf-8\n")

        with patch("builtins.open", side_effect=PermissionError("denied")):
            with pytest.raises(ConfigurationError, match="Cannot read settings file"):
                SettingsParser().load_settings(path)


class TestSettingsDiscovery:
    """Test cases for default settings file discovery."""

    def test_no_settings_file_uses_defaults(self, tmp_path):
        with patch.object(SettingsParser, '_search_paths', return_value=[tmp_path]):
            result = SettingsParser().load_settings()

        assert result.is_default is True
        assert result.settings_path is None
        assert result.settings == Settings()

    def test_discovers_file(self, tmp_path):
        path = write_yaml(tmp_path, ".minigrep.yaml", "log_level: info\n")

        with patch.object(SettingsParser, '_search_paths', return_value=[tmp_path]):
            result = SettingsParser().load_settings()

        assert result.is_default is False
        assert result.settings_path == path
        assert result.settings.log_level == 'INFO'

    def test_name_priority(self, tmp_path):
        """Earlier names in DEFAULT_SETTINGS_NAMES win."""
        write_yaml(tmp_path, "minigrep.yml", "log_level: error\n")
        first = write_yaml(tmp_path, ".minigrep.yml", "log_level: debug\n")

        with patch.object(SettingsParser, '_search_paths', return_value=[tmp_path]):
            result = SettingsParser().load_settings()

        assert result.settings_path == first
        assert result.settings.log_level == 'DEBUG'

    def test_directory_priority(self, tmp_path):
        """Earlier search directories win."""
        near = tmp_path / "near"
        far = tmp_path / "far"
        near.mkdir()
        far.mkdir()
        write_yaml(far, ".minigrep.yaml", "log_level: error\n")
        expected = write_yaml(near, "minigrep.yaml", "log_level: info\n")

        with patch.object(SettingsParser, '_search_paths', return_value=[near, far]):
            result = SettingsParser().load_settings()

        assert result.settings_path == expected

    def test_broken_file_skipped(self, tmp_path):
        """Files that fail to parse are skipped during discovery."""
        write_yaml(tmp_path, ".minigrep.yaml", "encoding: [oops\n")
        fallback = write_yaml(tmp_path, "minigrep.yaml", "encoding: latin-1\n")

        with patch.object(SettingsParser, '_search_paths', return_value=[tmp_path]):
            result = SettingsParser().load_settings()

        assert result.settings_path == fallback
        assert result.settings.encoding == 'latin-1'

    def test_search_paths(self):
        paths = SettingsParser()._search_paths()

        assert paths[0] == Path.cwd()
        assert paths[1] == Path.home()
        assert paths[2] == Path.home() / '.config' / 'minigrep'


class TestSettingsTemplate:
    """Test cases for settings template generation."""

    def test_template_is_valid_yaml(self):
        template = SettingsParser().get_settings_template()
        data = yaml.safe_load(template)

        assert data == {'encoding': 'utf-8', 'log_level': 'WARNING'}
        assert "MG_IGNORE_CASE" in template

    def test_create_template_file(self, tmp_path):
        """The written template loads back as default settings."""
        output = tmp_path / "nested" / ".minigrep.yaml"
        create_settings_template(output)

        assert output.exists()
        result = load_settings(output)
        assert result.settings == Settings()
        assert result.warnings == []

    def test_create_template_write_error(self, tmp_path):
        with patch("builtins.open", side_effect=OSError("disk full")):
            with pytest.raises(ConfigurationError, match="Cannot create template file"):
                create_settings_template(tmp_path / "t.yaml")


class TestConvenienceFunctions:
    """Test cases for module-level helpers."""

    def test_load_settings_function(self, tmp_path):
        path = write_yaml(tmp_path, "s.yaml", "encoding: ascii\n")
        result = load_settings(path)
        assert result.settings.encoding == 'ascii'

    def test_load_settings_strict(self, tmp_path):
        path = write_yaml(tmp_path, "s.yaml", "unknown: 1\n")
        with pytest.raises(ConfigurationError):
            load_settings(path, strict_mode=True)
