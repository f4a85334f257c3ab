"""
Configuration data models for minigrep.

This module defines the immutable search configuration assembled from command-line
arguments and the environment, and the optional tool settings loaded from YAML.
"""

import codecs
from typing import Dict, Any
from pathlib import Path
from pydantic import BaseModel, ConfigDict, Field, field_validator


VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class SearchConfig(BaseModel):
    """
    The inputs of a single search invocation.

    Built once by the configuration resolver and never mutated afterwards.

    Attributes:
        query: Substring to look for in each line
        filepath: Path of the file to search
        ignore_case: Whether lines are compared case-insensitively
    """

    model_config = ConfigDict(frozen=True)

    query: str = Field(..., description="Substring to search for")
    filepath: str = Field(..., description="Path of the file to search")
    ignore_case: bool = Field(False, description="Case-insensitive matching")

    @property
    def mode(self) -> str:
        """Name of the active comparison mode."""
        return "case-insensitive" if self.ignore_case else "case-sensitive"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return self.model_dump()

    def __str__(self) -> str:
        return f"Query: '{self.query}' | File: {Path(self.filepath).name} | Mode: {self.mode}"


class Settings(BaseModel):
    """
    Optional tool settings read from a YAML settings file.

    Attributes:
        encoding: Text encoding used to read the searched file
        log_level: Logging level name for the command-line tool
    """

    encoding: str = Field("utf-8", min_length=1, description="Encoding of searched files")
    log_level: str = Field("WARNING", description="Logging level")

    @field_validator('encoding')
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Reject unknown encodings and codecs that do not decode bytes to text."""
        try:
            codec_info = codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown encoding: {v}")
        # Codecs such as base64 or rot13 are registered but do not produce text
        if not getattr(codec_info, "_is_text_encoding", True):
            raise ValueError(f"Not a text encoding: {v}")
        return v

    @field_validator('log_level', mode='before')
    @classmethod
    def validate_log_level(cls, v) -> str:
        """Normalize the level name to upper case."""
        if not isinstance(v, str):
            raise ValueError(f"Log level must be a string, got {type(v).__name__}")
        level = v.strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of {', '.join(VALID_LOG_LEVELS)}")
        return level

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return self.model_dump()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Settings':
        """Create a Settings instance from a dictionary."""
        return cls.model_validate(data)
