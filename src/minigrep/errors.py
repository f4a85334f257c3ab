"""
Exception hierarchy for minigrep.

Every error raised by the package derives from MinigrepError so the command-line
entry point can report failures with a single handler.
"""

from typing import Optional


class MinigrepError(Exception):
    """Base class for all minigrep errors."""
    pass


class ConfigurationError(MinigrepError):
    """Raised when settings parsing or validation fails."""
    pass


class MissingArgumentError(ConfigurationError):
    """Raised when the query or file path argument is missing."""
    pass


class FileReadError(MinigrepError):
    """
    Raised when the target file cannot be read.

    The underlying OSError or UnicodeDecodeError is kept as __cause__.

    Attributes:
        filepath: Path of the file that could not be read
        reason: Description of the underlying failure
    """

    def __init__(self, filepath: str, reason: Optional[str] = None):
        self.filepath = filepath
        self.reason = reason
        message = f"Cannot read file {filepath}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
