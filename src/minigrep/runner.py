"""
Search driver for minigrep.

Reads the whole target file, runs the line matcher in the configured mode and
writes the matched lines to the output stream.
"""

import sys
import logging
from pathlib import Path
from typing import Optional, TextIO

from .errors import FileReadError
from .models.config import SearchConfig, Settings
from .models.search_results import SearchResults
from .tools.line_matcher import select_search


logger = logging.getLogger(__name__)


def read_contents(filepath: str, encoding: str = "utf-8") -> str:
    """
    Read a whole file into memory as text.

    Args:
        filepath: Path of the file to read
        encoding: Text encoding of the file

    Returns:
        The file contents

    Raises:
        FileReadError: If the file is missing, unreadable or not valid text
    """
    try:
        contents = Path(filepath).read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError, LookupError) as e:
        raise FileReadError(filepath, str(e)) from e

    logger.info(f"Read {len(contents)} characters from {filepath}")
    return contents


def run(config: SearchConfig, settings: Optional[Settings] = None, out: Optional[TextIO] = None) -> SearchResults:
    """
    Search the configured file and print the matching lines.

    Args:
        config: Resolved search configuration
        settings: Tool settings; defaults are used when None
        out: Stream receiving the rendered results; defaults to stdout

    Returns:
        The search results that were printed

    Raises:
        FileReadError: If the file cannot be read
    """
    if settings is None:
        settings = Settings()
    if out is None:
        out = sys.stdout

    contents = read_contents(config.filepath, settings.encoding)

    matcher = select_search(config.ignore_case)
    results = SearchResults.from_config(config, matcher(config.query, contents))
    logger.debug(f"{results} ({config.mode})")

    out.write(results.render() + "\n")
    return results
