"""
Command-line entry point for minigrep.

Usage: minigrep <query> <filepath>

Set MG_IGNORE_CASE (to any value) for case-insensitive matching.
"""

import os
import sys
import logging
from typing import Mapping, Optional, Sequence

from .config.parser import load_settings
from .config.resolver import build, environ_lookup
from .errors import ConfigurationError, MinigrepError
from .runner import run


logger = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None, environ: Optional[Mapping[str, str]] = None) -> int:
    """
    Run a search from the command line.

    Args:
        argv: Argument list including the program name; defaults to sys.argv
        environ: Environment mapping; defaults to os.environ

    Returns:
        Process exit status: 0 on success, 1 on any error
    """
    if argv is None:
        argv = sys.argv
    if environ is None:
        environ = os.environ

    try:
        config = build(argv, environ_lookup(environ))
    except ConfigurationError as e:
        print(f"Problem parsing arguments: {e}", file=sys.stderr)
        return 1

    try:
        result = load_settings()
        logging.basicConfig(level=result.settings.log_level, stream=sys.stderr)
        logger.debug(f"Resolved configuration: {config}")
        for warning in result.warnings:
            logger.warning(warning)

        run(config, result.settings)
    except MinigrepError as e:
        print(f"Application error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
