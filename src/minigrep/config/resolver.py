"""
Search configuration resolver for minigrep.

Turns the raw command-line argument list and the process environment into a
validated SearchConfig. The environment is read through an injected lookup
callable so callers control where ``MG_IGNORE_CASE`` comes from.
"""

import os
from typing import Callable, Mapping, Optional, Sequence

from ..errors import MissingArgumentError
from ..models.config import SearchConfig


IGNORE_CASE_ENV_VAR = "MG_IGNORE_CASE"
MISSING_ARGUMENT_MESSAGE = "Args: query, filepath. Not enough args"

EnvironmentLookup = Callable[[str], Optional[str]]


def environ_lookup(environ: Mapping[str, str]) -> EnvironmentLookup:
    """
    Adapt a mapping into an environment lookup.

    Args:
        environ: Mapping of variable names to values, e.g. ``os.environ``

    Returns:
        Callable returning the value of a variable, or None when it is unset
    """
    return environ.get


def build(args: Sequence[str], env_lookup: Optional[EnvironmentLookup] = None) -> SearchConfig:
    """
    Build a SearchConfig from command-line arguments.

    ``args[0]`` is the program name, ``args[1]`` the query and ``args[2]`` the
    file path; anything after that is ignored. The file path is not checked
    here. Case-insensitive matching is enabled when ``MG_IGNORE_CASE`` is set
    to any value, including the empty string.

    Args:
        args: Raw argument list, program name first
        env_lookup: Environment lookup; defaults to the process environment

    Returns:
        The resolved configuration

    Raises:
        MissingArgumentError: If fewer than three arguments are given
    """
    if len(args) < 3:
        raise MissingArgumentError(MISSING_ARGUMENT_MESSAGE)

    if env_lookup is None:
        env_lookup = os.environ.get

    ignore_case = env_lookup(IGNORE_CASE_ENV_VAR) is not None

    return SearchConfig(query=args[1], filepath=args[2], ignore_case=ignore_case)
