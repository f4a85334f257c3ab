"""
Line matcher for minigrep.

Pure functions that split text into lines and select the lines containing a
query, either exactly or ignoring case. Nothing here performs I/O or raises.
"""

from typing import Callable, Iterator, List


SearchFunction = Callable[[str, str], List[str]]


def iter_lines(contents: str) -> Iterator[str]:
    """
    Yield the lines of ``contents`` in order.

    Lines are separated by ``\\n``; a ``\\r`` directly before the ``\\n`` is
    dropped. The last line does not need a trailing newline, and a trailing
    newline does not start an extra empty line.

    Args:
        contents: Text to split

    Yields:
        Each line without its line ending
    """
    segments = contents.split('\n')
    last = segments.pop()

    for segment in segments:
        if segment.endswith('\r'):
            segment = segment[:-1]
        yield segment

    # Text after the final newline, if any
    if last:
        yield last


def search(query: str, contents: str) -> List[str]:
    """
    Return the lines of ``contents`` that contain ``query`` exactly.

    Args:
        query: Substring to look for; an empty query matches every line
        contents: Text to search

    Returns:
        Matching lines in their original order (empty if none match)
    """
    return [line for line in iter_lines(contents) if query in line]


def search_case_insensitive(query: str, contents: str) -> List[str]:
    """
    Return the lines of ``contents`` that contain ``query`` ignoring case.

    Both the query and each line are lowercased before the containment test,
    so ``"rUsT"`` matches ``"Rust:"`` and ``"Trust me."``.

    Args:
        query: Substring to look for; an empty query matches every line
        contents: Text to search

    Returns:
        Matching lines, unchanged and in their original order
    """
    needle = query.lower()
    return [line for line in iter_lines(contents) if needle in line.lower()]


def select_search(ignore_case: bool) -> SearchFunction:
    """Pick the matcher for the requested comparison mode."""
    return search_case_insensitive if ignore_case else search
