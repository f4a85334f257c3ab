"""
Search results data model for minigrep.

Holds the matched lines of one search together with the configuration that
produced them.
"""

from typing import Dict, List, Any
from pydantic import BaseModel, Field

from .config import SearchConfig


class SearchResults(BaseModel):
    """
    Lines of a file that matched a query.

    Attributes:
        query: The query that was searched for
        filepath: The file that was searched
        ignore_case: Whether the search was case-insensitive
        matches: Matching lines in their original order
    """

    query: str = Field(..., description="The query that was searched for")
    filepath: str = Field(..., description="The file that was searched")
    ignore_case: bool = Field(False, description="Whether the search was case-insensitive")
    matches: List[str] = Field(default_factory=list, description="Matching lines in source order")

    @classmethod
    def from_config(cls, config: SearchConfig, matches: List[str]) -> 'SearchResults':
        """Create results for the given configuration."""
        return cls(
            query=config.query,
            filepath=config.filepath,
            ignore_case=config.ignore_case,
            matches=matches,
        )

    @property
    def match_count(self) -> int:
        return len(self.matches)

    def has_matches(self) -> bool:
        """Check if any line matched."""
        return bool(self.matches)

    def render(self) -> str:
        """Debug-style rendering of the matched lines, e.g. ``['Rust:', 'Trust me.']``."""
        return repr(self.matches)

    def to_dict(self) -> Dict[str, Any]:
        """Convert results to dictionary representation."""
        data = self.model_dump()
        data['match_count'] = self.match_count
        return data

    def __str__(self) -> str:
        return f"{self.match_count} matching lines for '{self.query}' in {self.filepath}"
