"""Core components for fluent string search."""

from .comparison import SearchType, StringComparison
from .search import StringSearch, search
from .ranking import RankedSearch
from .exceptions import (
    FluentSearchError,
    ValidationError,
    SearchError,
    ConfigurationError
)

__all__ = [
    "StringSearch",
    "search",
    "RankedSearch",
    "StringComparison",
    "SearchType",
    "FluentSearchError",
    "ValidationError",
    "SearchError",
    "ConfigurationError"
]
