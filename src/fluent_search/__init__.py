"""
Fluent String Search

Compose string-matching predicates over one or more string properties of the
items of any iterable, and evaluate them lazily when the result is iterated.
"""

# models must load first: models.request imports core.search, which imports models.result
from .models.result import RankedResult
from .models.request import SearchOperation, SearchRequest
from .core.search import StringSearch, search
from .core.ranking import RankedSearch
from .core.comparison import SearchType, StringComparison
from .core.exceptions import (
    FluentSearchError,
    ValidationError,
    SearchError,
    ConfigurationError
)

__version__ = "1.0.0"

__all__ = [
    "search",
    "StringSearch",
    "RankedSearch",
    "RankedResult",
    "StringComparison",
    "SearchType",
    "SearchOperation",
    "SearchRequest",
    "FluentSearchError",
    "ValidationError",
    "SearchError",
    "ConfigurationError",
]
