"""Data models for fluent search."""

from .result import RankedResult
from .request import SearchOperation, SearchRequest

__all__ = ["RankedResult", "SearchOperation", "SearchRequest"]
