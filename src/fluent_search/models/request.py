"""Declarative search request model for API contexts."""

import logging
from enum import Enum
from typing import Iterable, List, TypeVar

from pydantic import BaseModel, Field, field_validator

from ..core.comparison import SearchType, StringComparison
from ..core.search import StringSearch, search

T = TypeVar("T")

logger = logging.getLogger(__name__)


class SearchOperation(str, Enum):
    """Fluent operations a request can express."""
    CONTAINING = "containing"
    CONTAINING_ALL = "containing_all"
    STARTS_WITH = "starts_with"
    ENDS_WITH = "ends_with"
    IS_EQUAL = "is_equal"


class SearchRequest(BaseModel):
    """Pydantic model describing a single-step search, e.g. parsed from a query string."""
    
    properties: List[str] = Field(..., min_length=1, description="Property names to search")
    operation: SearchOperation = Field(SearchOperation.CONTAINING, description="Match operation")
    terms: List[str] = Field(..., min_length=1, description="Terms to match")
    comparison: StringComparison = Field(
        StringComparison.CURRENT_CULTURE, description="String comparison rule"
    )
    search_type: SearchType = Field(
        SearchType.ANY_OCCURRENCE, description="Substring or whole-word matching"
    )
    
    @field_validator('properties')
    @classmethod
    def validate_properties(cls, v: List[str]) -> List[str]:
        """Ensure property names are not just whitespace."""
        names = [name.strip() for name in v]
        if not all(names):
            raise ValueError('Property names cannot be empty or whitespace only')
        return names
    
    def apply(self, source: Iterable[T]) -> StringSearch[T]:
        """
        Build the fluent search this request describes.
        
        Args:
            source: Items to search
            
        Returns:
            Lazy search over ``source``
            
        Raises:
            ValidationError: If the terms leave nothing to match
        """
        fluent = search(
            source,
            *self.properties,
            comparison=self.comparison,
            search_type=self.search_type
        )
        step = getattr(fluent, self.operation.value)
        logger.debug(f"Applying {self.operation.value} over {len(self.properties)} properties")
        return step(*self.terms)
