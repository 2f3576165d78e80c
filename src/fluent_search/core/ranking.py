"""Hit-count ranking of search results."""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, Iterator, List, Sequence, Tuple, TypeVar

from ..models.result import RankedResult
from .comparison import SearchType, StringComparison, count_occurrences
from .predicates import PropertyAccessor

if TYPE_CHECKING:
    from .search import StringSearch

T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContainedTerms:
    """Terms from one containing step, kept for hit counting."""
    terms: Tuple[str, ...]
    comparison: StringComparison
    search_type: SearchType


class RankedSearch(Generic[T]):
    """
    Pairs every item a search yields with its hit count.
    
    Hits are the occurrences of every term given to the containing steps of
    the chain, summed over all searched properties. Each step's terms are
    counted with the comparison and search type that step was built with, so a
    chain without containing steps ranks every item with zero hits.
    """
    
    def __init__(self, search: "StringSearch[T]", contained: Sequence[ContainedTerms]):
        self.search = search
        self.properties: Tuple[PropertyAccessor, ...] = tuple(search.properties)
        self.contained = tuple(contained)
    
    def count_hits(self, item: T) -> int:
        """Count term occurrences across every searched property of ``item``."""
        hits = 0
        for prop in self.properties:
            value = prop(item)
            if value is None:
                continue
            for step in self.contained:
                for term in step.terms:
                    hits += count_occurrences(value, term, step.comparison, step.search_type)
        return hits
    
    def __iter__(self) -> Iterator[RankedResult[T]]:
        for item in self.search:
            yield RankedResult(hits=self.count_hits(item), item=item)
    
    def order_by_hits(self) -> List[RankedResult[T]]:
        """
        Evaluate the search and sort results by descending hit count.
        
        Items with equal hits keep their source order.
        """
        results = sorted(self, key=lambda result: result.hits, reverse=True)
        logger.debug(f"Ranked {len(results)} results")
        return results
