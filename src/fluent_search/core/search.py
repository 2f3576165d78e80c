"""Fluent string search over the items of an iterable."""

from functools import partial
from typing import Generic, Iterable, Iterator, Optional, Sequence, Tuple, TypeVar

from ..utils.logging_config import StructuredLogger
from ..utils.validators import validate_properties, validate_terms
from . import comparison as cmp
from .comparison import SearchType, StringComparison, as_comparison, as_search_type
from .ranking import ContainedTerms, RankedSearch
from .predicates import (
    Predicate,
    PropertyAccessor,
    PropertySelector,
    all_of,
    build_all_terms_predicate,
    build_term_predicate,
    resolve_property,
)

T = TypeVar("T")

logger = StructuredLogger(__name__)


class StringSearch(Generic[T]):
    """
    Lazily filtered view of ``source`` built from chained string checks.

    Every fluent call returns a new search holding one more predicate; the
    predicates of a chain are ANDed together, while each single call is an OR
    across the searched properties and the terms it was given. Nothing is
    evaluated until the search is iterated, and each iteration re-reads the
    source.

    Example:
        people = search(staff, "first_name", "last_name").containing("ann")
        managers = people.set_culture(StringComparison.ORDINAL).starts_with("Mgr")
    """

    def __init__(
        self,
        source: Iterable[T],
        properties: Sequence[PropertySelector],
        comparison: StringComparison = StringComparison.CURRENT_CULTURE,
        search_type: SearchType = SearchType.ANY_OCCURRENCE,
        _predicates: Tuple[Predicate, ...] = (),
        _contained: Tuple[ContainedTerms, ...] = ()
    ):
        """
        Initialize a search.

        Args:
            source: Items to search
            properties: Attribute names or callables returning the strings to search
            comparison: Comparison used by subsequent fluent calls
            search_type: Occurrence rule used by subsequent containing calls

        Raises:
            ValidationError: If no usable property is given
            ConfigurationError: If the comparison or search type is unknown
        """
        validate_properties(properties)

        self.source = source
        self.properties: Tuple[PropertyAccessor, ...] = tuple(
            resolve_property(prop) for prop in properties
        )
        self.comparison = as_comparison(comparison)
        self.search_type = as_search_type(search_type)
        self._predicates = _predicates
        self._contained = _contained

        self._log = logger.with_context(
            properties=",".join(prop.name for prop in self.properties),
            comparison=self.comparison.value
        )

    def _derive(
        self,
        comparison: Optional[StringComparison] = None,
        search_type: Optional[SearchType] = None,
        predicate: Optional[Predicate] = None,
        contained: Optional[ContainedTerms] = None
    ) -> "StringSearch[T]":
        predicates = self._predicates + ((predicate,) if predicate else ())
        contained_terms = self._contained + ((contained,) if contained else ())
        return StringSearch(
            self.source,
            self.properties,
            comparison=comparison or self.comparison,
            search_type=search_type or self.search_type,
            _predicates=predicates,
            _contained=contained_terms
        )

    def set_culture(self, comparison: StringComparison) -> "StringSearch[T]":
        """Set the string comparison used by the calls that follow."""
        return self._derive(comparison=as_comparison(comparison))

    def matching(self, search_type: SearchType) -> "StringSearch[T]":
        """Set whether subsequent containing calls match substrings or whole words."""
        return self._derive(search_type=as_search_type(search_type))

    def containing(self, *terms: str) -> "StringSearch[T]":
        """Only items where any property contains any of the terms."""
        valid_terms = validate_terms(terms)
        check = partial(cmp.contains, comparison=self.comparison, search_type=self.search_type)
        self._log.debug(f"containing {len(valid_terms)} term(s)")
        return self._derive(
            predicate=build_term_predicate(self.properties, valid_terms, check),
            contained=ContainedTerms(tuple(valid_terms), self.comparison, self.search_type)
        )

    def containing_all(self, *terms: str) -> "StringSearch[T]":
        """Only items where every term is contained in at least one property."""
        valid_terms = validate_terms(terms)
        check = partial(cmp.contains, comparison=self.comparison, search_type=self.search_type)
        self._log.debug(f"containing all of {len(valid_terms)} term(s)")
        return self._derive(
            predicate=build_all_terms_predicate(self.properties, valid_terms, check),
            contained=ContainedTerms(tuple(valid_terms), self.comparison, self.search_type)
        )

    def starts_with(self, *terms: str) -> "StringSearch[T]":
        """Only items where any property starts with any of the terms."""
        valid_terms = validate_terms(terms)
        check = partial(cmp.starts_with, comparison=self.comparison)
        self._log.debug(f"starts with {len(valid_terms)} term(s)")
        return self._derive(predicate=build_term_predicate(self.properties, valid_terms, check))

    def ends_with(self, *terms: str) -> "StringSearch[T]":
        """Only items where any property ends with any of the terms."""
        valid_terms = validate_terms(terms)
        check = partial(cmp.ends_with, comparison=self.comparison)
        self._log.debug(f"ends with {len(valid_terms)} term(s)")
        return self._derive(predicate=build_term_predicate(self.properties, valid_terms, check))

    def is_equal(self, *terms: str) -> "StringSearch[T]":
        """Only items where any property equals any of the terms."""
        valid_terms = validate_terms(terms, allow_blank=True)
        check = partial(cmp.equals, comparison=self.comparison)
        self._log.debug(f"is equal to {len(valid_terms)} term(s)")
        return self._derive(predicate=build_term_predicate(self.properties, valid_terms, check))

    @property
    def predicate(self) -> Predicate:
        """The combined predicate of the whole chain."""
        return all_of(self._predicates)

    def to_ranked(self) -> RankedSearch[T]:
        """Rank matching items by how often the contained terms occur."""
        return RankedSearch(self, self._contained)

    def __iter__(self) -> Iterator[T]:
        if not self._predicates:
            return iter(self.source)
        return _filter(self.source, self.predicate, self._log)

    def __repr__(self) -> str:
        names = ", ".join(prop.name for prop in self.properties)
        return (
            f"StringSearch(properties=[{names}], steps={len(self._predicates)}, "
            f"comparison={self.comparison.value})"
        )


def _filter(source: Iterable[T], predicate: Predicate, log: StructuredLogger) -> Iterator[T]:
    log.debug("Evaluating search")
    for item in source:
        if predicate(item):
            yield item


def search(
    source: Iterable[T],
    *properties: PropertySelector,
    comparison: StringComparison = StringComparison.CURRENT_CULTURE,
    search_type: SearchType = SearchType.ANY_OCCURRENCE
) -> StringSearch[T]:
    """
    Start a fluent string search over ``source``.

    Args:
        source: Items to search
        *properties: Attribute names or callables returning the strings to search
        comparison: Initial string comparison
        search_type: Initial occurrence rule for containing calls

    Returns:
        A search with no conditions yet; iterating it yields the whole source

    Raises:
        ValidationError: If no usable property is given
        ConfigurationError: If the comparison or search type is unknown
    """
    return StringSearch(source, properties, comparison=comparison, search_type=search_type)
