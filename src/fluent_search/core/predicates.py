"""Predicate combinators over string-valued item properties."""

from collections.abc import Mapping
from operator import attrgetter
from typing import Any, Callable, List, Optional, Sequence, Union

from .exceptions import SearchError, ValidationError

Predicate = Callable[[Any], bool]
PropertySelector = Union[str, Callable[[Any], Optional[str]]]


class PropertyAccessor:
    """
    Reads one string property from an item.

    Named properties are resolved with ``operator.attrgetter`` (dotted paths
    work) and fall back to key lookup for plain mappings. Callables are used
    as given.
    """

    def __init__(self, selector: PropertySelector):
        if isinstance(selector, str):
            if not selector.strip():
                raise ValidationError("Property names cannot be empty")
            self.name = selector
            self._getter = attrgetter(selector)
            self._key = selector
        elif callable(selector):
            self.name = getattr(selector, "__name__", repr(selector))
            self._getter = selector
            self._key = None
        else:
            raise ValidationError(
                f"Property selector must be a name or a callable, got {type(selector).__name__}"
            )

    def __call__(self, item: Any) -> Optional[str]:
        try:
            if self._key is not None and isinstance(item, Mapping):
                value = item.get(self._key)
            else:
                value = self._getter(item)
        except AttributeError as e:
            raise SearchError(
                f"Failed to read search property '{self.name}': {str(e)}"
            ) from e

        if value is not None and not isinstance(value, str):
            raise SearchError(
                f"Property '{self.name}' returned {type(value).__name__}, expected str"
            )
        return value

    def __repr__(self) -> str:
        return f"PropertyAccessor({self.name!r})"


def resolve_property(selector: Union[PropertySelector, PropertyAccessor]) -> PropertyAccessor:
    if isinstance(selector, PropertyAccessor):
        return selector
    return PropertyAccessor(selector)


def any_of(predicates: Sequence[Predicate]) -> Predicate:
    """Combine predicates with OR; an empty sequence matches nothing."""
    predicates = tuple(predicates)

    def _any(item: Any) -> bool:
        return any(predicate(item) for predicate in predicates)

    return _any


def all_of(predicates: Sequence[Predicate]) -> Predicate:
    """Combine predicates with AND; an empty sequence matches everything."""
    predicates = tuple(predicates)

    def _all(item: Any) -> bool:
        return all(predicate(item) for predicate in predicates)

    return _all


def build_term_predicate(
    properties: Sequence[PropertyAccessor],
    terms: Sequence[str],
    check: Callable[[Optional[str], str], bool]
) -> Predicate:
    """
    Build an OR over every property and term pair of ``check(value, term)``.

    Each property is read once per item no matter how many terms are tested.

    Args:
        properties: Accessors to read from each item
        terms: Literal terms to test against
        check: Comparison of one property value with one term

    Returns:
        Predicate over items
    """
    terms = tuple(terms)

    def _property_matches(prop: PropertyAccessor) -> Predicate:
        def _match(item: Any) -> bool:
            value = prop(item)
            return any(check(value, term) for term in terms)

        return _match

    return any_of([_property_matches(prop) for prop in properties])


def build_all_terms_predicate(
    properties: Sequence[PropertyAccessor],
    terms: Sequence[str],
    check: Callable[[Optional[str], str], bool]
) -> Predicate:
    """Build a predicate requiring every term to match at least one property."""
    per_term: List[Predicate] = [
        build_term_predicate(properties, [term], check) for term in terms
    ]
    return all_of(per_term)
