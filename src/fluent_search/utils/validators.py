"""Input validation utilities."""

from typing import Any, List, Sequence

from ..core.exceptions import ValidationError
from .text_processing import non_blank


def validate_terms(terms: Sequence[Any], allow_blank: bool = False) -> List[str]:
    """
    Validate search terms passed to a fluent call.

    Args:
        terms: Terms as passed by the caller
        allow_blank: Keep empty and whitespace-only terms instead of dropping them

    Returns:
        The usable terms, in the order given

    Raises:
        ValidationError: If a term is not a string or no usable term remains
    """
    try:
        if terms is None:
            raise ValidationError("Search terms are required")

        terms = list(terms)
        if not terms:
            raise ValidationError("At least one search term is required")

        for term in terms:
            if not isinstance(term, str):
                raise ValidationError(
                    f"Search terms must be strings, got {type(term).__name__}"
                )

        if allow_blank:
            return terms

        valid_terms = non_blank(terms)
        if not valid_terms:
            raise ValidationError("Search terms cannot all be empty or whitespace only")
        return valid_terms

    except Exception as e:
        if isinstance(e, ValidationError):
            raise
        raise ValidationError(f"Search term validation failed: {str(e)}")


def validate_properties(properties: Sequence[Any]) -> None:
    """
    Validate the property selectors a search is built over.

    Raises:
        ValidationError: If no property is given or a selector is unusable
    """
    if not properties:
        raise ValidationError("At least one property to search is required")

    for prop in properties:
        if isinstance(prop, str):
            if not prop.strip():
                raise ValidationError("Property names cannot be empty")
        elif not callable(prop):
            raise ValidationError(
                f"Property selector must be a name or a callable, got {type(prop).__name__}"
            )
