"""String comparison rules used by every search predicate."""

import unicodedata
from enum import Enum
from typing import Optional

from ..utils.text_processing import (
    count_substring,
    count_whole_words,
    whole_word_pattern,
)
from .exceptions import ConfigurationError


class StringComparison(str, Enum):
    """How two strings are compared."""
    ORDINAL = "ordinal"
    ORDINAL_IGNORE_CASE = "ordinal_ignore_case"
    CURRENT_CULTURE = "current_culture"
    CURRENT_CULTURE_IGNORE_CASE = "current_culture_ignore_case"
    INVARIANT_CULTURE = "invariant_culture"
    INVARIANT_CULTURE_IGNORE_CASE = "invariant_culture_ignore_case"

    @property
    def ignores_case(self) -> bool:
        return self.value.endswith("_ignore_case")

    @property
    def is_ordinal(self) -> bool:
        return self.value.startswith("ordinal")


class SearchType(str, Enum):
    """How a contained term must sit inside the property value."""
    ANY_OCCURRENCE = "any_occurrence"
    WHOLE_WORDS = "whole_words"


def as_comparison(value) -> StringComparison:
    """
    Coerce a member or its string value to ``StringComparison``.

    Raises:
        ConfigurationError: If the value names no comparison
    """
    try:
        return StringComparison(value)
    except ValueError as e:
        raise ConfigurationError(f"Unknown string comparison: {value}") from e


def as_search_type(value) -> SearchType:
    """
    Coerce a member or its string value to ``SearchType``.

    Raises:
        ConfigurationError: If the value names no search type
    """
    try:
        return SearchType(value)
    except ValueError as e:
        raise ConfigurationError(f"Unknown search type: {value}") from e


def normalize(value: str, comparison: StringComparison) -> str:
    """
    Bring a string into the form in which ``comparison`` compares it.

    Ordinal comparisons work on raw code points (upper-cased when case is
    ignored). Culture comparisons compose the string to Unicode NFC first so
    canonically equivalent spellings compare equal, and casefold it when case
    is ignored.

    Args:
        value: String to normalize
        comparison: Comparison rule

    Returns:
        Normalized string
    """
    if comparison.is_ordinal:
        return value.upper() if comparison.ignores_case else value

    value = unicodedata.normalize("NFC", value)
    if comparison.ignores_case:
        value = unicodedata.normalize("NFC", value.casefold())
    return value


def contains(
    value: Optional[str],
    term: str,
    comparison: StringComparison,
    search_type: SearchType = SearchType.ANY_OCCURRENCE
) -> bool:
    if value is None:
        return False
    value = normalize(value, comparison)
    term = normalize(term, comparison)
    if search_type == SearchType.WHOLE_WORDS:
        return whole_word_pattern(term).search(value) is not None
    return term in value


def starts_with(value: Optional[str], term: str, comparison: StringComparison) -> bool:
    if value is None:
        return False
    return normalize(value, comparison).startswith(normalize(term, comparison))


def ends_with(value: Optional[str], term: str, comparison: StringComparison) -> bool:
    if value is None:
        return False
    return normalize(value, comparison).endswith(normalize(term, comparison))


def equals(value: Optional[str], term: str, comparison: StringComparison) -> bool:
    if value is None:
        return False
    return normalize(value, comparison) == normalize(term, comparison)


def count_occurrences(
    value: Optional[str],
    term: str,
    comparison: StringComparison,
    search_type: SearchType = SearchType.ANY_OCCURRENCE
) -> int:
    """Count non-overlapping matches of ``term`` in ``value``."""
    if value is None:
        return 0
    value = normalize(value, comparison)
    term = normalize(term, comparison)
    if search_type == SearchType.WHOLE_WORDS:
        return count_whole_words(value, term)
    return count_substring(value, term)
