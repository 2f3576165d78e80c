"""Test string comparison rules."""

import pytest

from fluent_search.core.comparison import (
    SearchType,
    StringComparison,
    contains,
    count_occurrences,
    ends_with,
    equals,
    normalize,
    starts_with,
)


COMPOSED = "caf\u00e9"
DECOMPOSED = "cafe\u0301"


class TestNormalize:
    """Test normalization per comparison rule."""
    
    def test_ordinal_keeps_value(self):
        """Ordinal comparison leaves strings untouched."""
        assert normalize(DECOMPOSED, StringComparison.ORDINAL) == DECOMPOSED
    
    def test_ordinal_ignore_case_upper_cases(self):
        """Ordinal ignore case upper-cases both sides."""
        assert normalize("MixEd", StringComparison.ORDINAL_IGNORE_CASE) == "MIXED"
    
    @pytest.mark.parametrize("comparison", [
        StringComparison.CURRENT_CULTURE,
        StringComparison.INVARIANT_CULTURE,
    ])
    def test_culture_composes_unicode(self, comparison):
        """Culture comparisons treat canonically equivalent strings as equal."""
        assert normalize(DECOMPOSED, comparison) == COMPOSED
    
    def test_culture_ignore_case_casefolds(self):
        """Culture ignore case folds characters like the German sharp s."""
        comparison = StringComparison.CURRENT_CULTURE_IGNORE_CASE
        assert normalize("STRASSE", comparison) == normalize("straße", comparison)


class TestChecks:
    """Test single value checks."""
    
    def test_contains_respects_case(self):
        """Case sensitive comparisons do not match a different case."""
        assert contains("Hello World", "World", StringComparison.ORDINAL)
        assert not contains("Hello World", "world", StringComparison.ORDINAL)
        assert contains("Hello World", "world", StringComparison.ORDINAL_IGNORE_CASE)
    
    def test_ordinal_does_not_compose(self):
        """Ordinal comparison sees composed and decomposed forms as different."""
        assert not equals(COMPOSED, DECOMPOSED, StringComparison.ORDINAL)
        assert equals(COMPOSED, DECOMPOSED, StringComparison.INVARIANT_CULTURE)
    
    def test_starts_and_ends_with(self):
        """Prefix and suffix checks honor case rules."""
        comparison = StringComparison.INVARIANT_CULTURE_IGNORE_CASE
        assert starts_with("Annand", "ann", comparison)
        assert ends_with("Annand", "AND", comparison)
        assert not ends_with("Annand", "ann", comparison)
    
    def test_none_never_matches(self):
        """Missing property values never match."""
        comparison = StringComparison.CURRENT_CULTURE
        assert not contains(None, "a", comparison)
        assert not starts_with(None, "a", comparison)
        assert not ends_with(None, "a", comparison)
        assert not equals(None, "", comparison)
    
    def test_whole_words(self):
        """Whole word matching needs word boundaries on both sides."""
        comparison = StringComparison.CURRENT_CULTURE
        assert contains("the cat sat", "cat", comparison, SearchType.WHOLE_WORDS)
        assert not contains("concatenate", "cat", comparison, SearchType.WHOLE_WORDS)
        assert contains("concatenate", "cat", comparison, SearchType.ANY_OCCURRENCE)


class TestCountOccurrences:
    """Test hit counting."""
    
    def test_counts_non_overlapping(self):
        """Occurrences are counted without overlap."""
        assert count_occurrences("aaaa", "aa", StringComparison.ORDINAL) == 2
    
    def test_counts_ignoring_case(self):
        """Case-insensitive counting includes every casing."""
        text = "Call before noon; call again"
        assert count_occurrences(text, "call", StringComparison.ORDINAL) == 1
        assert count_occurrences(text, "call", StringComparison.ORDINAL_IGNORE_CASE) == 2
    
    def test_counts_whole_words(self):
        """Whole-word counting skips embedded occurrences."""
        text = "cat concatenate cat"
        assert count_occurrences(
            text, "cat", StringComparison.ORDINAL, SearchType.WHOLE_WORDS
        ) == 2
    
    def test_none_counts_zero(self):
        """Missing values have no hits."""
        assert count_occurrences(None, "x", StringComparison.ORDINAL) == 0
