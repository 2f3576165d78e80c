"""Text helpers shared by the comparison rules."""

import re
from typing import Iterable, List, Pattern


def is_blank(text: str) -> bool:
    """Return True for empty or whitespace-only strings."""
    return not text or not text.strip()


def non_blank(terms: Iterable[str]) -> List[str]:
    """Drop empty and whitespace-only terms, preserving order."""
    return [term for term in terms if not is_blank(term)]


def whole_word_pattern(term: str) -> Pattern[str]:
    """
    Compile a pattern matching ``term`` only where it forms whole words.
    
    The term may itself contain spaces or punctuation; only its outer edges
    must touch a non-word character or a string boundary.
    """
    return re.compile(r'(?<!\w)' + re.escape(term) + r'(?!\w)')


def count_substring(text: str, term: str) -> int:
    """Count non-overlapping occurrences of ``term`` in ``text``."""
    if not term:
        return 0
    return text.count(term)


def count_whole_words(text: str, term: str) -> int:
    """Count non-overlapping whole-word occurrences of ``term`` in ``text``."""
    if not term:
        return 0
    return len(whole_word_pattern(term).findall(text))
