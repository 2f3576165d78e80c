"""Utility modules for fluent search."""

from .text_processing import is_blank, non_blank
from .validators import validate_terms, validate_properties
from .logging_config import setup_logging, StructuredLogger

__all__ = [
    "is_blank",
    "non_blank",
    "validate_terms",
    "validate_properties",
    "setup_logging",
    "StructuredLogger"
]
