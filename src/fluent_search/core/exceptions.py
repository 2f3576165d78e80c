"""Custom exceptions for fluent string search."""


class FluentSearchError(Exception):
    """Base exception for fluent search operations."""
    pass


class ValidationError(FluentSearchError):
    """Exception raised during argument validation."""
    pass


class SearchError(FluentSearchError):
    """Exception raised while evaluating a search against its source."""
    pass


class ConfigurationError(FluentSearchError):
    """Exception raised for configuration issues."""
    pass
