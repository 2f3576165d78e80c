"""Logging configuration for fluent search."""

import logging
import sys
from typing import Optional

from ..core.exceptions import ConfigurationError


def setup_logging(
    level: str = "INFO",
    format_string: Optional[str] = None,
    include_timestamp: bool = True
) -> None:
    """
    Set up logging for the fluent search library.
    
    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string
        include_timestamp: Whether to include timestamps
        
    Raises:
        ConfigurationError: If the level name is unknown
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ConfigurationError(f"Unknown logging level: {level}")
    
    if format_string is None:
        if include_timestamp:
            format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_string = "%(name)s - %(levelname)s - %(message)s"
    
    logging.basicConfig(
        level=numeric_level,
        format=format_string,
        stream=sys.stdout,
        force=True
    )
    
    logging.getLogger("fluent_search").setLevel(numeric_level)
    
    logger = logging.getLogger(__name__)
    logger.info(f"Logging configured with level: {level}")


class StructuredLogger:
    """Structured logger with context support."""
    
    def __init__(self, name: str):
        """Initialize structured logger."""
        self.logger = logging.getLogger(name)
        self.context = {}
    
    def with_context(self, **kwargs) -> 'StructuredLogger':
        """Add context to logger."""
        new_logger = StructuredLogger(self.logger.name)
        new_logger.context = {**self.context, **kwargs}
        return new_logger
    
    def _format_message(self, message: str) -> str:
        """Format message with context."""
        if not self.context:
            return message
        
        context_str = " ".join([f"{k}={v}" for k, v in self.context.items()])
        return f"{message} [{context_str}]"
    
    def debug(self, message: str) -> None:
        """Log debug message."""
        self.logger.debug(self._format_message(message))
    
    def info(self, message: str) -> None:
        """Log info message."""
        self.logger.info(self._format_message(message))
    
    def warning(self, message: str) -> None:
        """Log warning message."""
        self.logger.warning(self._format_message(message))
