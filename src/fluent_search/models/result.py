"""Ranked search result data model."""

from dataclasses import dataclass
from typing import Any, Dict, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class RankedResult(Generic[T]):
    """
    An item matched by a ranked search.
    
    Attributes:
        hits: Number of times the searched terms occur in the item's properties
        item: The matched item
    """
    hits: int
    item: T
    
    def __post_init__(self) -> None:
        """Validate ranked result."""
        if self.hits < 0:
            raise ValueError("Hits cannot be negative")
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"hits": self.hits, "item": self.item}
