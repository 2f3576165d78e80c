"""Pytest configuration and shared fixtures."""

import pytest
from dataclasses import dataclass
from typing import List, Optional


@dataclass
class Contact:
    """Simple record with several string properties."""
    first_name: str
    last_name: str
    email: Optional[str] = None
    notes: Optional[str] = None


@dataclass
class Company:
    """Record with a nested string property."""
    name: str
    owner: Contact


@pytest.fixture
def contacts() -> List[Contact]:
    """Create sample contacts for testing."""
    return [
        Contact("Ann", "Smith", "ann.smith@example.com", "Prefers email"),
        Contact("Bob", "Annand", "bob@example.org", "Met at the conference"),
        Contact("Carol", "Jones", None, "Call before noon; call again after lunch"),
        Contact("dave", "O'Brien", "DAVE@EXAMPLE.COM", None),
        Contact("Eve", "Joneson", "eve@example.net", "Former colleague of Carol"),
    ]


@pytest.fixture
def companies(contacts) -> List[Company]:
    """Create sample companies owned by the sample contacts."""
    return [
        Company("Acme Widgets", contacts[0]),
        Company("Globex", contacts[2]),
        Company("Initech", contacts[4]),
    ]
