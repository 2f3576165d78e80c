"""Test declarative search requests."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from fluent_search.models.request import SearchOperation, SearchRequest
from fluent_search.core.comparison import StringComparison
from fluent_search.core.exceptions import ValidationError


def first_names(items):
    return [item.first_name for item in items]


class TestSearchRequest:
    """Test SearchRequest validation and application."""
    
    def test_defaults(self):
        """A request defaults to a case-sensitive containing search."""
        request = SearchRequest(properties=["first_name"], terms=["Ann"])
        
        assert request.operation == SearchOperation.CONTAINING
        assert request.comparison == StringComparison.CURRENT_CULTURE
    
    def test_apply_containing(self, contacts):
        """Applying a request builds the matching fluent search."""
        request = SearchRequest(properties=["first_name", "last_name"], terms=["Ann"])
        
        assert first_names(request.apply(contacts)) == ["Ann", "Bob"]
    
    def test_parses_plain_values(self, contacts):
        """Enum fields accept their string values."""
        request = SearchRequest.model_validate({
            "properties": ["email"],
            "operation": "ends_with",
            "terms": [".com"],
            "comparison": "ordinal_ignore_case",
        })
        
        assert request.operation == SearchOperation.ENDS_WITH
        assert first_names(request.apply(contacts)) == ["Ann", "dave"]
    
    def test_property_names_are_stripped(self, contacts):
        """Surrounding whitespace is removed from property names."""
        request = SearchRequest(
            properties=[" last_name "], operation="is_equal", terms=["Jones"]
        )
        
        assert request.properties == ["last_name"]
        assert first_names(request.apply(contacts)) == ["Carol"]
    
    def test_empty_properties_rejected(self):
        """At least one property is required."""
        with pytest.raises(PydanticValidationError):
            SearchRequest(properties=[], terms=["x"])
    
    def test_blank_property_rejected(self):
        """Blank property names are rejected."""
        with pytest.raises(PydanticValidationError, match="Property names cannot be empty"):
            SearchRequest(properties=["  "], terms=["x"])
    
    def test_unknown_operation_rejected(self):
        """Only known operations are accepted."""
        with pytest.raises(PydanticValidationError):
            SearchRequest(properties=["first_name"], operation="sounds_like", terms=["x"])
    
    def test_blank_terms_fail_on_apply(self, contacts):
        """Terms that leave nothing to match fail when applied."""
        request = SearchRequest(properties=["first_name"], terms=["  "])
        
        with pytest.raises(ValidationError):
            request.apply(contacts)
    
    def test_containing_all(self, contacts):
        """The containing_all operation requires every term."""
        request = SearchRequest(
            properties=["notes"], operation=SearchOperation.CONTAINING_ALL, terms=["Call", "lunch"]
        )
        
        assert first_names(request.apply(contacts)) == ["Carol"]
