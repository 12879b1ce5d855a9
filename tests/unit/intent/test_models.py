"""Unit tests for intent models."""

import pytest

from query_intent.intent.models import ExtractedTerms, QueryContext, QueryIntent
from query_intent.models.types import IntentType


class TestExtractedTerms:
    """Test cases for ExtractedTerms model."""
    
    def test_create_minimal(self):
        """Test every member starts absent."""
        terms = ExtractedTerms()
        assert terms.fields is None
        assert terms.relationships is None
        assert terms.entities is None
        assert terms.modifiers is None
    
    def test_empty_differs_from_absent(self):
        """Test an empty list is distinguishable from not attempted."""
        assert ExtractedTerms(fields=[]) != ExtractedTerms()


class TestQueryContext:
    """Test cases for QueryContext model."""
    
    def test_defaults(self):
        """Test default context."""
        context = QueryContext()
        assert context.domain == "general"
        assert context.temporal_scope == "all"
        assert context.complexity == "moderate"


class TestQueryIntent:
    """Test cases for QueryIntent model."""
    
    def test_create_minimal(self):
        """Test defaults."""
        intent = QueryIntent()
        assert intent.type == IntentType.VECTOR
        assert intent.confidence == 0.8
        assert intent.extracted_terms == ExtractedTerms()
        assert intent.context is None
    
    def test_create_full(self):
        """Test creating QueryIntent with all fields."""
        terms = ExtractedTerms(fields=["year"], relationships=["cites"])
        context = QueryContext(domain="academic")
        
        intent = QueryIntent(
            type=IntentType.COMBINED,
            confidence=0.9,
            extracted_terms=terms,
            context=context
        )
        
        assert intent.type == IntentType.COMBINED
        assert intent.confidence == 0.9
        assert intent.extracted_terms.fields == ["year"]
        assert intent.context.domain == "academic"
    
    def test_confidence_validation(self):
        """Test confidence bounds."""
        with pytest.raises(ValueError, match="confidence must be between"):
            QueryIntent(confidence=1.2)
        
        with pytest.raises(ValueError, match="confidence must be between"):
            QueryIntent(confidence=-0.1)
