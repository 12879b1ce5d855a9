"""Tests for custom exceptions."""

from query_intent import (
    ConfigurationError,
    HistoryError,
    QueryIntentError,
    ValidationError,
)


class TestExceptions:
    """Tests for exception hierarchy and behavior."""
    
    def test_base_exception(self):
        """Test base exception."""
        exc = QueryIntentError("Base error")
        assert str(exc) == "Base error"
        assert isinstance(exc, Exception)
    
    def test_configuration_error(self):
        """Test configuration error."""
        exc = ConfigurationError("Invalid config")
        assert isinstance(exc, QueryIntentError)
        assert str(exc) == "Invalid config"
    
    def test_validation_error(self):
        """Test validation error."""
        exc = ValidationError("Invalid input")
        assert isinstance(exc, QueryIntentError)
        assert str(exc) == "Invalid input"
    
    def test_history_error(self):
        """Test history error keeps the offending index."""
        exc = HistoryError("Out of range", index=7)
        assert isinstance(exc, QueryIntentError)
        assert str(exc) == "Out of range"
        assert exc.index == 7
        
        exc = HistoryError("No index")
        assert exc.index is None
