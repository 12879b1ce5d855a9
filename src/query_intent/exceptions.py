"""Custom exceptions for query_intent."""



class QueryIntentError(Exception):
    """Base exception for all query_intent exceptions."""


class ConfigurationError(QueryIntentError):
    """Raised when configuration is invalid."""


class ValidationError(QueryIntentError):
    """Raised when input validation fails."""


class HistoryError(QueryIntentError):
    """Raised when a query history operation cannot be applied."""
    
    def __init__(self, message: str, index: int | None = None):
        super().__init__(message)
        self.index = index
