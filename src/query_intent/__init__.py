"""Natural-language query intent analysis for hybrid vector, field and graph search."""

from query_intent.config import AnalyzerConfig
from query_intent.exceptions import (
    ConfigurationError,
    HistoryError,
    QueryIntentError,
    ValidationError,
)
from query_intent.history import HistoryEntry, QueryHistory
from query_intent.intent import (
    ExtractedTerms,
    QueryContext,
    QueryIntent,
    QueryIntentAnalyzer,
)
from query_intent.models import IntentType, StructuredQuery
from query_intent.patterns import PatternMatcher, PatternRule, RegexPatternMatcher

__version__ = "0.1.0"

__all__ = [
    "AnalyzerConfig",
    "ConfigurationError",
    "ExtractedTerms",
    "HistoryEntry",
    "HistoryError",
    "IntentType",
    "PatternMatcher",
    "PatternRule",
    "QueryContext",
    "QueryHistory",
    "QueryIntent",
    "QueryIntentAnalyzer",
    "QueryIntentError",
    "RegexPatternMatcher",
    "StructuredQuery",
    "ValidationError",
]
