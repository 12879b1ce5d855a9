"""Intent analysis functionality for query_intent."""

from query_intent.intent.analyzer import QueryIntentAnalyzer
from query_intent.intent.classifier import (
    analyze_context,
    classify_intent,
    extract_field_terms,
    extract_relationship_terms,
    synthesize_field_constraints,
)
from query_intent.intent.models import ExtractedTerms, QueryContext, QueryIntent

__all__ = [
    "ExtractedTerms",
    "QueryContext",
    "QueryIntent",
    "QueryIntentAnalyzer",
    "analyze_context",
    "classify_intent",
    "extract_field_terms",
    "extract_relationship_terms",
    "synthesize_field_constraints",
]
