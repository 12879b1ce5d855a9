"""Lexical intent classification and term extraction.

All functions here are pure: they read only their arguments and the module
level keyword tables.
"""

import logging
import re
from typing import Any

from query_intent.intent.models import ExtractedTerms, QueryContext, QueryIntent
from query_intent.models.types import IntentType

logger = logging.getLogger(__name__)

DEFAULT_CONFIDENCE = 0.8

# Keywords signalling a field-filter query
FIELD_INTENT_KEYWORDS = frozenset({
    "where", "filter", "with", "has", "contains",
    "equals", "greater", "less", "between",
})

# Keywords signalling a graph-traversal query
GRAPH_INTENT_KEYWORDS = frozenset({
    "related", "connected", "linked", "associated", "references",
})

# Tokens interpreted as field names
FIELD_INDICATORS = frozenset({
    "year", "date", "author", "type", "category", "status", "price",
})

# Tokens interpreted as relationship names
RELATIONSHIP_INDICATORS = frozenset({
    "related", "connected", "linked", "references", "cites",
})

_DOMAIN_PATTERNS = [
    ("technical", re.compile(r"\b(code|function|api|bug|error|debug)\b")),
    ("business", re.compile(r"\b(revenue|sales|profit|customer|market)\b")),
    ("academic", re.compile(r"\b(research|study|paper|theory|hypothesis)\b")),
]

_TEMPORAL_PATTERNS = [
    ("past", re.compile(r"\b(was|were|did|had|yesterday|last|previous|ago)\b")),
    ("future", re.compile(r"\b(will|going to|tomorrow|next|future|upcoming)\b")),
    ("present", re.compile(r"\b(is|are|currently|now|today|present)\b")),
]

_CLAUSE_PATTERN = re.compile(r"\b(and|or|but|with|where)\b")


def has_field_intent(query: str) -> bool:
    """Check whether any field keyword occurs in the query."""
    lowered = query.lower()
    return any(keyword in lowered for keyword in FIELD_INTENT_KEYWORDS)


def has_graph_intent(query: str) -> bool:
    """Check whether any graph keyword occurs in the query."""
    lowered = query.lower()
    return any(keyword in lowered for keyword in GRAPH_INTENT_KEYWORDS)


def extract_field_terms(query: str) -> list[str]:
    """Extract field-name tokens in order of appearance.

    Args:
        query: Raw query text

    Returns:
        Lower-cased field tokens, duplicates preserved
    """
    return [
        token.lower()
        for token in query.split()
        if token.lower() in FIELD_INDICATORS
    ]


def extract_relationship_terms(query: str) -> list[str]:
    """Extract relationship tokens in order of appearance.

    Args:
        query: Raw query text

    Returns:
        Lower-cased relationship tokens, duplicates preserved
    """
    return [
        token
        for token in query.lower().split()
        if token in RELATIONSHIP_INDICATORS
    ]


def synthesize_field_constraints(field_terms: list[str]) -> dict[str, Any]:
    """Build an existence constraint for every extracted field.

    No comparison value is parsed; a repeated field maps to the same entry.
    """
    constraints: dict[str, Any] = {}
    for term in field_terms:
        constraints[term] = {"exists": True}
    return constraints


def classify_intent(query: str, confidence: float = DEFAULT_CONFIDENCE) -> QueryIntent:
    """Classify a query as vector, field, graph or combined.

    Args:
        query: Raw query text
        confidence: Confidence assigned to the classification

    Returns:
        QueryIntent with the terms of every signalled branch extracted
    """
    field_signal = has_field_intent(query)
    graph_signal = has_graph_intent(query)

    if field_signal and graph_signal:
        intent_type = IntentType.COMBINED
    elif field_signal:
        intent_type = IntentType.FIELD
    elif graph_signal:
        intent_type = IntentType.GRAPH
    else:
        intent_type = IntentType.VECTOR

    terms = ExtractedTerms()
    if field_signal:
        terms.fields = extract_field_terms(query)
    if graph_signal:
        terms.relationships = extract_relationship_terms(query)

    logger.debug(
        "Classified query as %s (fields=%s, relationships=%s)",
        intent_type.value, terms.fields, terms.relationships
    )

    return QueryIntent(type=intent_type, confidence=confidence, extracted_terms=terms)


def detect_domain(query: str) -> str:
    """Detect the subject domain of a query."""
    lowered = query.lower()
    for domain, pattern in _DOMAIN_PATTERNS:
        if pattern.search(lowered):
            return domain
    return "general"


def detect_temporal_scope(query: str) -> str:
    """Detect whether a query refers to the past, present or future."""
    lowered = query.lower()
    for scope, pattern in _TEMPORAL_PATTERNS:
        if pattern.search(lowered):
            return scope
    return "all"


def assess_complexity(query: str) -> str:
    """Rate a query as simple, moderate or complex."""
    words = len(query.split())
    clauses = len(_CLAUSE_PATTERN.findall(query))
    nested = "(" in query or "[" in query

    if words < 5 and clauses == 0:
        return "simple"
    if words > 15 or clauses > 2 or nested:
        return "complex"
    return "moderate"


def analyze_context(query: str) -> QueryContext:
    """Bundle domain, temporal scope and complexity for a query."""
    return QueryContext(
        domain=detect_domain(query),
        temporal_scope=detect_temporal_scope(query),
        complexity=assess_complexity(query),
    )
