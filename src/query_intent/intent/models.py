"""Intent-related data models."""

from dataclasses import dataclass
from typing import Any

from query_intent.models.types import IntentType


@dataclass
class ExtractedTerms:
    """Terms pulled out of a query during classification.
    
    A member left as ``None`` was not attempted; an empty list means the
    extraction ran and found nothing.
    """
    
    fields: list[str] | None = None
    relationships: list[str] | None = None
    entities: list[str] | None = None
    modifiers: dict[str, Any] | None = None


@dataclass
class QueryContext:
    """Coarse context signals detected in a query."""
    
    domain: str = "general"
    temporal_scope: str = "all"
    complexity: str = "moderate"


@dataclass
class QueryIntent:
    """Classified intent of a single query."""
    
    type: IntentType = IntentType.VECTOR
    confidence: float = 0.8
    extracted_terms: ExtractedTerms | None = None
    context: QueryContext | None = None
    
    def __post_init__(self):
        """Validate confidence and fill in empty terms."""
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError("confidence must be between 0.0 and 1.0")
        if self.extracted_terms is None:
            self.extracted_terms = ExtractedTerms()
