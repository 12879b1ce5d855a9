"""Data models for query_intent."""

from query_intent.models.types import IntentType, StructuredQuery

__all__ = ["IntentType", "StructuredQuery"]
