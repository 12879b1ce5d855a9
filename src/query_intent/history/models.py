"""Query history data models."""

from dataclasses import dataclass, field
from datetime import datetime

from query_intent.models.types import StructuredQuery


@dataclass
class HistoryEntry:
    """A processed query and the structured query produced for it."""
    
    query: str
    result: StructuredQuery
    success: bool = False
    timestamp: datetime = field(default_factory=datetime.now)
