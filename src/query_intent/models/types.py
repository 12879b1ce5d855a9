"""Type definitions for query_intent."""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any


class IntentType(Enum):
    """Shape of a natural-language query."""
    VECTOR = "vector"
    FIELD = "field"
    GRAPH = "graph"
    COMBINED = "combined"


@dataclass
class StructuredQuery:
    """Hybrid query consumed by the downstream query executor.
    
    Every member is optional; ``None`` means the member is absent.
    """
    # Vector search
    like: str | None = None
    similar: str | None = None
    vector: list[float] | None = None
    
    # Field filtering
    where: dict[str, Any] | None = None
    
    # Graph traversal
    connected: dict[str, Any] | None = None
    
    # Common options
    limit: int | None = None
    boost: dict[str, float] | None = None
    types: list[str] | None = None
    
    def __post_init__(self):
        """Validate query options."""
        if self.limit is not None and self.limit < 1:
            raise ValueError("limit must be at least 1")
    
    @property
    def has_constraints(self) -> bool:
        """Check whether a field or graph constraint is present."""
        return self.where is not None or self.connected is not None
    
    def to_dict(self) -> dict[str, Any]:
        """Render only the members that are present."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }
