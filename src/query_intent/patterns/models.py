"""Pattern-related data models."""

import re
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

# Builds the draft members of a structured query from a regex match
QueryBuilder = Callable[[re.Match], dict[str, Any]]


@dataclass
class PatternRule:
    """A regular expression mapped to a structured query template."""
    
    id: str
    category: str
    pattern: re.Pattern
    builder: QueryBuilder
    examples: list[str] = field(default_factory=list)
    
    def __post_init__(self):
        """Compile string patterns case-insensitively."""
        if not self.id:
            raise ValueError("id is required")
        if isinstance(self.pattern, str):
            self.pattern = re.compile(self.pattern, re.IGNORECASE)
