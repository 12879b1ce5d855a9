"""Mock implementation of a pattern matcher.

Returns canned drafts and records every call so analyzer behaviour can be
tested without the real pattern table.
"""

import copy
from typing import Any

from query_intent.models.types import StructuredQuery


class MockPatternMatcher:
    """Pattern matcher returning configured drafts."""
    
    def __init__(
        self,
        responses: dict[str, StructuredQuery] | None = None,
        default: StructuredQuery | None = None,
        error: Exception | None = None
    ):
        """Initialize mock matcher.
        
        Args:
            responses: Drafts keyed by exact query text
            default: Draft for texts without a configured response
            error: Exception raised on every call, if set
        """
        self.responses = responses or {}
        self.default = default
        self.error = error
        self.calls: list[dict[str, Any]] = []
    
    @property
    def call_count(self) -> int:
        return len(self.calls)
    
    def __call__(
        self,
        text: str,
        embedding: list[float] | None = None
    ) -> StructuredQuery:
        self.calls.append({"text": text, "embedding": embedding})
        
        if self.error is not None:
            raise self.error
        
        if text in self.responses:
            return copy.deepcopy(self.responses[text])
        if self.default is not None:
            return copy.deepcopy(self.default)
        return StructuredQuery(like=text)
    
    def reset(self) -> None:
        """Clear recorded calls."""
        self.calls.clear()
