"""Mock implementations for query_intent.

In-memory stand-ins for external collaborators, for testing purposes.
"""

from .matcher import MockPatternMatcher

__all__ = ["MockPatternMatcher"]
