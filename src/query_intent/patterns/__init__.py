"""Pattern matching collaborators for query_intent."""

from query_intent.patterns.matcher import DEFAULT_RULES, PatternMatcher, RegexPatternMatcher
from query_intent.patterns.models import PatternRule

__all__ = ["DEFAULT_RULES", "PatternMatcher", "PatternRule", "RegexPatternMatcher"]
