"""Pattern matcher producing draft structured queries."""

import logging
import re
from typing import Protocol, runtime_checkable

from query_intent.models.types import StructuredQuery
from query_intent.patterns.models import PatternRule

logger = logging.getLogger(__name__)


@runtime_checkable
class PatternMatcher(Protocol):
    """Pure function from query text (and optional embedding) to a draft query."""
    
    def __call__(
        self,
        text: str,
        embedding: list[float] | None = None
    ) -> StructuredQuery:
        ...


def _clean(value: str) -> str:
    return value.strip().strip("?.!").strip()


DEFAULT_RULES = [
    PatternRule(
        id="find_about_from_year",
        category="temporal",
        pattern=re.compile(r"find\s+(.+?)\s+about\s+(.+?)\s+from\s+(\d{4})", re.IGNORECASE),
        builder=lambda m: {
            "like": _clean(m.group(2)),
            "where": {"year": int(m.group(3))},
        },
        examples=["Find papers about AI from 2023"],
    ),
    PatternRule(
        id="recent_by_author",
        category="people",
        pattern=re.compile(r"show\s+me\s+recent\s+(.+?)\s+by\s+(.+)", re.IGNORECASE),
        builder=lambda m: {
            "like": _clean(m.group(1)),
            "boost": {"field": 2.0, "vector": 1.0, "graph": 1.0},
            "connected": {"from": _clean(m.group(2))},
        },
        examples=["Show me recent posts by John"],
    ),
    PatternRule(
        id="more_than_count",
        category="aggregation",
        pattern=re.compile(r"(.+?)\s+with\s+more\s+than\s+(\d+)\s+(\w+)", re.IGNORECASE),
        builder=lambda m: {
            "like": _clean(m.group(1)),
            "where": {m.group(3).lower(): {"greaterThan": int(m.group(2))}},
        },
        examples=["Papers with more than 100 citations"],
    ),
    PatternRule(
        id="related_to",
        category="relationships",
        pattern=re.compile(r"(.+?)\s+(?:related|connected)\s+to\s+(.+)", re.IGNORECASE),
        builder=lambda m: {
            "like": _clean(m.group(1)),
            "connected": {"to": _clean(m.group(2))},
        },
        examples=["Documents related to Stanford"],
    ),
]


class RegexPatternMatcher:
    """Ordered regular-expression rules; the first matching rule wins."""
    
    def __init__(self, rules: list[PatternRule] | None = None):
        """Initialize the matcher.
        
        Args:
            rules: Rules to try in order (uses DEFAULT_RULES if None)
        """
        self.rules: list[PatternRule] = list(DEFAULT_RULES if rules is None else rules)
    
    def add_rule(self, rule: PatternRule) -> None:
        """Append a rule after the existing ones."""
        if any(existing.id == rule.id for existing in self.rules):
            raise ValueError(f"Duplicate pattern rule id: {rule.id}")
        self.rules.append(rule)
    
    def match(self, text: str) -> PatternRule | None:
        """Return the first rule whose pattern matches the text."""
        for rule in self.rules:
            if rule.pattern.search(text):
                return rule
        return None
    
    def __call__(
        self,
        text: str,
        embedding: list[float] | None = None
    ) -> StructuredQuery:
        """Build a draft structured query for the text.
        
        Args:
            text: Natural-language query
            embedding: Optional precomputed query embedding
            
        Returns:
            Draft query; plain vector search on the full text if no rule matches
        """
        draft = None
        for rule in self.rules:
            match = rule.pattern.search(text)
            if match:
                logger.debug("Pattern %s matched query %r", rule.id, text)
                draft = StructuredQuery(**rule.builder(match))
                break
        
        if draft is None:
            draft = StructuredQuery(like=text)
        
        if embedding is not None:
            draft.vector = list(embedding)
        
        return draft
