"""Query intent analyzer turning natural language into structured queries."""

import logging
from typing import Any

from query_intent.config import AnalyzerConfig
from query_intent.history import HistoryEntry, QueryHistory
from query_intent.intent.classifier import (
    analyze_context,
    classify_intent,
    synthesize_field_constraints,
)
from query_intent.intent.models import QueryIntent
from query_intent.models.types import IntentType, StructuredQuery
from query_intent.patterns import PatternMatcher, RegexPatternMatcher

logger = logging.getLogger(__name__)


class QueryIntentAnalyzer:
    """Converts natural-language queries into hybrid structured queries.

    The pattern matcher produces a draft; when the draft carries neither a
    field nor a graph constraint, lexical intent classification may add a
    field-existence ``where`` section. Every processed query is recorded in
    a bounded history.
    """

    def __init__(
        self,
        pattern_matcher: PatternMatcher | None = None,
        config: AnalyzerConfig | None = None
    ):
        """Initialize the QueryIntentAnalyzer.

        Args:
            pattern_matcher: Draft query producer (uses RegexPatternMatcher if None)
            config: Analyzer configuration (uses defaults if None)
        """
        self.config = config or AnalyzerConfig()
        self.pattern_matcher = (
            pattern_matcher if pattern_matcher is not None else RegexPatternMatcher()
        )
        self._history = QueryHistory(self.config.history_size)
        self._is_initialized = False

    @property
    def history(self) -> list[HistoryEntry]:
        """Processed queries in insertion order."""
        return self._history.snapshot()

    async def initialize(self) -> None:
        """No setup is required; kept for parity with async components."""
        if not self._is_initialized:
            logger.info("QueryIntentAnalyzer initialized")
        self._is_initialized = True

    async def process_query(
        self,
        query_text: str,
        embedding: list[float] | None = None
    ) -> StructuredQuery:
        """Convert a natural-language query into a structured query.

        Args:
            query_text: Natural-language query
            embedding: Optional precomputed embedding passed to the pattern matcher

        Returns:
            The pattern matcher's draft, with a ``where`` section added when the
            draft had no constraints and the query has field intent
        """
        draft = self.pattern_matcher(query_text, embedding)

        if not draft.has_constraints:
            intent = classify_intent(query_text, self.config.intent_confidence)
            fields = intent.extracted_terms.fields
            if intent.type == IntentType.FIELD and fields:
                draft.where = synthesize_field_constraints(fields)
                logger.debug("Added field constraints for %s", fields)

        self._history.append(query_text, draft)
        return draft

    def analyze_intent(self, query_text: str) -> QueryIntent:
        """Classify a query and, if enabled, attach its context signals."""
        intent = classify_intent(query_text, self.config.intent_confidence)
        if self.config.detect_context:
            intent.context = analyze_context(query_text)
        return intent

    def mark_outcome(self, index: int, success: bool) -> HistoryEntry:
        """Record whether a previously processed query served the user.

        Args:
            index: History position; negative values count from the newest
            success: Observed outcome

        Returns:
            The updated history entry
        """
        return self._history.mark_outcome(index, success)

    def success_rate(self) -> float:
        """Fraction of recorded queries marked successful."""
        return self._history.success_rate()

    def clear_history(self) -> None:
        """Forget all processed queries."""
        self._history.clear()
        logger.info("Query history cleared")

    # Extension seams, not wired into process_query

    async def find_similar_queries(self, embedding: list[float]) -> list[HistoryEntry]:
        """Find previously processed queries similar to an embedding.

        Similarity search over history is not implemented; always empty.
        """
        return []

    def adapt_query(self, previous: StructuredQuery, query_text: str) -> StructuredQuery:
        """Adapt a previous structured query to new query text (identity)."""
        return previous

    async def extract_entities(self, query_text: str) -> list[Any]:
        """Extract known entities from query text.

        Entity recognition is not available; always empty.
        """
        return []

    async def build_query(
        self,
        query_text: str,
        intent: QueryIntent | None,
        entities: list[Any]
    ) -> StructuredQuery:
        """Assemble a plain vector-search query without the pattern matcher."""
        return StructuredQuery(like=query_text, limit=self.config.default_limit)
