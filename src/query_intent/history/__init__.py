"""Query history for query_intent."""

from query_intent.history.manager import QueryHistory
from query_intent.history.models import HistoryEntry

__all__ = ["HistoryEntry", "QueryHistory"]
