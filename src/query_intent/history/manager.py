"""Bounded, insertion-ordered query history."""

import logging
from collections import deque
from collections.abc import Iterator

from query_intent.exceptions import HistoryError, ValidationError
from query_intent.history.models import HistoryEntry
from query_intent.models.types import StructuredQuery

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_SIZE = 100


class QueryHistory:
    """Fixed-capacity FIFO of processed queries.
    
    The oldest entry is evicted when an insertion would exceed capacity.
    """
    
    def __init__(self, max_size: int = DEFAULT_HISTORY_SIZE):
        """Initialize the history.
        
        Args:
            max_size: Maximum number of entries kept
            
        Raises:
            ValidationError: If max_size is not positive
        """
        if max_size < 1:
            raise ValidationError("max_size must be at least 1")
        self._entries: deque[HistoryEntry] = deque(maxlen=max_size)
    
    @property
    def max_size(self) -> int:
        """Maximum number of entries kept."""
        return self._entries.maxlen
    
    def __len__(self) -> int:
        return len(self._entries)
    
    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(self._entries)
    
    def __getitem__(self, index: int) -> HistoryEntry:
        return self._entries[index]
    
    def append(self, query: str, result: StructuredQuery) -> HistoryEntry:
        """Record a processed query with ``success`` unset.
        
        Args:
            query: Original query text
            result: Structured query returned for it
            
        Returns:
            The stored entry
        """
        if len(self._entries) == self._entries.maxlen:
            evicted = self._entries[0]
            logger.debug("History full, evicting oldest query: %r", evicted.query)
        
        entry = HistoryEntry(query=query, result=result)
        self._entries.append(entry)
        return entry
    
    def mark_outcome(self, index: int, success: bool) -> HistoryEntry:
        """Record whether the query at ``index`` served the user.
        
        Args:
            index: Position in insertion order; negative values count from the newest
            success: Observed outcome
            
        Returns:
            The updated entry
            
        Raises:
            HistoryError: If index is out of range
        """
        size = len(self._entries)
        if not -size <= index < size:
            raise HistoryError(
                f"History index {index} out of range for {size} entries",
                index=index
            )
        
        entry = self._entries[index]
        entry.success = success
        return entry
    
    def success_rate(self) -> float:
        """Fraction of entries marked successful (0.0 when empty)."""
        if not self._entries:
            return 0.0
        successes = sum(1 for entry in self._entries if entry.success)
        return successes / len(self._entries)
    
    def queries(self) -> list[str]:
        """Query texts in insertion order."""
        return [entry.query for entry in self._entries]
    
    def snapshot(self) -> list[HistoryEntry]:
        """Copy of the entries in insertion order."""
        return list(self._entries)
    
    def clear(self) -> None:
        """Remove all entries."""
        self._entries.clear()
