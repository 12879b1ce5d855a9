"""Unit tests for QueryHistory."""

import pytest

from query_intent.exceptions import HistoryError, ValidationError
from query_intent.history import HistoryEntry, QueryHistory
from query_intent.models.types import StructuredQuery


@pytest.fixture
def history():
    """Create a small history."""
    return QueryHistory(max_size=3)


class TestQueryHistory:
    """Test cases for QueryHistory."""
    
    def test_default_size(self):
        """Test default capacity."""
        assert QueryHistory().max_size == 100
    
    def test_invalid_size(self):
        """Test capacity validation."""
        with pytest.raises(ValidationError, match="max_size must be at least 1"):
            QueryHistory(max_size=0)
    
    def test_append(self, history):
        """Test appending records an unmarked entry."""
        result = StructuredQuery(like="papers")
        
        entry = history.append("papers", result)
        
        assert isinstance(entry, HistoryEntry)
        assert entry.query == "papers"
        assert entry.result is result
        assert entry.success is False
        assert len(history) == 1
        assert history[0] is entry
    
    def test_fifo_eviction(self, history):
        """Test the oldest entry is evicted first."""
        for text in ["a", "b", "c", "d", "e"]:
            history.append(text, StructuredQuery(like=text))
        
        assert len(history) == 3
        assert history.queries() == ["c", "d", "e"]
    
    def test_iteration_order(self, history):
        """Test iteration follows insertion order."""
        for text in ["a", "b"]:
            history.append(text, StructuredQuery(like=text))
        
        assert [entry.query for entry in history] == ["a", "b"]
    
    def test_mark_outcome(self, history):
        """Test marking by positive and negative index."""
        for text in ["a", "b", "c"]:
            history.append(text, StructuredQuery(like=text))
        
        assert history.mark_outcome(1, True).query == "b"
        assert history.mark_outcome(-3, True).query == "a"
        assert [entry.success for entry in history] == [True, True, False]
        
        history.mark_outcome(0, False)
        assert history[0].success is False
    
    def test_mark_outcome_out_of_range(self, history):
        """Test out-of-range indices."""
        history.append("a", StructuredQuery(like="a"))
        
        with pytest.raises(HistoryError) as exc_info:
            history.mark_outcome(1, True)
        assert exc_info.value.index == 1
        
        with pytest.raises(HistoryError):
            history.mark_outcome(-2, True)
    
    def test_mark_outcome_empty(self, history):
        """Test marking on an empty history."""
        with pytest.raises(HistoryError):
            history.mark_outcome(0, True)
    
    def test_success_rate(self, history):
        """Test success rate computation."""
        assert history.success_rate() == 0.0
        
        for text in ["a", "b", "c"]:
            history.append(text, StructuredQuery(like=text))
        history.mark_outcome(0, True)
        
        assert history.success_rate() == pytest.approx(1 / 3)
    
    def test_snapshot_is_copy(self, history):
        """Test snapshots are detached from the history."""
        history.append("a", StructuredQuery(like="a"))
        
        snapshot = history.snapshot()
        snapshot.append(None)
        
        assert len(history) == 1
    
    def test_clear(self, history):
        """Test clearing."""
        history.append("a", StructuredQuery(like="a"))
        history.clear()
        
        assert len(history) == 0
        assert history.queries() == []
