"""Configuration management for query_intent."""

import os
from dataclasses import dataclass, field

from .exceptions import ConfigurationError


@dataclass
class AnalyzerConfig:
    """Configuration for the query intent analyzer."""
    
    # History
    history_size: int = field(
        default_factory=lambda: int(os.getenv("QUERY_HISTORY_SIZE", "100"))
    )
    
    # Classification
    intent_confidence: float = field(
        default_factory=lambda: float(os.getenv("INTENT_CONFIDENCE", "0.8"))
    )
    detect_context: bool = field(
        default_factory=lambda: os.getenv("DETECT_QUERY_CONTEXT", "true").lower() == "true"
    )
    
    # Query assembly
    default_limit: int = field(
        default_factory=lambda: int(os.getenv("DEFAULT_QUERY_LIMIT", "10"))
    )
    
    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate()
    
    def _validate(self):
        """Validate configuration values."""
        if self.history_size < 1:
            raise ConfigurationError("history_size must be at least 1")
        
        if not 0.0 <= self.intent_confidence <= 1.0:
            raise ConfigurationError("intent_confidence must be between 0.0 and 1.0")
        
        if self.default_limit < 1:
            raise ConfigurationError("default_limit must be at least 1")
    
    def to_dict(self) -> dict:
        """Return configuration values as a plain dictionary."""
        return {
            "history_size": self.history_size,
            "intent_confidence": self.intent_confidence,
            "detect_context": self.detect_context,
            "default_limit": self.default_limit,
        }
