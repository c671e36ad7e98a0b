"""
Extraction module - medical entities and query intent from raw text.

Both extractors are declarative: an ordered list of (label, pattern)
pairs. Order matters for intent tie-breaking.
"""

from medibot.extraction.entities import (
    ENTITY_CATEGORIES,
    ENTITY_PATTERNS,
    entity_count,
    extract_entities,
    flatten_entities,
)
from medibot.extraction.intent import (
    DEFAULT_CONFIDENCE,
    INTENT_PATTERNS,
    INTENTS,
    classify_intent,
    intent_scores,
)

__all__ = [
    # Entities
    "ENTITY_CATEGORIES",
    "ENTITY_PATTERNS",
    "entity_count",
    "extract_entities",
    "flatten_entities",
    # Intent
    "DEFAULT_CONFIDENCE",
    "INTENT_PATTERNS",
    "INTENTS",
    "classify_intent",
    "intent_scores",
]
