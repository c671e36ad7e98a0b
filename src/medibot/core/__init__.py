"""
Core module - shared protocols and value types.

USAGE:
------
from medibot.core import DocumentStore, FallbackResponder, ScoredMatch
"""

from medibot.core.protocols import (
    # Protocols
    DocumentStore,
    FallbackResponder,
    # Data classes
    IntentResult,
    ScoredMatch,
    # Aliases
    EntitySet,
    TermVector,
)

__all__ = [
    # Protocols
    "DocumentStore",
    "FallbackResponder",
    # Data classes
    "IntentResult",
    "ScoredMatch",
    # Aliases
    "EntitySet",
    "TermVector",
]
