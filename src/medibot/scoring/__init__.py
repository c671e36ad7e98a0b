"""
Scoring module - confidence blend and the local-vs-fallback gate.
"""

from medibot.scoring.confidence import (
    DEFAULT_THRESHOLD,
    GENERAL_THRESHOLD,
    passes_gate,
    score,
    threshold_for,
)

__all__ = [
    "DEFAULT_THRESHOLD",
    "GENERAL_THRESHOLD",
    "passes_gate",
    "score",
    "threshold_for",
]
