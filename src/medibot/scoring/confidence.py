"""
Confidence scoring and response gating.

FORMULA:
--------
confidence = min(1.0,
                 mean(similarity) * 0.5
                 + entity_count   * 0.1
                 + intent_conf    * 0.4)

The weights and the cap are fixed. The gate then compares confidence to
an intent-dependent threshold: "general" questions are allowed through
at a lower bar because any matching condition is a reasonable answer.
"""

from __future__ import annotations

from medibot.core import EntitySet, IntentResult, ScoredMatch
from medibot.extraction import entity_count

SIMILARITY_WEIGHT = 0.5
ENTITY_WEIGHT = 0.1
INTENT_WEIGHT = 0.4
MAX_CONFIDENCE = 1.0

GENERAL_THRESHOLD = 0.2
DEFAULT_THRESHOLD = 0.3


def score(
    matches: list[ScoredMatch],
    entities: EntitySet,
    intent: IntentResult,
) -> float:
    """
    Blend retrieval, entity and intent signals into one confidence.

    Raises:
        ValueError: if matches is empty. Callers must check for an
            empty ranking before scoring.
    """
    if not matches:
        raise ValueError("Cannot score an empty match list")

    avg_similarity = sum(m.similarity for m in matches) / len(matches)
    confidence = (
        avg_similarity * SIMILARITY_WEIGHT
        + entity_count(entities) * ENTITY_WEIGHT
        + intent.confidence * INTENT_WEIGHT
    )
    return min(MAX_CONFIDENCE, confidence)


def threshold_for(intent: IntentResult) -> float:
    """Minimum confidence for a local answer to be used."""
    return GENERAL_THRESHOLD if intent.intent == "general" else DEFAULT_THRESHOLD


def passes_gate(
    matches: list[ScoredMatch],
    confidence: float | None,
    intent: IntentResult,
) -> bool:
    """True when the local answer should be shown instead of the fallback."""
    if not matches or confidence is None:
        return False
    return confidence >= threshold_for(intent)
