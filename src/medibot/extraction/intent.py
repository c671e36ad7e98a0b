"""
Keyword-rule intent classification.

Every intent has one pattern that either matches (score 1) or not
(score 0). The winner is the first highest score in INTENT_PATTERNS
order, so "symptoms" beats "general" when both match, and "symptoms"
is also what an unmatched query falls back to.
"""

from __future__ import annotations

import re

from medibot.core import IntentResult

INTENT_PATTERNS: list[tuple[str, re.Pattern[str]]] = [
    ("symptoms", re.compile(r"\b(symptom|sign|feel|hurt|pain|ache)\b", re.IGNORECASE)),
    ("diagnosis", re.compile(r"\b(diagnos|test|check|exam|detect)\b", re.IGNORECASE)),
    ("treatment", re.compile(r"\b(treat|cure|heal|medicine|medication|drug)\b", re.IGNORECASE)),
    ("causes", re.compile(r"\b(cause|reason|why|what.*cause|due to)\b", re.IGNORECASE)),
    ("prevention", re.compile(r"\b(prevent|avoid|stop|precaution|protect)\b", re.IGNORECASE)),
    ("general", re.compile(r"\b(what is|what are|explain|tell me about|define)\b", re.IGNORECASE)),
]

INTENTS = tuple(intent for intent, _ in INTENT_PATTERNS)

# Confidence reported when no pattern matched
DEFAULT_CONFIDENCE = 0.5


def intent_scores(text: str) -> dict[str, int]:
    """Binary match score per intent, in declared order."""
    return {
        intent: 1 if pattern.search(text) else 0
        for intent, pattern in INTENT_PATTERNS
    }


def classify_intent(text: str) -> IntentResult:
    """Pick the best intent for a query."""
    scores = intent_scores(text)

    best_intent, best_score = INTENTS[0], scores[INTENTS[0]]
    for intent in INTENTS[1:]:
        if scores[intent] > best_score:
            best_intent, best_score = intent, scores[intent]

    confidence = float(best_score) if best_score else DEFAULT_CONFIDENCE
    return IntentResult(intent=best_intent, confidence=confidence)
