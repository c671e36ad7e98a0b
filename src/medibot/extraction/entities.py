"""
Rule-based medical entity extraction.

Each category is a literal vocabulary matched case-insensitively on word
boundaries. This is pattern matching, not NER: "headaches" does not
match "headache".
"""

from __future__ import annotations

import re

from medibot.core import EntitySet

# (category, pattern) in declared order; every category appears in the result
ENTITY_PATTERNS: list[tuple[str, re.Pattern[str]]] = [
    ("symptoms", re.compile(
        r"\b(pain|ache|fever|nausea|fatigue|headache|cough|shortness|breath|dizziness|swelling)\b",
        re.IGNORECASE,
    )),
    ("body_parts", re.compile(
        r"\b(chest|head|stomach|heart|lung|kidney|liver|brain|joint|muscle)\b",
        re.IGNORECASE,
    )),
    ("conditions", re.compile(
        r"\b(diabetes|hypertension|asthma|migraine|pneumonia|depression|anxiety|arthritis)\b",
        re.IGNORECASE,
    )),
    ("medications", re.compile(
        r"\b(aspirin|ibuprofen|acetaminophen|insulin|metformin|antibiotics)\b",
        re.IGNORECASE,
    )),
]

ENTITY_CATEGORIES = tuple(category for category, _ in ENTITY_PATTERNS)


def extract_entities(text: str) -> EntitySet:
    """Return the distinct lowercase terms found per category."""
    return {
        category: {match.lower() for match in pattern.findall(text)}
        for category, pattern in ENTITY_PATTERNS
    }


def entity_count(entities: EntitySet) -> int:
    """Total matched terms across all categories."""
    return sum(len(terms) for terms in entities.values())


def flatten_entities(entities: EntitySet) -> list[str]:
    """All matched terms, grouped by category order, sorted within a category."""
    return [
        term
        for category in entities
        for term in sorted(entities[category])
    ]
