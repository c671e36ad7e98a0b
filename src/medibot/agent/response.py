"""
Response construction - turns ranked matches into a ChatResponse.

What gets shown depends on the detected intent:
- symptoms / treatment / causes: that section first, marked priority
- general: symptoms, causes, treatment, plus other possible conditions
- always: diagnosis (if present), detected entities, safety note
"""

from __future__ import annotations

from medibot.core import EntitySet, IntentResult, ScoredMatch
from medibot.extraction import flatten_entities
from medibot.schemas import ChatResponse, ResponseSection, SafetyNote

EDUCATIONAL_NOTE = SafetyNote(
    message=(
        "This response is for educational purposes only. "
        "Consult healthcare professionals for medical advice."
    ),
    type="educational_only",
)

# Intent -> (section title, Document attribute)
_PRIORITY_SECTIONS = {
    "symptoms": ("Symptoms", "symptoms"),
    "treatment": ("Treatment", "treatment"),
    "causes": ("Causes", "causes"),
}

_GENERAL_SECTIONS = [
    ("Symptoms", "symptoms"),
    ("Causes", "causes"),
    ("Treatment", "treatment"),
]

MAX_OTHER_CONDITIONS = 2


def _other_conditions(matches: list[ScoredMatch]) -> ResponseSection:
    return ResponseSection(
        title="Other Possible Conditions",
        items=[
            f"{m.document.name} ({round(m.similarity * 100)}% match)"
            for m in matches[1 : 1 + MAX_OTHER_CONDITIONS]
        ],
    )


def build_response(
    query: str,
    matches: list[ScoredMatch],
    entities: EntitySet,
    intent: IntentResult,
    confidence: float,
) -> ChatResponse:
    """Build the local answer from the top match. matches must be non-empty."""
    top = matches[0]
    doc = top.document
    sections: list[ResponseSection] = []

    if intent.intent in _PRIORITY_SECTIONS:
        title, attr = _PRIORITY_SECTIONS[intent.intent]
        items = getattr(doc, attr)
        if items:
            sections.append(ResponseSection(title=title, items=list(items), priority=True))

    if intent.intent == "general":
        for title, attr in _GENERAL_SECTIONS:
            items = getattr(doc, attr)
            if items:
                sections.append(ResponseSection(title=title, items=list(items)))
        if len(matches) > 1:
            sections.append(_other_conditions(matches))

    if doc.diagnosis:
        sections.append(ResponseSection(title="Diagnosis", items=[doc.diagnosis]))

    return ChatResponse(
        source="local",
        query=query,
        title=doc.name,
        intent=intent.intent,
        confidence=confidence,
        similarity=top.similarity,
        sections=sections,
        entities=flatten_entities(entities),
        safety_notes=[EDUCATIONAL_NOTE],
    )
