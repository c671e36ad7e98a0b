"""
MEDIBOT engine - TF-IDF retrieval, entity/intent rules and confidence
scoring for a medical information chatbot.

Engine surface:
    build(documents)                      -> VectorSpace
    rank(query, documents, space, top_k)  -> list[ScoredMatch]
    extract_entities(text)                -> EntitySet
    classify_intent(text)                 -> IntentResult
    score(matches, entities, intent)      -> float
"""

from medibot.core import EntitySet, IntentResult, ScoredMatch
from medibot.extraction import classify_intent, extract_entities
from medibot.retrieval import VectorSpace, build, rank
from medibot.schemas import Document
from medibot.scoring import passes_gate, score, threshold_for
from medibot.text import normalize, stem_word

__version__ = "0.1.0"

__all__ = [
    "Document",
    "EntitySet",
    "IntentResult",
    "ScoredMatch",
    "VectorSpace",
    "build",
    "classify_intent",
    "extract_entities",
    "normalize",
    "passes_gate",
    "rank",
    "score",
    "stem_word",
    "threshold_for",
]
