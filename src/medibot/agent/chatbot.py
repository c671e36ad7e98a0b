"""
Medical chatbot - wires the engine components into one answer() call.

Flow per query:
1. search the store (top K matches above the relevance floor)
2. extract entities and classify intent from the raw query
3. score confidence
4. gate: local answer if confident enough, otherwise fallback responder

The store and fallback are INJECTED, so tests can swap either one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from medibot.agent.response import build_response
from medibot.extraction import classify_intent, extract_entities
from medibot.scoring import passes_gate, score, threshold_for

if TYPE_CHECKING:
    from medibot.config import MedibotConfig
    from medibot.core import (
        DocumentStore,
        EntitySet,
        FallbackResponder,
        IntentResult,
        ScoredMatch,
    )
    from medibot.schemas import ChatResponse

logger = logging.getLogger(__name__)


@dataclass
class Analysis:
    """Every engine signal for one query, before gating."""
    query: str
    matches: list[ScoredMatch]
    entities: EntitySet
    intent: IntentResult
    confidence: float | None

    @property
    def threshold(self) -> float:
        return threshold_for(self.intent)

    @property
    def accepted(self) -> bool:
        return passes_gate(self.matches, self.confidence, self.intent)


class MedicalChatbot:
    """Answers medical questions from the local knowledge base."""

    def __init__(
        self,
        store: DocumentStore,
        fallback: FallbackResponder,
        top_k: int = 3,
    ):
        if top_k < 1:
            raise ValueError(f"top_k must be at least 1, got {top_k}")
        self.store = store
        self.fallback = fallback
        self.top_k = top_k

    def analyze(self, query: str) -> Analysis:
        """Run the engine without deciding what to answer."""
        matches = self.store.search(query, limit=self.top_k)
        entities = extract_entities(query)
        intent = classify_intent(query)
        confidence = score(matches, entities, intent) if matches else None
        return Analysis(
            query=query,
            matches=matches,
            entities=entities,
            intent=intent,
            confidence=confidence,
        )

    def answer(self, query: str) -> ChatResponse | None:
        """
        Answer a query. Returns None for blank input.

        Falls back when nothing clears the relevance floor or the
        confidence is under the intent's threshold.
        """
        query = query.strip()
        if not query:
            return None

        analysis = self.analyze(query)

        if not analysis.matches:
            logger.debug(f"No local matches for {query!r}, using fallback")
            return self.fallback.respond(query)

        if not analysis.accepted:
            logger.debug(
                f"Low confidence ({round(analysis.confidence * 100)}%) "
                f"below {analysis.threshold}, using fallback"
            )
            return self.fallback.respond(query)

        logger.debug(
            f"Local answer {analysis.matches[0].document.name!r} "
            f"({round(analysis.confidence * 100)}% confidence)"
        )
        return build_response(
            query,
            analysis.matches,
            analysis.entities,
            analysis.intent,
            analysis.confidence,
        )


def create_chatbot(config: MedibotConfig | None = None) -> MedicalChatbot:
    """
    Factory that assembles a chatbot from configuration.

    Loads the dataset file when one is configured, otherwise the
    built-in seed documents.
    """
    from medibot.config import get_config
    from medibot.responders import get_fallback_responder
    from medibot.retrieval import KnowledgeBase, get_medical_documents, load_documents

    config = config or get_config()

    if config.dataset_path:
        documents = load_documents(config.dataset_path)
    else:
        documents = get_medical_documents()

    return MedicalChatbot(
        store=KnowledgeBase(documents),
        fallback=get_fallback_responder(config),
        top_k=config.top_k,
    )
