"""
Document store implementations.

Pattern: Protocol → Implementations → Factory

This module contains:
1. KnowledgeBase - TF-IDF vectors + cosine similarity (default)
2. KeywordStore - substring keyword scoring (legacy strategy)
3. get_store() - Factory function

Both stores rebuild everything on load(). The new state is computed
first and then published with a single assignment, so a search never
sees a half-built index.
"""

from __future__ import annotations

import logging

from medibot.core import ScoredMatch
from medibot.retrieval.similarity import DEFAULT_TOP_K, rank
from medibot.retrieval.vector_space import VectorSpace, build
from medibot.schemas import Document

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# TF-IDF KNOWLEDGE BASE
# ---------------------------------------------------------------------------


class KnowledgeBase:
    """
    Vector-space store over the medical collection.

    Holds the caller's documents by reference plus the VectorSpace
    snapshot derived from them.
    """

    def __init__(self, documents: list[Document] | None = None):
        self._documents: list[Document] = []
        self._space = VectorSpace()
        if documents is not None:
            self.load(documents)

    @property
    def documents(self) -> list[Document]:
        return self._documents

    @property
    def space(self) -> VectorSpace:
        return self._space

    def load(self, documents: list[Document]) -> None:
        """Rebuild the vector space for a new collection."""
        space = build(documents)
        self._documents, self._space = documents, space
        logger.info(
            f"Indexed {len(documents)} documents, vocabulary size {len(space.idf)}"
        )

    def search(self, query: str, limit: int = DEFAULT_TOP_K) -> list[ScoredMatch]:
        """Rank the collection against a query."""
        return rank(query, self._documents, self._space, top_k=limit)


# ---------------------------------------------------------------------------
# KEYWORD STORE (Legacy)
# ---------------------------------------------------------------------------


MAX_KEYWORD_SCORE = 4.5


class KeywordStore:
    """
    Keyword scorer kept as a baseline for the vector-space ranker.

    Scoring per query keyword (lowercased, longer than 2 chars) that
    occurs in the document text:
    - +1 for appearing anywhere in name/symptoms/causes/diagnosis
    - +2 more if it appears in the name
    - +1.5 more if it appears in any symptom

    A keyword scores at most 4.5, so dividing by 4.5 per query keyword
    puts ScoredMatch.similarity in [0, 1] without changing the order.
    """

    def __init__(self, documents: list[Document] | None = None):
        self._documents: list[Document] = list(documents or [])

    @property
    def documents(self) -> list[Document]:
        return self._documents

    def load(self, documents: list[Document]) -> None:
        self._documents = documents

    @staticmethod
    def score_document(doc: Document, keywords: list[str]) -> float:
        search_text = " ".join([
            doc.name,
            " ".join(doc.symptoms),
            " ".join(doc.causes),
            doc.diagnosis,
        ]).lower()
        name = doc.name.lower()
        symptoms = [s.lower() for s in doc.symptoms]

        score = 0.0
        for keyword in keywords:
            if keyword not in search_text:
                continue
            score += 1
            if keyword in name:
                score += 2
            if any(keyword in symptom for symptom in symptoms):
                score += 1.5
        return score

    def search(self, query: str, limit: int = DEFAULT_TOP_K) -> list[ScoredMatch]:
        keywords = [w for w in query.lower().split() if len(w) > 2]

        scored = []
        for index, doc in enumerate(self._documents):
            score = self.score_document(doc, keywords)
            if score > 0:
                similarity = score / (MAX_KEYWORD_SCORE * len(keywords))
                scored.append(ScoredMatch(document=doc, similarity=similarity, index=index))

        scored.sort(key=lambda m: m.similarity, reverse=True)
        return scored[:limit]


# ---------------------------------------------------------------------------
# FACTORY FUNCTION
# ---------------------------------------------------------------------------


def get_store(
    strategy: str = "tfidf",
    documents: list[Document] | None = None,
) -> KnowledgeBase | KeywordStore:
    """
    Factory function to get a document store.

    Args:
        strategy: "tfidf" (default) or "keyword"
        documents: Collection to load (seed documents if not provided)

    Returns:
        DocumentStore implementation
    """
    if documents is None:
        from medibot.retrieval.seeds import get_medical_documents

        documents = get_medical_documents()

    if strategy == "tfidf":
        return KnowledgeBase(documents)
    if strategy == "keyword":
        return KeywordStore(documents)
    raise ValueError(f"Unknown retrieval strategy: {strategy!r}")
