"""
Similarity ranker - cosine similarity between a query and each document.

The query is normalized and weighted with the IDF table of the existing
snapshot. Terms never seen during indexing weigh 0, so they cannot
produce a match.
"""

from __future__ import annotations

import numpy as np

from medibot.core import ScoredMatch, TermVector
from medibot.retrieval.vector_space import VectorSpace, term_weights
from medibot.schemas import Document
from medibot.text import normalize

# Matches at or below this similarity are dropped
RELEVANCE_FLOOR = 0.1

DEFAULT_TOP_K = 3


def cosine_similarity(a: TermVector, b: TermVector) -> float:
    """
    Cosine similarity over the union of both vectors' terms.

    Returns 0.0 when either vector has zero magnitude.
    """
    terms = sorted(a.keys() | b.keys())
    if not terms:
        return 0.0

    va = np.array([a.get(t, 0.0) for t in terms], dtype=np.float64)
    vb = np.array([b.get(t, 0.0) for t in terms], dtype=np.float64)

    norm_a = np.linalg.norm(va)
    norm_b = np.linalg.norm(vb)
    if norm_a == 0 or norm_b == 0:
        return 0.0

    # Clamp rounding noise; weights are non-negative so the true value is in [0, 1]
    return min(1.0, float(np.dot(va, vb) / (norm_a * norm_b)))


def query_vector(query: str, space: VectorSpace) -> TermVector:
    """Weight a query's tokens with the snapshot's IDF table."""
    return term_weights(normalize(query), space.idf)


def rank(
    query: str,
    documents: list[Document],
    space: VectorSpace,
    top_k: int = DEFAULT_TOP_K,
) -> list[ScoredMatch]:
    """
    Rank documents against a free-text query.

    Args:
        query: Raw user text
        documents: The collection `space` was built from (same order)
        space: Snapshot returned by build()
        top_k: Maximum number of matches to return

    Returns:
        Matches above the relevance floor, best first. Ties keep
        collection order.
    """
    if top_k < 1:
        raise ValueError(f"top_k must be at least 1, got {top_k}")

    q_vec = query_vector(query, space)

    scored = []
    for index, (doc, doc_vec) in enumerate(zip(documents, space.vectors)):
        similarity = cosine_similarity(q_vec, doc_vec)
        if similarity > RELEVANCE_FLOOR:
            scored.append(ScoredMatch(document=doc, similarity=similarity, index=index))

    # sort() is stable, so equal scores stay in collection order
    scored.sort(key=lambda m: m.similarity, reverse=True)
    return scored[:top_k]
