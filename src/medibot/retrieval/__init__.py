"""
Retrieval module - TF-IDF indexing and similarity search.

This module provides:
- build(): Index a collection into a VectorSpace snapshot
- rank(): Score a query against a snapshot
- KnowledgeBase / KeywordStore: Stores built on top of them
- get_store(): Factory function
- load_documents(): Dataset loader

ARCHITECTURE:
-------------
1. Pure functions do the math (vector_space, similarity)
2. Stores own the published snapshot
3. Factory picks the retrieval strategy
"""

from medibot.retrieval.vector_space import VectorSpace, build, term_weights
from medibot.retrieval.similarity import (
    RELEVANCE_FLOOR,
    cosine_similarity,
    query_vector,
    rank,
)
from medibot.retrieval.store import KeywordStore, KnowledgeBase, get_store
from medibot.retrieval.loader import (
    DatasetLoadError,
    dump_documents,
    load_documents,
    parse_documents,
)
from medibot.retrieval.seeds import get_medical_documents

__all__ = [
    # Vector space
    "VectorSpace",
    "build",
    "term_weights",
    # Ranking
    "RELEVANCE_FLOOR",
    "cosine_similarity",
    "query_vector",
    "rank",
    # Stores
    "KnowledgeBase",
    "KeywordStore",
    "get_store",
    # Loading
    "DatasetLoadError",
    "dump_documents",
    "load_documents",
    "parse_documents",
    # Seeds
    "get_medical_documents",
]
