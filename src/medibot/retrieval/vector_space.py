"""
Vector space builder - TF-IDF weights for a document collection.

Single responsibility: turn documents into an immutable snapshot of
(IDF table, one term vector per document). Nothing here searches.

FORMULAS:
---------
document frequency df(t) = number of documents containing t at least once
IDF(t)                   = ln(N / df(t))        (0 when t is in every document)
weight(t, d)             = count(t in d) * IDF(t)

A rebuild is always a full replace. There is no incremental update.
"""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Mapping

from medibot.core import TermVector
from medibot.schemas import Document
from medibot.text import normalize


@dataclass(frozen=True)
class VectorSpace:
    """
    Snapshot produced by build().

    vectors[i] belongs to the i-th document of the collection that was
    built; the snapshot does not hold the documents themselves.
    """
    idf: dict[str, float] = field(default_factory=dict)
    vectors: tuple[TermVector, ...] = ()

    def __len__(self) -> int:
        return len(self.vectors)

    @property
    def vocabulary(self) -> frozenset[str]:
        return frozenset(self.idf)


def term_weights(tokens: Iterable[str], idf: Mapping[str, float]) -> TermVector:
    """
    Weight each distinct token by raw count times IDF.

    Tokens missing from the IDF table get weight 0.
    """
    counts = Counter(tokens)
    return {token: count * idf.get(token, 0.0) for token, count in counts.items()}


def build(documents: list[Document]) -> VectorSpace:
    """Index a document collection from scratch."""
    tokenized = [normalize(doc.searchable_text()) for doc in documents]

    doc_freq: Counter[str] = Counter()
    for tokens in tokenized:
        doc_freq.update(set(tokens))

    total_docs = len(documents)
    idf = {
        token: math.log(total_docs / freq)
        for token, freq in doc_freq.items()
    }

    vectors = tuple(term_weights(tokens, idf) for tokens in tokenized)
    return VectorSpace(idf=idf, vectors=vectors)
