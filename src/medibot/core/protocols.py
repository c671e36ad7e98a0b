"""
Core protocols and value types shared across the engine.

Infrastructure pieces (stores, fallback responders) implement these
protocols, so the chatbot can be assembled from real or fake parts.

PATTERN:
- Protocol defines the contract
- Concrete classes implement it
- Factory functions pick an implementation
- Tests inject MagicMock or in-memory doubles
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from medibot.schemas import ChatResponse, Document


# Category name -> distinct lowercase terms found in the text
EntitySet = dict[str, set[str]]

# Token -> weight
TermVector = dict[str, float]


# ---------------------------------------------------------------------------
# RANKING RESULTS
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ScoredMatch:
    """A document paired with its similarity (0-1) to the current query."""
    document: Document
    similarity: float
    index: int = 0


@dataclass(frozen=True)
class IntentResult:
    """Detected query intent and how sure the classifier is."""
    intent: str
    confidence: float


# ---------------------------------------------------------------------------
# DOCUMENT STORE PROTOCOL
# ---------------------------------------------------------------------------


@runtime_checkable
class DocumentStore(Protocol):
    """
    Contract for searching the medical knowledge base.

    Implementations:
    - KnowledgeBase (TF-IDF vectors + cosine similarity)
    - KeywordStore (substring keyword scoring)
    """

    @property
    def documents(self) -> list[Document]:
        """The loaded collection, in load order."""
        ...

    def load(self, documents: list[Document]) -> None:
        """Replace the collection and rebuild any derived state."""
        ...

    def search(self, query: str, limit: int = 3) -> list[ScoredMatch]:
        """Return up to `limit` matches, best first."""
        ...


# ---------------------------------------------------------------------------
# FALLBACK RESPONDER PROTOCOL
# ---------------------------------------------------------------------------


@runtime_checkable
class FallbackResponder(Protocol):
    """
    Contract for answering when the local engine is not confident.

    Implementations:
    - CannedFallbackResponder (local, always available)
    """

    def respond(self, query: str) -> ChatResponse:
        """Produce an answer for a query the engine could not handle."""
        ...
