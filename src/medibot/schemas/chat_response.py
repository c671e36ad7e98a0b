"""
Structured chatbot answers - the OUTPUT CONTRACT.

Rendering (HTML, terminal, JSON API) belongs to whoever displays the
answer. These models carry only what to show, never how.
"""

from typing import Literal

from pydantic import BaseModel, Field


class ResponseSection(BaseModel):
    """One titled block of the answer (symptoms, treatment, ...)."""

    title: str = Field(description="Section heading, e.g. 'Symptoms'")

    items: list[str] = Field(
        default_factory=list,
        description="Bullet items for the section",
    )

    priority: bool = Field(
        default=False,
        description="True when the section answers the detected intent directly",
    )


class SafetyNote(BaseModel):
    """Guardrail messaging attached to every answer."""

    message: str

    type: Literal["educational_only", "consult_professional"] = Field(
        description="Category of safety note"
    )


class ChatResponse(BaseModel):
    """
    A complete answer to one user query.

    source tells the caller who produced it: the local retrieval engine
    or the fallback responder.
    """

    source: Literal["local", "fallback"]

    query: str

    title: str | None = Field(
        default=None,
        description="Best matching condition, if any",
    )

    message: str | None = Field(
        default=None,
        description="Free-text body, used by fallback answers",
    )

    intent: str | None = None

    confidence: float | None = Field(default=None, ge=0.0, le=1.0)

    similarity: float | None = Field(
        default=None,
        ge=0.0,
        le=1.0,
        description="Similarity of the top match",
    )

    sections: list[ResponseSection] = Field(default_factory=list)

    entities: list[str] = Field(
        default_factory=list,
        description="Medical terms detected in the query",
    )

    safety_notes: list[SafetyNote] = Field(default_factory=list)

    def section(self, title: str) -> ResponseSection | None:
        """Look up a section by title."""
        for section in self.sections:
            if section.title == title:
                return section
        return None
