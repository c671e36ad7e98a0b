"""
Golden queries for the seed condition collection.

Each query lists the condition names retrieval MUST return. Queries
lean on vocabulary unique to one condition so that a regression in
normalization or weighting shows up as a missing or extra match.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GoldenQuery:
    """A query plus the conditions it should retrieve."""
    id: str
    query: str
    expected_conditions: tuple[str, ...]
    description: str = ""


CONDITION_QUERIES: tuple[GoldenQuery, ...] = (
    GoldenQuery(
        id="asthma-001",
        query="wheezing and chest tightness",
        expected_conditions=("Asthma",),
        description="Stemmed symptom terms unique to asthma",
    ),
    GoldenQuery(
        id="migraine-001",
        query="throbbing migraine with aura",
        expected_conditions=("Migraine",),
    ),
    GoldenQuery(
        id="diabetes-001",
        query="frequent urination and increased thirst",
        expected_conditions=("Type 2 Diabetes",),
        description="Suffix stripping must map 'urination' and 'increased' onto the index",
    ),
    GoldenQuery(
        id="gastro-001",
        query="diarrhea and vomiting",
        expected_conditions=("Gastroenteritis",),
    ),
    GoldenQuery(
        id="cold-001",
        query="runny nose and sneezing",
        expected_conditions=("Common Cold",),
    ),
    GoldenQuery(
        id="asthma-002",
        query="spirometry albuterol inhaler",
        expected_conditions=("Asthma",),
    ),
)
