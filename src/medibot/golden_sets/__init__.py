"""
Golden Sets Package

Queries with the conditions a correct retrieval must return, written
against the built-in seed collection.

Example:
    from medibot.golden_sets import GoldenQuery, get_all_golden_queries
"""

from medibot.golden_sets.condition_queries import (
    CONDITION_QUERIES,
    GoldenQuery,
)


def get_all_golden_queries() -> list[GoldenQuery]:
    """Get every golden query. Add new query sets here."""
    return list(CONDITION_QUERIES)


def get_query_by_id(query_id: str) -> GoldenQuery | None:
    """Get a specific golden query by ID, or None if not found."""
    for query in get_all_golden_queries():
        if query.id == query_id:
            return query
    return None


__all__ = [
    "CONDITION_QUERIES",
    "GoldenQuery",
    "get_all_golden_queries",
    "get_query_by_id",
]
