"""
Seed data for the retrieval system.

Keeping the built-in collection apart from the engine means tests and
demos can run without a dataset file.
"""

from medibot.retrieval.seeds.medical_conditions import get_medical_documents

__all__ = ["get_medical_documents"]
