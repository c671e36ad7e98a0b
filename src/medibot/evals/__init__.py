"""
Evaluation module - quality gates for the retrieval engine.
"""

from medibot.evals.retrieval_eval import (
    RetrievalEvalReport,
    RetrievalEvalResult,
    RetrievalMetrics,
    calculate_retrieval_metrics,
    print_retrieval_report,
    run_retrieval_eval,
)

__all__ = [
    "RetrievalEvalReport",
    "RetrievalEvalResult",
    "RetrievalMetrics",
    "calculate_retrieval_metrics",
    "print_retrieval_report",
    "run_retrieval_eval",
]
