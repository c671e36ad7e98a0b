"""
Retrieval Quality Eval

Checks that the ranker returns the RIGHT conditions for golden queries.
If retrieval is wrong, the confidence gate and the answer built on top
of it are wrong too.

Retrieval eval catches:
- Stop word or suffix changes that split the vocabulary
- IDF / weighting changes that reorder results
- Relevance floor changes that drop or admit matches

METRICS:
--------
RECALL:    |retrieved ∩ expected| / |expected|
PRECISION: |retrieved ∩ expected| / |retrieved|
F1:        2 * (precision * recall) / (precision + recall)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from medibot.golden_sets import GoldenQuery, get_all_golden_queries

if TYPE_CHECKING:
    from medibot.core import DocumentStore


@dataclass
class RetrievalMetrics:
    """Retrieval quality metrics for a single query."""
    recall: float
    precision: float
    f1_score: float
    retrieved: list[str]
    expected: list[str]
    missing: list[str]
    extra: list[str]


@dataclass
class RetrievalEvalResult:
    """Result of retrieval eval for a single query."""
    query_id: str
    query: str
    passed: bool
    metrics: RetrievalMetrics


@dataclass
class RetrievalEvalReport:
    """Aggregate retrieval eval results."""
    total_cases: int
    passed_cases: int
    failed_cases: int
    avg_recall: float
    avg_precision: float
    avg_f1: float
    threshold: float
    results: list[RetrievalEvalResult]

    @property
    def all_passed(self) -> bool:
        return self.failed_cases == 0


def calculate_retrieval_metrics(
    retrieved: list[str],
    expected: list[str],
) -> RetrievalMetrics:
    """Calculate recall, precision and F1 for one query."""
    retrieved_set = set(retrieved)
    expected_set = set(expected)

    if not expected_set:
        # Nothing should be retrieved
        return RetrievalMetrics(
            recall=1.0,
            precision=1.0 if not retrieved_set else 0.0,
            f1_score=1.0 if not retrieved_set else 0.0,
            retrieved=retrieved,
            expected=expected,
            missing=[],
            extra=sorted(retrieved_set),
        )

    overlap = retrieved_set & expected_set
    recall = len(overlap) / len(expected_set)
    precision = len(overlap) / len(retrieved_set) if retrieved_set else 0.0

    if precision + recall > 0:
        f1 = 2 * (precision * recall) / (precision + recall)
    else:
        f1 = 0.0

    return RetrievalMetrics(
        recall=recall,
        precision=precision,
        f1_score=f1,
        retrieved=retrieved,
        expected=expected,
        missing=sorted(expected_set - retrieved_set),
        extra=sorted(retrieved_set - expected_set),
    )


def run_retrieval_eval(
    queries: list[GoldenQuery] | None = None,
    store: DocumentStore | None = None,
    top_k: int = 3,
    threshold: float = 0.8,
    verbose: bool = False,
) -> RetrievalEvalReport:
    """
    Run retrieval eval on golden queries.

    Args:
        queries: Queries to evaluate. Defaults to all golden queries.
        store: Store to search. Defaults to a KnowledgeBase over the seed documents.
        top_k: Matches retrieved per query.
        threshold: Minimum F1 score to pass.
        verbose: Print progress.
    """
    if store is None:
        from medibot.retrieval import get_store

        store = get_store("tfidf")

    queries = queries if queries is not None else get_all_golden_queries()
    results: list[RetrievalEvalResult] = []

    for golden in queries:
        if verbose:
            print(f"Running retrieval eval: {golden.id}...")

        matches = store.search(golden.query, limit=top_k)
        retrieved = [m.document.name for m in matches]
        metrics = calculate_retrieval_metrics(retrieved, list(golden.expected_conditions))

        results.append(RetrievalEvalResult(
            query_id=golden.id,
            query=golden.query,
            passed=metrics.f1_score >= threshold,
            metrics=metrics,
        ))

    if results:
        avg_recall = sum(r.metrics.recall for r in results) / len(results)
        avg_precision = sum(r.metrics.precision for r in results) / len(results)
        avg_f1 = sum(r.metrics.f1_score for r in results) / len(results)
        passed = sum(1 for r in results if r.passed)
    else:
        avg_recall = avg_precision = avg_f1 = 0.0
        passed = 0

    return RetrievalEvalReport(
        total_cases=len(results),
        passed_cases=passed,
        failed_cases=len(results) - passed,
        avg_recall=avg_recall,
        avg_precision=avg_precision,
        avg_f1=avg_f1,
        threshold=threshold,
        results=results,
    )


def print_retrieval_report(report: RetrievalEvalReport, quiet: bool = False) -> int:
    """Print the report and return the gate's exit code."""
    if not quiet:
        for result in report.results:
            status = "PASS" if result.passed else "FAIL"
            m = result.metrics
            print(f"  [{status}] {result.query_id}: {result.query!r}")
            print(f"        Recall: {m.recall:.2f} | Precision: {m.precision:.2f} | F1: {m.f1_score:.2f}")
            if m.missing:
                print(f"        Missing: {m.missing}")
            if m.extra:
                print(f"        Extra: {m.extra}")

    print("\n" + "-" * 60)
    print(f"Averages: Recall={report.avg_recall:.2f} | "
          f"Precision={report.avg_precision:.2f} | "
          f"F1={report.avg_f1:.2f}")
    print(f"Threshold: {report.threshold} | "
          f"Passed: {report.passed_cases}/{report.total_cases}")

    if report.all_passed:
        print("\n>>> RETRIEVAL EVAL GATE: PASSED <<<")
        return 0
    else:
        print("\n>>> RETRIEVAL EVAL GATE: FAILED <<<")
        return 1
