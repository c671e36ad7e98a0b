"""
Unit Tests for the Similarity Ranker

Covers cosine similarity properties and rank() filtering/ordering.
"""

import pytest

from medibot.retrieval import RELEVANCE_FLOOR, build, cosine_similarity, query_vector, rank
from medibot.retrieval.seeds import get_medical_documents
from medibot.schemas import Document


# ---------------------------------------------------------------------------
# COSINE SIMILARITY
# ---------------------------------------------------------------------------


class TestCosineSimilarity:
    """Test the cosine similarity function."""

    def test_identical_vectors(self):
        v = {"cough": 1.2, "fev": 0.7}
        assert cosine_similarity(v, v) == pytest.approx(1.0)

    def test_disjoint_vectors(self):
        assert cosine_similarity({"cough": 1.0}, {"rash": 2.0}) == 0.0

    def test_zero_magnitude_is_zero(self):
        assert cosine_similarity({}, {"cough": 1.0}) == 0.0
        assert cosine_similarity({"cough": 0.0}, {"cough": 1.0}) == 0.0
        assert cosine_similarity({}, {}) == 0.0

    def test_symmetric(self):
        a = {"cough": 1.3, "fev": 0.4, "rest": 2.2}
        b = {"cough": 0.5, "rash": 1.1, "rest": 0.9}
        assert cosine_similarity(a, b) == cosine_similarity(b, a)

    def test_known_value(self):
        # (1*1) / (sqrt(2) * 1)
        assert cosine_similarity({"a": 1.0, "b": 1.0}, {"a": 1.0}) == pytest.approx(2 ** -0.5)

    def test_bounded(self, small_collection):
        space = build(small_collection)
        for query in ["fever cough", "clinical exam rest", "headache stress triptans"]:
            q = query_vector(query, space)
            for vector in space.vectors:
                assert 0.0 <= cosine_similarity(q, vector) <= 1.0


# ---------------------------------------------------------------------------
# RANK
# ---------------------------------------------------------------------------


class TestRank:
    """Test ranking, filtering and truncation."""

    def test_fever_finds_flu(self, small_collection):
        space = build(small_collection)

        matches = rank("fever", small_collection, space)

        assert len(matches) == 1
        assert matches[0].document.name == "Flu"
        assert matches[0].similarity > RELEVANCE_FLOOR
        assert matches[0].index == 0

    def test_single_document_collection_never_matches(self, flu):
        """All IDF weights are zero when the collection has one document."""
        matches = rank("fever", [flu], build([flu]))
        assert matches == []

    def test_out_of_vocabulary_query(self, small_collection):
        space = build(small_collection)
        assert rank("xyzzyplugh", small_collection, space) == []

    def test_stop_word_query(self, small_collection):
        space = build(small_collection)
        assert rank("the and with your", small_collection, space) == []

    def test_empty_collection(self):
        assert rank("fever", [], build([])) == []

    def test_respects_top_k_and_order(self):
        docs = get_medical_documents()
        space = build(docs)

        for top_k in (1, 2, 3):
            matches = rank("fever cough chest shortness of breath", docs, space, top_k=top_k)
            assert len(matches) <= top_k
            scores = [m.similarity for m in matches]
            assert scores == sorted(scores, reverse=True)

    def test_ties_keep_collection_order(self):
        docs = [
            Document(name="Alpha", symptoms=["wheezing"]),
            Document(name="Alpha", symptoms=["wheezing"]),
            Document(name="Beta", symptoms=["rash"]),
        ]
        matches = rank("wheezing", docs, build(docs))

        assert [m.index for m in matches] == [0, 1]
        assert matches[0].similarity == matches[1].similarity

    def test_rejects_non_positive_top_k(self, small_collection):
        space = build(small_collection)
        with pytest.raises(ValueError):
            rank("fever", small_collection, space, top_k=0)

    def test_unseen_terms_do_not_change_score(self, small_collection):
        space = build(small_collection)

        plain = rank("fever", small_collection, space)
        noisy = rank("fever xyzzyplugh", small_collection, space)

        assert noisy[0].similarity == pytest.approx(plain[0].similarity)
