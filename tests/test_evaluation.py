"""Tests for retrieval evaluation metrics."""

import pytest

from src.utils.evaluation import (
    calc_precision_at_k,
    calc_recall_at_k,
    calc_reciprocal_rank,
    evaluate_retrieval,
)
from tests.conftest import make_doc

DOCS = [make_doc(doc_id, f"q{doc_id}", f"a{doc_id}") for doc_id in ("a", "b", "c")]


class TestMetrics:
    def test_recall_at_k(self):
        assert calc_recall_at_k(DOCS, ["b", "z"], k=1) == 0.0
        assert calc_recall_at_k(DOCS, ["b", "z"], k=2) == 0.5

    def test_precision_at_k(self):
        assert calc_precision_at_k(DOCS, ["a", "c"], k=2) == 0.5
        assert calc_precision_at_k(DOCS, ["a", "c"]) == pytest.approx(2 / 3)

    def test_empty_results(self):
        assert calc_recall_at_k([], ["a"], k=3) == 0.0
        assert calc_precision_at_k([], ["a"], k=3) == 0.0

    def test_reciprocal_rank(self):
        assert calc_reciprocal_rank(DOCS, ["c"]) == pytest.approx(1 / 3)
        assert calc_reciprocal_rank(DOCS, ["z"]) == 0.0


class TestEvaluateRetrieval:
    def test_summary(self):
        queries = [
            {"query": "q1", "retrieved_docs": DOCS, "relevant_doc_ids": ["a"]},
            {"query": "q2", "retrieved_docs": [], "relevant_doc_ids": ["b"]},
            {"query": "q3", "retrieved_docs": DOCS, "relevant_doc_ids": []},
        ]
        summary = evaluate_retrieval(queries, k_values=[1, 3])

        assert summary["num_queries"] == 2
        assert summary["recall@k"] == {1: 0.5, 3: 0.5}
        assert summary["mrr"] == 0.5

    def test_no_queries(self):
        summary = evaluate_retrieval([], k_values=[1])
        assert summary == {"num_queries": 0, "recall@k": {1: 0.0}, "precision@k": {1: 0.0}, "mrr": 0.0}
