"""Tests for document ranking, thresholding and retrieval."""

import pytest

from src.retriever import keyword_retriever
from src.retriever.keyword_retriever import score_documents, search_relevant_docs
from src.preprocess import default_resources
from tests.conftest import make_doc


def fixed_scorer(scores):
    """Scorer gia lap: tra ve diem co dinh theo noi dung van ban."""
    def _score(question, text, resources):
        return scores.get(text, 0.0)
    return _score


@pytest.fixture
def three_docs():
    return [
        make_doc("low", "q-low", "a-low"),
        make_doc("high", "q-high", "a-high"),
        make_doc("mid", "q-mid", "a-mid"),
    ]


class TestConstants:
    def test_weights_and_threshold_are_pinned(self):
        assert keyword_retriever.QUESTION_WEIGHT == 2.0
        assert keyword_retriever.ANSWER_WEIGHT == 0.3
        assert keyword_retriever.SCORE_THRESHOLD == 0.1


class TestScoreDocuments:
    def test_combines_question_and_answer_scores(self):
        docs = [make_doc("x", "q", "a")]
        candidates = score_documents("?", docs, default_resources(), fixed_scorer({"q": 0.5, "a": 1.0}))
        assert candidates[0].document is docs[0]
        assert candidates[0].score == pytest.approx(0.5 * 2.0 + 1.0 * 0.3)

    def test_keeps_corpus_order(self, three_docs):
        candidates = score_documents("?", three_docs, default_resources(), fixed_scorer({}))
        assert [c.document.doc_id for c in candidates] == ["low", "high", "mid"]


class TestSearchRelevantDocs:
    def test_descending_order(self, three_docs):
        scorer = fixed_scorer({"q-high": 0.9, "q-mid": 0.5, "q-low": 0.2})
        results = search_relevant_docs("?", three_docs, limit=3, scorer=scorer)
        assert [d.doc_id for d in results] == ["high", "mid", "low"]

    def test_respects_limit(self, three_docs):
        scorer = fixed_scorer({"q-high": 0.9, "q-mid": 0.5, "q-low": 0.2})
        results = search_relevant_docs("?", three_docs, limit=1, scorer=scorer)
        assert [d.doc_id for d in results] == ["high"]

    def test_score_at_threshold_is_excluded(self):
        docs = [make_doc("edge", "q-edge", "a-edge")]
        results = search_relevant_docs("?", docs, scorer=fixed_scorer({"q-edge": 0.05}))
        assert results == []

    def test_score_just_above_threshold_is_included(self):
        docs = [make_doc("edge", "q-edge", "a-edge")]
        results = search_relevant_docs("?", docs, scorer=fixed_scorer({"q-edge": 0.051}))
        assert [d.doc_id for d in results] == ["edge"]

    def test_ties_keep_corpus_order(self):
        docs = [make_doc(str(i), f"q{i}", f"a{i}") for i in range(4)]
        scorer = fixed_scorer({"q0": 0.3, "q1": 0.7, "q2": 0.3, "q3": 0.7})
        results = search_relevant_docs("?", docs, limit=4, scorer=scorer)
        assert [d.doc_id for d in results] == ["1", "3", "0", "2"]

    def test_empty_corpus(self):
        assert search_relevant_docs("tiểu đường", [], limit=5) == []

    def test_invalid_limit(self, three_docs):
        with pytest.raises(ValueError):
            search_relevant_docs("tiểu đường", three_docs, limit=0)

    def test_stop_word_query_returns_nothing(self, diabetes_doc, topic_corpus):
        assert search_relevant_docs("là và của", [diabetes_doc, *topic_corpus]) == []

    def test_finds_matching_question(self, diabetes_doc, topic_corpus):
        corpus = [*topic_corpus, diabetes_doc]
        results = search_relevant_docs("tiểu đường có triệu chứng gì", corpus, limit=1)
        assert results == [diabetes_doc]

    def test_does_not_mutate_corpus(self, three_docs):
        snapshot = list(three_docs)
        search_relevant_docs("?", three_docs, scorer=fixed_scorer({"q-mid": 1.0}))
        assert three_docs == snapshot
