"""
Module truy xuất và xếp hạng tài liệu hỏi đáp y tế theo từ khóa.
"""

import logging
from typing import Callable, List, NamedTuple, Optional, Sequence

from ..ingest.data_loader import MedicalDocument
from ..preprocess.text_processor import tokenize
from ..preprocess.vocabulary import TextResources, default_resources
from .scorer import calculate_similarity

# Trường câu hỏi được coi trọng hơn trường câu trả lời
QUESTION_WEIGHT = 2.0
ANSWER_WEIGHT = 0.3
# Ngưỡng cứng: chỉ giữ tài liệu có điểm tổng > 0.1
SCORE_THRESHOLD = 0.1

Scorer = Callable[[str, str, TextResources], float]


class ScoredCandidate(NamedTuple):
    document: MedicalDocument
    score: float


def score_documents(
    question: str,
    documents: Sequence[MedicalDocument],
    resources: TextResources,
    scorer: Scorer = calculate_similarity
) -> List[ScoredCandidate]:
    """Tính điểm tổng cho từng tài liệu, giữ nguyên thứ tự trong kho."""
    return [
        ScoredCandidate(
            document=doc,
            score=(
                scorer(question, doc.question_vi, resources) * QUESTION_WEIGHT
                + scorer(question, doc.answer_vi, resources) * ANSWER_WEIGHT
            ),
        )
        for doc in documents
    ]


def rank_candidates(candidates: List[ScoredCandidate]) -> List[ScoredCandidate]:
    """Sắp xếp giảm dần theo điểm; sorted() ổn định nên điểm bằng nhau giữ thứ tự kho."""
    return sorted(candidates, key=lambda c: c.score, reverse=True)


def search_relevant_docs(
    question: str,
    documents: Sequence[MedicalDocument],
    limit: int = 5,
    resources: Optional[TextResources] = None,
    scorer: Optional[Scorer] = None
) -> List[MedicalDocument]:
    """
    Tìm các tài liệu liên quan nhất tới câu hỏi.

    Args:
        question: Câu hỏi của người dùng
        documents: Kho tài liệu (chỉ đọc)
        limit: Số lượng kết quả tối đa (>= 1)
        resources: Bộ từ vựng (mặc định là bộ tiếng Việt)
        scorer: Hàm chấm điểm (mặc định là calculate_similarity)

    Returns:
        Danh sách tài liệu, liên quan nhất đứng đầu
    """
    if limit < 1:
        raise ValueError(f"limit phải >= 1, nhận được {limit}")

    resources = resources or default_resources()
    scorer = scorer or calculate_similarity

    logging.info(f"Tìm kiếm: '{question}' trên {len(documents)} tài liệu")
    if not documents:
        logging.warning("Kho dữ liệu rỗng, không có tài liệu để tìm kiếm.")
        return []

    logging.debug(f"Tokens: {tokenize(question, resources)}")

    ranked = rank_candidates(score_documents(question, documents, resources, scorer))
    results = [c for c in ranked if c.score > SCORE_THRESHOLD]

    logging.info(f"Tìm thấy {len(results)} kết quả vượt ngưỡng {SCORE_THRESHOLD}")
    if results:
        for i, candidate in enumerate(results[:3]):
            logging.debug(
                f"  {i + 1}. [{candidate.score:.3f}] {candidate.document.question_vi[:70]}"
            )
    else:
        for i, candidate in enumerate(ranked[:5]):
            logging.debug(
                f"  {i + 1}. [{candidate.score:.4f}] {candidate.document.question_vi[:60]} (dưới ngưỡng)"
            )

    return [c.document for c in results[:limit]]
