"""
Module cung cấp các hàm đánh giá chất lượng truy xuất cho hệ thống HealthForumQA.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

import numpy as np

from ..ingest.data_loader import MedicalDocument


def _top_k_ids(retrieved_docs: Sequence[MedicalDocument], k: Optional[int]) -> List[str]:
    if k is None:
        k = len(retrieved_docs)
    return [doc.doc_id for doc in retrieved_docs[:k]]


def calc_recall_at_k(
    retrieved_docs: Sequence[MedicalDocument],
    relevant_doc_ids: Sequence[str],
    k: Optional[int] = None
) -> float:
    """
    Tính toán Recall@k cho các kết quả truy vấn.

    Args:
        retrieved_docs: Danh sách các tài liệu đã truy xuất, theo thứ tự xếp hạng
        relevant_doc_ids: Danh sách các doc_id được coi là liên quan
        k: Số lượng kết quả đầu tiên để đánh giá (mặc định là toàn bộ)

    Returns:
        Giá trị Recall@k từ 0 đến 1
    """
    relevant_ids_set = set(relevant_doc_ids)
    if not retrieved_docs or not relevant_ids_set:
        return 0.0

    found_relevant = set(_top_k_ids(retrieved_docs, k)) & relevant_ids_set
    return len(found_relevant) / len(relevant_ids_set)


def calc_precision_at_k(
    retrieved_docs: Sequence[MedicalDocument],
    relevant_doc_ids: Sequence[str],
    k: Optional[int] = None
) -> float:
    """
    Tính toán Precision@k cho các kết quả truy vấn.

    Khi số tài liệu truy xuất ít hơn k, mẫu số là số tài liệu thực tế.

    Returns:
        Giá trị Precision@k từ 0 đến 1
    """
    if not retrieved_docs:
        return 0.0

    top_ids = _top_k_ids(retrieved_docs, k)
    relevant_ids_set = set(relevant_doc_ids)
    num_found = sum(1 for doc_id in top_ids if doc_id in relevant_ids_set)
    return num_found / len(top_ids) if top_ids else 0.0


def calc_reciprocal_rank(
    retrieved_docs: Sequence[MedicalDocument],
    relevant_doc_ids: Sequence[str]
) -> float:
    """Nghịch đảo thứ hạng của tài liệu liên quan đầu tiên (0 nếu không có)."""
    relevant_ids_set = set(relevant_doc_ids)
    for rank, doc in enumerate(retrieved_docs, start=1):
        if doc.doc_id in relevant_ids_set:
            return 1.0 / rank
    return 0.0


def evaluate_retrieval(
    queries_with_results: List[Dict[str, Any]],
    k_values: Sequence[int] = (1, 3, 5)
) -> Dict[str, Any]:
    """
    Đánh giá hiệu suất của bộ truy xuất trên nhiều câu hỏi.

    Args:
        queries_with_results: Mỗi phần tử có các khóa 'query', 'retrieved_docs'
                              và 'relevant_doc_ids'
        k_values: Các giá trị k để tính metric

    Returns:
        Dict gồm 'num_queries', 'recall@k', 'precision@k' (theo từng k) và 'mrr'
    """
    recalls: Dict[int, List[float]] = {k: [] for k in k_values}
    precisions: Dict[int, List[float]] = {k: [] for k in k_values}
    reciprocal_ranks: List[float] = []

    for query_result in queries_with_results:
        retrieved_docs = query_result.get("retrieved_docs", [])
        relevant_doc_ids = query_result.get("relevant_doc_ids", [])

        if not relevant_doc_ids:
            logging.warning(f"Bỏ qua câu hỏi không có ground truth: '{query_result.get('query', '')}'")
            continue

        for k in k_values:
            recalls[k].append(calc_recall_at_k(retrieved_docs, relevant_doc_ids, k))
            precisions[k].append(calc_precision_at_k(retrieved_docs, relevant_doc_ids, k))
        reciprocal_ranks.append(calc_reciprocal_rank(retrieved_docs, relevant_doc_ids))

    return {
        "num_queries": len(reciprocal_ranks),
        "recall@k": {k: float(np.mean(v)) if v else 0.0 for k, v in recalls.items()},
        "precision@k": {k: float(np.mean(v)) if v else 0.0 for k, v in precisions.items()},
        "mrr": float(np.mean(reciprocal_ranks)) if reciprocal_ranks else 0.0,
    }
