"""
Script đánh giá bộ truy xuất từ khóa trên chính kho hỏi đáp y tế.

Mỗi câu hỏi trong kho được dùng làm truy vấn (nguyên văn và dạng không dấu),
tài liệu gốc của nó là ground truth.
"""

import argparse
import logging
from pathlib import Path

import pandas as pd
from tabulate import tabulate

from src import config
from src.assistant import MedicalAssistant
from src.preprocess import normalize_text
from src.utils.evaluation import evaluate_retrieval
from src.utils.logging_utils import setup_logging


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description='Đánh giá bộ truy xuất hỏi đáp y tế.')
    parser.add_argument('--data_path', default=str(config.MEDICAL_DATA_PATH),
                        help='Đường dẫn đến file JSON kho hỏi đáp')
    parser.add_argument('--k_values', type=int, nargs='+', default=[1, 3, 5],
                        help='Các giá trị k cần đánh giá')
    parser.add_argument('--max_queries', type=int, default=None,
                        help='Giới hạn số câu hỏi dùng để đánh giá')
    parser.add_argument('--output_dir', default=str(config.EVALUATION_DIR),
                        help='Thư mục lưu kết quả đánh giá')
    return parser.parse_args()


def build_queries(assistant, k, max_queries=None, strip_diacritics=False):
    """Truy vấn từng câu hỏi trong kho, trả về danh sách cho evaluate_retrieval."""
    documents = assistant.documents[:max_queries] if max_queries else assistant.documents
    queries = []
    for doc in documents:
        query = normalize_text(doc.question_vi) if strip_diacritics else doc.question_vi
        queries.append({
            "query": query,
            "retrieved_docs": assistant.search_relevant_docs(query, limit=k),
            "relevant_doc_ids": [doc.doc_id],
        })
    return queries


def main():
    args = parse_args()
    setup_logging(log_level=logging.WARNING)

    assistant = MedicalAssistant.from_file(args.data_path)
    if not assistant.is_ready:
        print(f"Không có dữ liệu để đánh giá tại: {args.data_path}")
        return

    k_values = sorted(set(args.k_values))
    print(f"Đánh giá trên {len(assistant)} tài liệu, k = {k_values}")

    summaries = {}
    for label, strip in (("Có dấu", False), ("Không dấu", True)):
        queries = build_queries(assistant, max(k_values), args.max_queries, strip_diacritics=strip)
        summaries[label] = evaluate_retrieval(queries, k_values)

    rows = []
    for k in k_values:
        rows.append([
            k,
            *(summaries[label]["recall@k"][k] for label in summaries),
            *(summaries[label]["precision@k"][k] for label in summaries),
        ])
    columns = ['k'] + [f"Recall ({label})" for label in summaries] + [f"Precision ({label})" for label in summaries]
    metrics_df = pd.DataFrame(rows, columns=columns)

    print("\n=== Recall@k / Precision@k ===")
    print(tabulate(metrics_df, headers='keys', tablefmt='pretty', floatfmt='.4f', showindex=False))

    mrr_df = pd.DataFrame(
        [[label, summary["num_queries"], summary["mrr"]] for label, summary in summaries.items()],
        columns=['Truy vấn', 'Số câu hỏi', 'MRR']
    )
    print("\n=== MRR ===")
    print(tabulate(mrr_df, headers='keys', tablefmt='pretty', floatfmt='.4f', showindex=False))

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    metrics_df.to_csv(output_dir / "retrieval_metrics.csv", index=False)
    mrr_df.to_csv(output_dir / "retrieval_mrr.csv", index=False)
    print(f"\nĐã lưu kết quả đánh giá vào thư mục {output_dir}")


if __name__ == "__main__":
    main()
