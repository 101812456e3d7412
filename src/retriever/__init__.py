"""
Module truy xuất thông tin cho hệ thống HealthForumQA.

Các chức năng:
- Chấm điểm độ tương đồng giữa câu hỏi và văn bản
- Xếp hạng, lọc theo ngưỡng và trả về các tài liệu phù hợp nhất
"""

from .scorer import calculate_similarity
from .keyword_retriever import ScoredCandidate, score_documents, search_relevant_docs
