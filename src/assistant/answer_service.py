"""
Trợ lý hỏi đáp y tế: tạo câu trả lời, gợi ý câu hỏi và thống kê kho dữ liệu.
"""

import logging
import random
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from ..ingest.data_loader import MedicalDocument, load_medical_documents
from ..preprocess.vocabulary import TextResources, default_resources
from ..retriever.keyword_retriever import Scorer, search_relevant_docs

CONFIDENCE_HIGH = "high"
CONFIDENCE_LOW = "low"

NO_MATCH_ANSWER = (
    'Xin lỗi, tôi không tìm thấy thông tin phù hợp với câu hỏi của bạn. \n\n'
    'Gợi ý:\n'
    '- Hãy thử diễn đạt câu hỏi khác đi\n'
    '- Sử dụng các từ khóa y tế thông dụng\n'
    '- Đặt câu hỏi cụ thể hơn\n\n'
    'Ví dụ: "Triệu chứng của bệnh tiểu đường?", "Cách điều trị cao huyết áp?"\n\n'
    'Nếu cần tư vấn cụ thể, vui lòng tham khảo ý kiến bác sĩ chuyên khoa.'
)

DISCLAIMER_SUFFIX = (
    '\n\n---\n**Lưu ý:** Thông tin trên chỉ mang tính tham khảo. '
    'Hãy tham khảo ý kiến bác sĩ để được chẩn đoán và điều trị chính xác.'
)


class MedicalAssistant:
    """
    Trợ lý trả lời câu hỏi sức khỏe dựa trên kho hỏi đáp tĩnh.

    Kho dữ liệu được nạp một lần khi khởi tạo và không thay đổi sau đó, nên
    các phương thức có thể được gọi đồng thời mà không cần khóa.

    Args:
        documents: Kho tài liệu hỏi đáp
        resources: Bộ từ vựng (mặc định là bộ tiếng Việt)
        rng: Nguồn ngẫu nhiên cho gợi ý câu hỏi (mặc định không cố định seed)
        scorer: Hàm chấm điểm thay thế, dùng cho kiểm thử
    """

    def __init__(
        self,
        documents: Sequence[MedicalDocument],
        resources: Optional[TextResources] = None,
        rng: Optional[random.Random] = None,
        scorer: Optional[Scorer] = None
    ):
        self._documents = tuple(documents)
        self._resources = resources or default_resources()
        self._rng = rng or random.Random()
        self._scorer = scorer

    @classmethod
    def from_file(cls, data_path: Union[str, Path], **kwargs) -> "MedicalAssistant":
        """Nạp kho dữ liệu từ file JSON; file lỗi cho ra trợ lý với kho rỗng."""
        documents = load_medical_documents(data_path)
        if not documents:
            logging.error(
                f"Không tải được dữ liệu y tế từ {data_path}. "
                "Mọi câu hỏi sẽ nhận câu trả lời mặc định."
            )
        return cls(documents, **kwargs)

    @property
    def documents(self) -> Sequence[MedicalDocument]:
        return self._documents

    @property
    def is_ready(self) -> bool:
        return bool(self._documents)

    def __len__(self) -> int:
        return len(self._documents)

    def search_relevant_docs(self, question: str, limit: int = 5) -> List[MedicalDocument]:
        return search_relevant_docs(
            question,
            self._documents,
            limit=limit,
            resources=self._resources,
            scorer=self._scorer,
        )

    def generate_answer(self, question: str) -> Dict[str, Any]:
        """
        Tạo câu trả lời cho câu hỏi của người dùng.

        Returns:
            Dict gồm 'answer', 'relevantDocs' và 'confidence' ("high"/"low")
        """
        relevant_docs = self.search_relevant_docs(question, limit=1)

        if not relevant_docs:
            return {
                "answer": NO_MATCH_ANSWER,
                "relevantDocs": [],
                "confidence": CONFIDENCE_LOW,
            }

        best_doc = relevant_docs[0]
        return {
            "answer": f"{best_doc.answer_vi}{DISCLAIMER_SUFFIX}",
            "relevantDocs": [doc.to_dict() for doc in relevant_docs],
            "confidence": CONFIDENCE_HIGH,
        }

    def get_suggested_questions(self, topic: Optional[str] = None, limit: int = 6) -> List[str]:
        """
        Lấy ngẫu nhiên các câu hỏi gợi ý, có thể lọc theo chủ đề.

        Chủ đề được so khớp chuỗi con không phân biệt hoa thường trên câu hỏi
        và câu trả lời. Mỗi lần gọi cho ra một mẫu ngẫu nhiên khác nhau.
        """
        candidates = list(self._documents)
        if topic:
            topic_lower = topic.lower()
            candidates = [
                doc for doc in candidates
                if topic_lower in doc.question_vi.lower() or topic_lower in doc.answer_vi.lower()
            ]

        self._rng.shuffle(candidates)
        return [doc.question_vi for doc in candidates[:max(limit, 0)]]

    def get_statistics(self) -> Dict[str, Any]:
        return {
            "totalDocs": len(self._documents),
            "sources": {doc.source for doc in self._documents},
            "categories": self._category_stats(),
        }

    def _category_stats(self) -> Dict[str, int]:
        stats = {}
        for category, keywords in self._resources.category_keywords.items():
            stats[category] = sum(
                1 for doc in self._documents
                if any(
                    keyword in doc.question_vi.lower() or keyword in doc.answer_vi.lower()
                    for keyword in keywords
                )
            )
        return stats
