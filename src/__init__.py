"""
Module chứa các thành phần cốt lõi của trợ lý hỏi đáp sức khỏe HealthForumQA.

Các module con:
- ingest: Nạp kho hỏi đáp y tế từ file JSON
- preprocess: Chuẩn hóa, tách từ và mở rộng từ đồng nghĩa
- retriever: Chấm điểm và xếp hạng tài liệu
- assistant: Tạo câu trả lời, gợi ý câu hỏi, thống kê
- utils: Logging và đánh giá truy xuất
"""

__version__ = "1.0.0"
