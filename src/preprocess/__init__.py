"""
Module tiền xử lý văn bản cho hệ thống HealthForumQA.

Các chức năng:
- Chuẩn hóa văn bản tiếng Việt (bỏ dấu, dấu câu, chữ thường)
- Tách từ, loại hư từ và mở rộng từ đồng nghĩa
- Trích xuất cụm từ (2-3 từ) để so khớp chính xác
"""

from .text_processor import (
    normalize_text,
    tokenize,
    extract_phrases
)

from .vocabulary import TextResources, default_resources
