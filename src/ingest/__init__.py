"""
Module nạp dữ liệu cho hệ thống HealthForumQA.

Các chức năng:
- Đọc kho hỏi đáp y tế từ file JSON
- Chuyển bản ghi thô thành MedicalDocument bất biến
"""

from .data_loader import MedicalDocument, load_json_data, load_medical_documents
