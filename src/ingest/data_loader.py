"""
Module quản lý việc tải và đọc kho dữ liệu hỏi đáp y tế cho hệ thống HealthForumQA.
"""

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, List, Union


@dataclass(frozen=True)
class MedicalDocument:
    """Một cặp hỏi/đáp y tế trong kho dữ liệu (chỉ đọc)."""

    doc_id: str
    question_vi: str
    answer_vi: str
    source: str = ""
    question_en: str = ""
    answer_en: str = ""
    qid: str = ""
    pid: str = ""

    def to_dict(self) -> Dict[str, str]:
        """Dạng công khai của tài liệu, trả về cho client."""
        return {
            "doc_id": self.doc_id,
            "question_vi": self.question_vi,
            "answer_vi": self.answer_vi,
            "source": self.source,
        }


_FIELD_NAMES = [f.name for f in fields(MedicalDocument)]
_REQUIRED_FIELDS = ("question_vi", "answer_vi")


def load_json_data(file_path: Union[str, Path]) -> List[Dict[str, Any]]:
    """
    Tải dữ liệu từ file JSON.

    Args:
        file_path: Đường dẫn đến file JSON

    Returns:
        Danh sách các bản ghi đã tải, hoặc danh sách rỗng nếu file lỗi
    """
    file_path = Path(file_path)
    if not file_path.exists():
        logging.error(f"Không tìm thấy file: {file_path}")
        return []

    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            raw_data = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logging.error(f"Lỗi khi đọc file {file_path}: {e}")
        return []

    if not raw_data.strip():
        logging.error(f"Lỗi: File {file_path} rỗng.")
        return []

    try:
        data = json.loads(raw_data)
    except json.JSONDecodeError as e:
        logging.error(f"Lỗi: File {file_path} không phải là định dạng JSON hợp lệ. {e}")
        return []
    except (RecursionError, MemoryError) as e:
        logging.error(f"Lỗi: File {file_path} lồng quá sâu hoặc quá lớn để đọc. {e!r}")
        return []

    if not isinstance(data, list):
        logging.error(f"Lỗi: File {file_path} không chứa một danh sách JSON.")
        return []

    logging.info(f"Đã tải thành công {len(data)} bản ghi từ {file_path}")
    return data


def to_medical_document(record: Dict[str, Any]) -> MedicalDocument:
    values = {}
    for name in _FIELD_NAMES:
        value = record.get(name, "")
        values[name] = "" if value is None else str(value)
    return MedicalDocument(**values)


def load_medical_documents(file_path: Union[str, Path]) -> List[MedicalDocument]:
    """
    Tải kho dữ liệu hỏi đáp y tế thành danh sách MedicalDocument.

    Bản ghi không phải object hoặc thiếu trường question_vi/answer_vi dạng chuỗi
    sẽ bị bỏ qua. Thứ tự các bản ghi hợp lệ được giữ nguyên.

    Args:
        file_path: Đường dẫn đến file JSON

    Returns:
        Danh sách tài liệu, rỗng nếu không tải được file
    """
    documents = []
    skipped = 0

    for index, record in enumerate(load_json_data(file_path)):
        if not isinstance(record, dict) or not all(
            isinstance(record.get(name), str) for name in _REQUIRED_FIELDS
        ):
            logging.warning(f"Bỏ qua bản ghi #{index} không hợp lệ trong {file_path}")
            skipped += 1
            continue
        documents.append(to_medical_document(record))

    if skipped:
        logging.warning(f"Đã bỏ qua {skipped} bản ghi không hợp lệ.")
    logging.info(f"Kho dữ liệu có {len(documents)} tài liệu y tế.")
    return documents
