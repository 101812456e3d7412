import json

import pytest

from src.ingest.data_loader import MedicalDocument


def make_doc(doc_id, question_vi, answer_vi, source="MedQuAD"):
    return MedicalDocument(doc_id=doc_id, question_vi=question_vi, answer_vi=answer_vi, source=source)


@pytest.fixture
def diabetes_doc():
    return make_doc(
        "0001",
        "triệu chứng của bệnh tiểu đường là gì",
        "Triệu chứng gồm khát nước, tiểu nhiều, mệt mỏi.",
        source="NIDDK",
    )


@pytest.fixture
def topic_corpus():
    """5 tài liệu, chỉ 2 tài liệu chứa chuỗi 'tim'."""
    return [
        make_doc("d1", "Bệnh tim mạch là gì?", "Là nhóm bệnh ảnh hưởng đến mạch máu."),
        make_doc("d2", "Đau ngực có nguy hiểm không?", "Có thể do bệnh tim, nên đi khám sớm."),
        make_doc("d3", "Ung thư phổi là gì?", "Là khối u ác tính ở phổi."),
        make_doc("d4", "Cảm lạnh kéo dài bao lâu?", "Thường từ 7 đến 10 ngày."),
        make_doc("d5", "Tiểu đường type 2 là gì?", "Là rối loạn đường huyết mạn."),
    ]


@pytest.fixture
def corpus_file(tmp_path):
    """Ghi danh sách bản ghi ra file JSON tạm và trả về đường dẫn."""
    def _write(records, name="corpus.json"):
        path = tmp_path / name
        path.write_text(json.dumps(records, ensure_ascii=False), encoding="utf-8")
        return path
    return _write
