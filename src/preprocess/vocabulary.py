"""
Bộ từ vựng cố định dùng cho tiền xử lý và chấm điểm câu hỏi tiếng Việt.

Các bảng từ được gom trong TextResources và truyền tường minh vào
tokenizer/scorer, nhờ đó có thể dùng song song nhiều bộ từ vựng khác nhau.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, FrozenSet, Mapping, Optional, Tuple

# Hư từ bị loại khi so khớp (dạng đã bỏ dấu)
DEFAULT_STOP_WORDS = frozenset([
    'cua', 'la', 'va', 'khong', 'nhu', 'thi', 'hay', 'ma', 'nao', 'mot',
    'duoc', 'den', 'trong', 'theo', 'neu', 've', 'voi', 'cho', 'boi',
    'tren', 'sau', 'truoc',
])

# Từ khóa gốc (có dấu) -> các cụm từ đồng nghĩa
DEFAULT_SYNONYMS: Dict[str, Tuple[str, ...]] = {
    'đau': ('đau đớn', 'đau đầu', 'nhức', 'mỏi'),
    'bệnh': ('triệu chứng', 'bệnh tật', 'chứng', 'rối loạn'),
    'tiểu đường': ('đường huyết', 'tiểu đường', 'đái tháo đường'),
    'tim': ('tim mạch', 'trái tim', 'tế bào tim'),
    'huyết áp': ('huyết áp', 'áp huyết', 'hạt huyết'),
    'ung thư': ('ung thư', 'cancer', 'ung', 'khối u'),
    'giảm': ('giảm đau', 'hạ', 'trừ', 'bớt'),
    'cách': ('phương pháp', 'cách thức', 'biện pháp'),
    'điều trị': ('chữa trị', 'trị liệu', 'chữa bệnh', 'điều trị'),
    'chuẩn đoán': ('phát hiện', 'xác định', 'khám'),
    'phòng ngừa': ('phòng tránh', 'tránh', 'ngăn ngừa'),
    'cảm': ('cảm lạnh', 'cảm cúm', 'viêm đường hô hấp', 'cúm'),
    'lâu': ('bao lâu', 'kéo dài', 'thời gian'),
    'ho': ('ho khan', 'ho đàm', 'ho lâu ngày'),
}

# Từ khóa chủ đề: văn bản chứa từ khóa mà câu hỏi không nhắc tới sẽ bị phạt
DEFAULT_PENALTY_KEYWORDS = (
    'trieu chung', 'chan doan', 'dieu tri', 'cach chua', 'nguyen nhan', 'phong ngua',
)

# Nhóm chuyên khoa dùng cho thống kê (so khớp chữ thường, giữ dấu)
DEFAULT_CATEGORY_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    'Tim mạch': ('tim', 'mạch máu', 'huyết áp', 'cholesterol'),
    'Ung thư': ('ung thư', 'cancer', 'lymphoma', 'leukemia'),
    'Tiểu đường': ('tiểu đường', 'đường huyết', 'insulin'),
    'Thần kinh': ('thần kinh', 'não', 'đau đầu'),
    'Xương khớp': ('xương', 'khớp', 'viêm khớp'),
    'Hô hấp': ('phổi', 'hô hấp', 'hen', 'ho'),
    'Tiêu hóa': ('dạ dày', 'ruột', 'gan', 'tiêu hóa'),
}


@dataclass(frozen=True)
class TextResources:
    """Từ dừng, bảng đồng nghĩa và các danh sách từ khóa cố định."""

    stop_words: FrozenSet[str] = DEFAULT_STOP_WORDS
    synonyms: Mapping[str, Tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType(dict(DEFAULT_SYNONYMS))
    )
    penalty_keywords: Tuple[str, ...] = DEFAULT_PENALTY_KEYWORDS
    category_keywords: Mapping[str, Tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType(dict(DEFAULT_CATEGORY_KEYWORDS))
    )
    # Khóa đồng nghĩa đã chuẩn hóa -> các từ đơn đã chuẩn hóa, tính sẵn một lần
    normalized_synonyms: Tuple[Tuple[str, Tuple[str, ...]], ...] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self):
        # Import trễ để tránh vòng lặp import với text_processor
        from .text_processor import normalize_text

        table = []
        for key, phrases in self.synonyms.items():
            words = tuple(
                normalize_text(word)
                for phrase in phrases
                for word in phrase.split()
            )
            table.append((normalize_text(key), words))
        object.__setattr__(self, 'normalized_synonyms', tuple(table))


_DEFAULT_RESOURCES: Optional[TextResources] = None


def default_resources() -> TextResources:
    """Bộ từ vựng tiếng Việt mặc định (khởi tạo một lần, dùng chung vì bất biến)."""
    global _DEFAULT_RESOURCES
    if _DEFAULT_RESOURCES is None:
        _DEFAULT_RESOURCES = TextResources()
    return _DEFAULT_RESOURCES
