"""
Module chuẩn hóa và tách từ câu hỏi tiếng Việt cho hệ thống HealthForumQA.
"""

import re
import unicodedata
from typing import List, Optional

from .vocabulary import TextResources, default_resources

_PUNCTUATION_PATTERN = re.compile(r"[?.,!;:()]")
_WHITESPACE_PATTERN = re.compile(r"\s+")


def _is_combining_mark(c: str) -> bool:
    # U+034F (grapheme joiner) nằm trong khối dấu kết hợp nhưng combining() == 0
    return bool(unicodedata.combining(c)) or '\u0300' <= c <= '\u036f'


def normalize_text(text: str) -> str:
    """
    Chuẩn hóa văn bản để so khớp:
    - Bỏ dấu tiếng Việt (tách NFD rồi loại các dấu kết hợp, "đ" -> "d")
    - Thay các dấu câu ? . , ! ; : ( ) bằng khoảng trắng
    - Gộp khoảng trắng liên tiếp, cắt khoảng trắng hai đầu
    - Chuyển về chữ thường

    Ví dụ:
        "Triệu chứng của bệnh Tiểu đường?" -> "trieu chung cua benh tieu duong"
    """
    if not text:
        return ""

    # Chuyển chữ thường trước khi tách dấu (vd. "İ".lower() sinh thêm dấu kết hợp)
    text = unicodedata.normalize('NFD', text.lower())
    text = ''.join(c for c in text if not _is_combining_mark(c))
    text = text.replace('đ', 'd')

    text = _PUNCTUATION_PATTERN.sub(' ', text)
    return _WHITESPACE_PATTERN.sub(' ', text).strip()


def tokenize(text: str, resources: Optional[TextResources] = None) -> List[str]:
    """
    Tách văn bản thành các token đã chuẩn hóa và mở rộng bằng từ đồng nghĩa.

    Token có độ dài <= 1 và hư từ bị loại. Với mỗi token còn lại, nếu token
    trùng, chứa hoặc nằm trong một khóa đồng nghĩa thì các từ đồng nghĩa của
    khóa đó được nối thêm vào cuối (không lặp lại token đã có). Việc mở rộng
    chỉ thực hiện một lượt trên các token gốc.

    Args:
        text: Văn bản cần tách từ
        resources: Bộ từ vựng (mặc định là bộ tiếng Việt)

    Returns:
        Danh sách token: token gốc trước, token mở rộng sau
    """
    resources = resources or default_resources()

    words = [
        word for word in normalize_text(text).split()
        if len(word) > 1 and word not in resources.stop_words
    ]

    expanded = list(words)
    seen = set(expanded)
    for word in words:
        for key, synonym_words in resources.normalized_synonyms:
            if word == key or key in word or word in key:
                for synonym in synonym_words:
                    if len(synonym) > 1 and synonym not in seen:
                        expanded.append(synonym)
                        seen.add(synonym)

    return expanded


def extract_phrases(normalized_text: str) -> List[str]:
    """
    Tạo các cụm 2 từ và 3 từ liên tiếp từ văn bản đã chuẩn hóa.

    Trả về toàn bộ cụm 2 từ theo thứ tự trái sang phải, tiếp theo là toàn bộ
    cụm 3 từ. Văn bản có ít hơn 2 từ cho kết quả rỗng.
    """
    words = [w for w in normalized_text.split() if len(w) > 1]

    bigrams = [f"{words[i]} {words[i + 1]}" for i in range(len(words) - 1)]
    trigrams = [f"{words[i]} {words[i + 1]} {words[i + 2]}" for i in range(len(words) - 2)]
    return bigrams + trigrams
