"""
Module chấm điểm độ tương đồng giữa câu hỏi và một đoạn văn bản ứng viên.
"""

from typing import List, Optional

from ..preprocess.text_processor import extract_phrases, normalize_text, tokenize
from ..preprocess.vocabulary import TextResources, default_resources

PHRASE_WEIGHT = 2.0
EXACT_MATCH_WEIGHT = 1.0
PARTIAL_MATCH_WEIGHT = 0.5
KEYWORD_PENALTY = 0.5
MIN_PARTIAL_LENGTH = 2


def keyword_penalty(question_normalized: str, text_normalized: str, keywords) -> float:
    """Nhân 0.5 cho mỗi từ khóa chủ đề có trong văn bản nhưng không có trong câu hỏi."""
    penalty = 1.0
    for keyword in keywords:
        if keyword in text_normalized and keyword not in question_normalized:
            penalty *= KEYWORD_PENALTY
    return penalty


def phrase_score(question_normalized: str, text_normalized: str) -> float:
    phrases = extract_phrases(question_normalized)
    if not phrases:
        return 0.0
    matches = sum(1 for phrase in phrases if phrase in text_normalized)
    return matches / len(phrases) * PHRASE_WEIGHT


def _is_partial_match(question_word: str, text_words: List[str]) -> bool:
    return any(
        (len(question_word) > MIN_PARTIAL_LENGTH and question_word in text_word)
        or (len(text_word) > MIN_PARTIAL_LENGTH and text_word in question_word)
        for text_word in text_words
    )


def word_score(question_words: List[str], text_words: List[str]) -> float:
    """
    Điểm trùng từ: khớp chính xác tính 1.0, khớp một phần (chuỗi con) tính 0.5,
    chia cho số token của câu hỏi.
    """
    if not question_words:
        return 0.0

    text_word_set = set(text_words)
    exact_matches = 0
    partial_matches = 0
    for word in question_words:
        if word in text_word_set:
            exact_matches += 1
        elif _is_partial_match(word, text_words):
            partial_matches += 1

    return (
        exact_matches * EXACT_MATCH_WEIGHT + partial_matches * PARTIAL_MATCH_WEIGHT
    ) / len(question_words)


def calculate_similarity(
    question: str,
    text: str,
    resources: Optional[TextResources] = None
) -> float:
    """
    Tính điểm liên quan của văn bản ứng viên đối với câu hỏi.

    Điểm cơ sở là giá trị lớn hơn giữa điểm cụm từ và điểm trùng từ, sau đó
    nhân với hệ số phạt từ khóa chủ đề. Hàm không đối xứng: đổi vai trò
    question/text có thể cho kết quả khác.

    Args:
        question: Câu hỏi của người dùng
        text: Văn bản ứng viên (câu hỏi hoặc câu trả lời trong kho dữ liệu)
        resources: Bộ từ vựng (mặc định là bộ tiếng Việt)

    Returns:
        Điểm không âm, 0 nếu câu hỏi không có token nào
    """
    resources = resources or default_resources()

    question_words = tokenize(question, resources)
    if not question_words:
        return 0.0
    text_words = tokenize(text, resources)

    question_normalized = normalize_text(question)
    text_normalized = normalize_text(text)

    penalty = keyword_penalty(question_normalized, text_normalized, resources.penalty_keywords)
    base_score = max(
        phrase_score(question_normalized, text_normalized),
        word_score(question_words, text_words),
    )
    return base_score * penalty
