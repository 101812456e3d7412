"""
Module trợ lý hỏi đáp y tế cho hệ thống HealthForumQA.
"""

from .answer_service import MedicalAssistant, DISCLAIMER_SUFFIX, NO_MATCH_ANSWER
