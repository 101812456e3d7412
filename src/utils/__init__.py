"""
Các tiện ích chung: cấu hình logging và đánh giá chất lượng truy xuất.
"""

from .logging_utils import setup_logging, setup_logger
