"""
Module quản lý cấu hình logging cho hệ thống trợ lý HealthForumQA.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _resolve_level(log_level: Union[int, str]) -> int:
    """Chuyển mức log dạng chuỗi ('INFO', 'debug'...) sang hằng số của logging."""
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.INFO


def _build_handlers(
    log_file: Optional[Union[str, Path]],
    console_output: bool,
    mode: str
) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []

    if log_file:
        log_file = Path(log_file)
        # Đảm bảo thư mục chứa file log tồn tại
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, mode=mode, encoding='utf-8'))

    if console_output:
        handlers.append(logging.StreamHandler())

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(
    log_file_path: Optional[Union[str, Path]] = None,
    log_level: Union[int, str] = logging.INFO,
    console_output: bool = True,
    mode: str = 'a'
) -> None:
    """
    Thiết lập cấu hình logging gốc (root logger) cho các script.

    Args:
        log_file_path: Đường dẫn đến file log
        log_level: Mức độ log (INFO, WARNING, ERROR, etc.)
        console_output: Có hiển thị log trên console không
        mode: Chế độ mở file log ('w' để ghi đè, 'a' để thêm vào)
    """
    # Xóa các handler cũ để tránh log trùng lặp
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        handler.close()
        root_logger.removeHandler(handler)

    logging.basicConfig(
        level=_resolve_level(log_level),
        handlers=_build_handlers(log_file_path, console_output, mode)
    )

    logging.info("Đã thiết lập cấu hình logging.")
    if log_file_path:
        logging.info(f"File log: {log_file_path}")


def setup_logger(
    name: str,
    log_file: Optional[Union[str, Path]] = None,
    log_level: Union[int, str] = logging.INFO,
    console_output: bool = True,
    mode: str = 'a'
) -> logging.Logger:
    """
    Tạo và thiết lập một logger cụ thể.

    Args:
        name: Tên của logger
        log_file: Đường dẫn đến file log
        log_level: Mức độ log (INFO, WARNING, ERROR, etc.)
        console_output: Có hiển thị log trên console không
        mode: Chế độ mở file log ('w' để ghi đè, 'a' để thêm vào)

    Returns:
        Logger đã được cấu hình
    """
    logger = logging.getLogger(name)
    logger.setLevel(_resolve_level(log_level))

    # Xóa handler cũ nếu có
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)

    for handler in _build_handlers(log_file, console_output, mode):
        logger.addHandler(handler)

    logger.info(f"Logger '{name}' đã được khởi tạo.")
    return logger
