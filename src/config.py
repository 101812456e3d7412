"""
Cấu hình cho hệ thống trợ lý sức khỏe HealthForumQA.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Tải biến môi trường từ file .env (nếu có)
load_dotenv()

# Đường dẫn dự án
PROJECT_ROOT = Path(__file__).parent.parent
DATA_DIR = PROJECT_ROOT / "data"
OUTPUTS_DIR = PROJECT_ROOT / "outputs"
EVALUATION_DIR = OUTPUTS_DIR / "evaluation"

# Kho dữ liệu hỏi đáp y tế (JSON)
DEFAULT_MEDICAL_DATA_PATH = DATA_DIR / "medquad_vi_sample.json"
MEDICAL_DATA_PATH = Path(os.getenv("MEDICAL_DATA_PATH", str(DEFAULT_MEDICAL_DATA_PATH)))

# Logging
LOG_FILE = Path(os.getenv("LOG_FILE", str(OUTPUTS_DIR / "logs" / "assistant.log")))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Web server
PORT = int(os.getenv("PORT", 10000))

# Giá trị mặc định cho các API
DEFAULT_SEARCH_LIMIT = 5
DEFAULT_SUGGESTION_LIMIT = 6
