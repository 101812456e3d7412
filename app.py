"""
Backend FastAPI cho trợ lý hỏi đáp sức khỏe của diễn đàn cộng đồng HealthForumQA.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from src import config
from src.assistant import MedicalAssistant
from src.utils.logging_utils import setup_logger

logger = setup_logger(
    "healthforum_assistant",
    log_file=config.LOG_FILE,
    log_level=config.LOG_LEVEL
)

assistant: Optional[MedicalAssistant] = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Nạp kho dữ liệu y tế một lần khi ứng dụng khởi động"""
    global assistant

    assistant = MedicalAssistant.from_file(config.MEDICAL_DATA_PATH)
    if assistant.is_ready:
        logger.info(f"Ứng dụng đã khởi động thành công với {len(assistant)} tài liệu y tế.")
    else:
        logger.error(f"Kho dữ liệu rỗng ({config.MEDICAL_DATA_PATH}), trợ lý chạy ở chế độ hạn chế.")
    yield


app = FastAPI(
    title="HealthForumQA Assistant",
    description="Trợ lý hỏi đáp sức khỏe dựa trên kho hỏi đáp y tế tiếng Việt",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

API_PREFIX = "/api/ai-assistant"


class AskRequest(BaseModel):
    question: str


class RelevantDoc(BaseModel):
    doc_id: str
    question_vi: str
    answer_vi: str
    source: str


class AnswerData(BaseModel):
    question: str
    answer: str
    relevantDocs: List[RelevantDoc] = []
    confidence: str
    timestamp: str


class AskResponse(BaseModel):
    success: bool = True
    data: AnswerData


class SuggestionsResponse(BaseModel):
    success: bool = True
    data: Dict[str, List[str]]


class StatisticsData(BaseModel):
    totalDocs: int
    sources: List[str]
    categories: Dict[str, int]


class StatisticsResponse(BaseModel):
    success: bool = True
    data: StatisticsData


def get_assistant() -> MedicalAssistant:
    if assistant is None:
        raise HTTPException(
            status_code=503,
            detail="Hệ thống chưa được khởi tạo đầy đủ. Vui lòng thử lại sau."
        )
    return assistant


@app.get("/health")
async def health(service: MedicalAssistant = Depends(get_assistant)) -> Dict[str, Any]:
    return {"status": "ok", "totalDocs": len(service)}


@app.post(f"{API_PREFIX}/ask", response_model=AskResponse)
def ask_question(request: AskRequest, service: MedicalAssistant = Depends(get_assistant)):
    """API endpoint trả lời câu hỏi của người dùng"""
    question = request.question
    if not question:
        raise HTTPException(status_code=400, detail="Câu hỏi không hợp lệ")

    try:
        result = service.generate_answer(question)
    except Exception as e:
        logger.error(f"Lỗi khi xử lý câu hỏi: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Đã xảy ra lỗi khi xử lý câu hỏi")

    logger.info(f"Câu hỏi '{question}' -> độ tin cậy {result['confidence']}")
    return AskResponse(
        data=AnswerData(
            question=question,
            answer=result["answer"],
            relevantDocs=result["relevantDocs"],
            confidence=result["confidence"],
            timestamp=datetime.now(timezone.utc).isoformat()
        )
    )


@app.get(f"{API_PREFIX}/suggestions", response_model=SuggestionsResponse)
def get_suggestions(
    topic: Optional[str] = None,
    limit: int = Query(config.DEFAULT_SUGGESTION_LIMIT, ge=1),
    service: MedicalAssistant = Depends(get_assistant)
):
    """API endpoint lấy các câu hỏi gợi ý"""
    try:
        suggestions = service.get_suggested_questions(topic, limit)
    except Exception as e:
        logger.error(f"Lỗi khi lấy câu hỏi gợi ý: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Đã xảy ra lỗi khi lấy câu hỏi gợi ý")

    return SuggestionsResponse(data={"suggestions": suggestions})


@app.get(f"{API_PREFIX}/statistics", response_model=StatisticsResponse)
def get_statistics(service: MedicalAssistant = Depends(get_assistant)):
    """API endpoint thống kê kho dữ liệu"""
    try:
        stats = service.get_statistics()
    except Exception as e:
        logger.error(f"Lỗi khi lấy thống kê: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Đã xảy ra lỗi khi lấy thống kê")

    return StatisticsResponse(
        data=StatisticsData(
            totalDocs=stats["totalDocs"],
            sources=sorted(stats["sources"]),
            categories=stats["categories"]
        )
    )


if __name__ == "__main__":
    import uvicorn

    logging.info(f"Starting server on port {config.PORT}")
    uvicorn.run(app, host="0.0.0.0", port=config.PORT)
