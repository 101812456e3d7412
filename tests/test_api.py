"""Tests for the FastAPI assistant endpoints."""

import random

import pytest
from fastapi.testclient import TestClient

import app as app_module
from app import app, get_assistant
from src.assistant import MedicalAssistant
from src.assistant.answer_service import NO_MATCH_ANSWER


@pytest.fixture
def client(diabetes_doc, topic_corpus):
    service = MedicalAssistant([diabetes_doc, *topic_corpus], rng=random.Random(0))
    app.dependency_overrides[get_assistant] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestAsk:
    def test_answers_question(self, client):
        response = client.post("/api/ai-assistant/ask", json={"question": "tiểu đường có triệu chứng gì"})
        assert response.status_code == 200

        body = response.json()
        assert body["success"] is True
        assert body["data"]["question"] == "tiểu đường có triệu chứng gì"
        assert body["data"]["confidence"] == "high"
        assert body["data"]["relevantDocs"][0]["doc_id"] == "0001"
        assert body["data"]["timestamp"]

    def test_no_match(self, client):
        response = client.post("/api/ai-assistant/ask", json={"question": "là và của"})
        data = response.json()["data"]
        assert data["confidence"] == "low"
        assert data["answer"] == NO_MATCH_ANSWER
        assert data["relevantDocs"] == []

    def test_empty_question_rejected(self, client):
        response = client.post("/api/ai-assistant/ask", json={"question": ""})
        assert response.status_code == 400

    def test_non_string_question_rejected(self, client):
        response = client.post("/api/ai-assistant/ask", json={"question": 123})
        assert response.status_code == 422


class TestSuggestions:
    def test_topic_filter(self, client):
        response = client.get("/api/ai-assistant/suggestions", params={"topic": "tim", "limit": 3})
        assert response.status_code == 200
        suggestions = response.json()["data"]["suggestions"]
        assert set(suggestions) == {"Bệnh tim mạch là gì?", "Đau ngực có nguy hiểm không?"}

    def test_default_limit(self, client):
        response = client.get("/api/ai-assistant/suggestions")
        assert len(response.json()["data"]["suggestions"]) == 6

    def test_invalid_limit(self, client):
        response = client.get("/api/ai-assistant/suggestions", params={"limit": 0})
        assert response.status_code == 422


class TestStatistics:
    def test_statistics(self, client):
        response = client.get("/api/ai-assistant/statistics")
        assert response.status_code == 200

        data = response.json()["data"]
        assert data["totalDocs"] == 6
        assert data["sources"] == ["MedQuAD", "NIDDK"]
        assert "Tim mạch" in data["categories"]


class TestLifecycle:
    def test_unavailable_before_startup(self, monkeypatch):
        monkeypatch.setattr(app_module, "assistant", None)
        response = TestClient(app).get("/health")
        assert response.status_code == 503

    def test_startup_loads_corpus(self, monkeypatch, corpus_file):
        path = corpus_file([
            {"question_vi": "Ho là gì?", "answer_vi": "Phản xạ bảo vệ.", "doc_id": "1", "source": "CDC"},
        ])
        monkeypatch.setattr(app_module, "assistant", None)
        monkeypatch.setattr(app_module.config, "MEDICAL_DATA_PATH", path)

        with TestClient(app) as client:
            response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "totalDocs": 1}
