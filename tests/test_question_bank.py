import asyncio
import json

import pytest
from fastapi import status

from p3_academy.prompts.question_bank import INTERVIEW_STAGES, QUESTION_BANK
from p3_academy.services.ai_router import AIResponse, ai_router
from p3_academy.services.question_bank_service import average_difficulty, question_bank_service


def test_bank_covers_every_stage():
    assert list(QUESTION_BANK) == INTERVIEW_STAGES
    ids = [q["id"] for questions in QUESTION_BANK.values() for q in questions]
    assert len(ids) == len(set(ids)) == 77
    for stage, questions in QUESTION_BANK.items():
        assert all(q["interview_stage"] == stage for q in questions)


def test_statistics():
    stats = question_bank_service.get_question_statistics()
    assert stats["total_questions"] == 77
    assert stats["questions_by_stage"]["phone-screening"] == 16
    assert stats["questions_by_stage"]["executive-final"] == 15
    assert stats["questions_by_difficulty"] == {"beginner": 7, "intermediate": 42, "advanced": 28}
    assert stats["questions_by_category"]["behavioral"] == 61


def test_average_difficulty():
    assert average_difficulty([{"difficulty": "beginner"}, {"difficulty": "advanced"}]) == 2.0
    assert average_difficulty([]) == 0.0


def test_short_stage_is_topped_up_with_templates():
    questions = asyncio.run(
        question_bank_service.get_questions_for_stage("phone-screening", count=10, difficulty="beginner")
    )
    assert len(questions) == 10
    assert all(q["difficulty"] == "beginner" for q in questions)
    assert sum(1 for q in questions if "-fallback-" in q["id"]) == 3


def test_generated_questions_are_normalised(monkeypatch):
    reply = [
        {"question": "How do you prioritise stakeholder requests?", "difficulty": "expert", "tags": "x"},
        {"question": "Describe a failed launch.", "starMethodRelevant": True, "expectedAnswerTime": "4"},
    ]

    async def fake_generate(messages, **kwargs):
        assert kwargs["domain"] == "general"
        return AIResponse(json.dumps(reply), "openai", 0.4, True)

    monkeypatch.setattr(ai_router, "generate_response", fake_generate)
    questions = asyncio.run(question_bank_service.generate_additional_questions("hiring-manager", 2, "advanced"))

    assert [q["question"] for q in questions] == [r["question"] for r in reply]
    assert questions[0]["difficulty"] == "advanced"
    assert questions[0]["tags"] == ["generated"]
    assert questions[1]["star_method_relevant"] is True
    assert questions[1]["expected_answer_time"] == 4
    assert all(q["interview_stage"] == "hiring-manager" for q in questions)


def test_stage_endpoint(client, user_headers):
    response = client.get("/api/prepare/questions/stage/functional-team", params={"count": 5}, headers=user_headers)
    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert len(body["data"]) == 5
    assert {q["interview_stage"] for q in body["data"]} == {"functional-team"}
    assert body["meta"]["count"] == 5

    response = client.get("/api/prepare/questions/stage/coffee-chat", headers=user_headers)
    assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.parametrize("category,expected", [("technical", 6), ("situational", 1)])
def test_category_endpoint(client, user_headers, category, expected):
    response = client.get(f"/api/prepare/questions/category/{category}", params={"limit": 50}, headers=user_headers)
    questions = response.json()["data"]
    assert len(questions) == expected
    assert {q["category"] for q in questions} == {category}


def test_unknown_category_is_rejected(client, user_headers):
    response = client.get("/api/prepare/questions/category/trivia", headers=user_headers)
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_star_method_all_stages_and_statistics_endpoints(client, user_headers):
    star = client.get("/api/prepare/questions/star-method", params={"limit": 20}, headers=user_headers).json()["data"]
    assert len(star) == 20
    assert all(q["star_method_relevant"] for q in star)

    stages = client.get("/api/prepare/questions/all-stages", headers=user_headers).json()
    assert stages["meta"] == {"total_stages": 5, "total_questions": 77}
    assert stages["data"]["hiring-manager"]["total_questions"] == 16

    stats = client.get("/api/prepare/questions/statistics", headers=user_headers).json()["data"]
    assert stats["total_questions"] == 77

    assert client.get("/api/prepare/questions/statistics").status_code == status.HTTP_401_UNAUTHORIZED
