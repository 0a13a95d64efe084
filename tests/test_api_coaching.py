import asyncio
import json

from fastapi import status

from p3_academy.services.ai_router import AIResponse, ai_router
from p3_academy.services.coaching_service import coaching_service, normalize_star_analysis, star_average
from tests.conftest import auth_headers

FIRST_QUESTION = "Tell me about yourself and why you're interested in this position."
SECOND_QUESTION = "What do you know about our company and why do you want to work here?"


def _create(client, headers, **overrides):
    payload = {
        "job_position": "Product Analyst",
        "company_name": "Shopee",
        "interview_stage": "phone-screening",
        "primary_industry": "fintech",
        "total_questions": 2,
    }
    payload.update(overrides)
    response = client.post("/api/coaching/sessions", json=payload, headers=headers)
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()["data"]


def test_create_session_defaults(client, user_headers):
    session = _create(client, user_headers)
    assert session["status"] == "active"
    assert session["experience_level"] == "intermediate"
    assert session["current_question"] == 0
    assert session["company_context"] == {"type": "enterprise", "business_model": "", "technical_stack": []}

    response = client.post(
        "/api/coaching/sessions",
        json={"job_position": "Analyst", "interview_stage": "coffee-chat"},
        headers=user_headers,
    )
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_conversation_runs_to_completion_on_templates(client, user_headers):
    session = _create(client, user_headers)
    url = f"/api/coaching/sessions/{session['id']}"

    response = client.post(f"{url}/respond", json={"response": "Too early"}, headers=user_headers)
    assert response.status_code == status.HTTP_400_BAD_REQUEST

    opening = client.post(f"{url}/start", headers=user_headers).json()["data"]
    assert opening["question"].startswith("Welcome to your phone screening coaching session!")
    assert "fintech industry-specific" in opening["question"]
    assert f"**Question 1:**\n{FIRST_QUESTION}" in opening["question"]
    assert client.post(f"{url}/start", headers=user_headers).status_code == status.HTTP_400_BAD_REQUEST

    turn = client.post(f"{url}/respond", json={"response": "I studied economics."}, headers=user_headers).json()["data"]
    assert turn["conversation_complete"] is False
    assert turn["question"].startswith(SECOND_QUESTION)
    assert turn["feedback"]["question_number"] == 1
    assert {part["score"] for part in turn["feedback"]["star_analysis"].values()} == {3}
    assert turn["feedback"]["tips"][0] == "Focus on providing specific examples from your experience"

    detail = client.get(url, headers=user_headers).json()["data"]
    assert detail["current_question"] == 2
    assert detail["overall_progress"] == 50.0

    last = client.post(f"{url}/respond", json={"response": "I read your annual report."}, headers=user_headers)
    assert last.json()["message"] == "Coaching session completed"
    assert last.json()["data"]["conversation_complete"] is True
    assert last.json()["data"]["question"] is None

    detail = client.get(url, headers=user_headers).json()["data"]
    assert detail["status"] == "completed"
    assert detail["overall_progress"] == 100.0
    assert len(detail["feedback"]) == 2

    messages = client.get(f"{url}/messages", headers=user_headers).json()["data"]
    assert [m["coaching_type"] for m in messages] == [
        "introduction",
        "question",
        "response",
        "question",
        "response",
        "summary",
    ]
    assert messages[-1]["content"].startswith("Session complete! You worked through 2 questions")

    response = client.post(f"{url}/respond", json={"response": "One more"}, headers=user_headers)
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert client.post(f"{url}/complete", headers=user_headers).status_code == status.HTTP_400_BAD_REQUEST


def test_ending_a_session_early(client, user_headers):
    session = _create(client, user_headers, total_questions=5)
    url = f"/api/coaching/sessions/{session['id']}"
    client.post(f"{url}/start", headers=user_headers)
    client.post(f"{url}/respond", json={"response": "An answer"}, headers=user_headers)

    completion = client.post(f"{url}/complete", headers=user_headers).json()["data"]
    assert completion["questions_answered"] == 1
    assert completion["average_star_score"] == 3.0

    sessions = client.get("/api/coaching/sessions", headers=user_headers).json()
    assert sessions["meta"] == {"total": 1}
    assert sessions["data"][0]["status"] == "completed"


def test_coached_answer_uses_ai_analysis(client, user_headers, monkeypatch):
    calls = []

    async def fake_generate(messages, **kwargs):
        prompt = messages[-1]["content"]
        calls.append(kwargs["domain"])
        if "STAR methodology" in prompt:
            content = json.dumps(
                {
                    "situation": {"score": 5, "feedback": "Vivid", "improvementAreas": []},
                    "task": {"score": "4", "feedback": "Clear"},
                    "action": {"score": 9},
                    "result": {"score": "high"},
                }
            )
        elif "coaching feedback" in prompt:
            content = json.dumps({"tips": ["Lead with the metric"], "modelAnswer": {"situation": "At Grab..."}})
        else:
            content = "Describe a time you changed a stakeholder's mind."
        return AIResponse(content, "sealion", 0.3, False)

    monkeypatch.setattr(ai_router, "generate_response", fake_generate)
    session = _create(client, user_headers)
    url = f"/api/coaching/sessions/{session['id']}"
    client.post(f"{url}/start", headers=user_headers)

    feedback = client.post(f"{url}/respond", json={"response": "I ran a pricing test."}, headers=user_headers).json()[
        "data"
    ]["feedback"]
    scores = {part: value["score"] for part, value in feedback["star_analysis"].items()}
    assert scores == {"situation": 5, "task": 4, "action": 5, "result": 3, "overallFlow": 3}
    assert feedback["star_analysis"]["situation"]["improvementAreas"] == ["Add more specific details"]
    assert feedback["tips"] == ["Lead with the metric"]
    assert feedback["model_answer"] == {"situation": "At Grab..."}
    assert feedback["next_steps"][0] == "Practice 2-3 more STAR examples for this type of question"
    assert set(calls) == {"coaching"}


def test_sessions_belong_to_their_owner(client, user_headers, other_user):
    session = _create(client, user_headers)
    url = f"/api/coaching/sessions/{session['id']}"
    assert client.get(url, headers=auth_headers(other_user)).status_code == status.HTTP_403_FORBIDDEN
    assert client.post(f"{url}/start", headers=auth_headers(other_user)).status_code == status.HTTP_403_FORBIDDEN
    assert client.get("/api/coaching/sessions/999", headers=user_headers).status_code == status.HTTP_404_NOT_FOUND
    assert client.get("/api/coaching/sessions").status_code == status.HTTP_401_UNAUTHORIZED


def test_star_analysis_helpers():
    analysis = normalize_star_analysis("not json")
    assert star_average(analysis) == 3.0
    analysis = normalize_star_analysis({"situation": {"score": 0.4}, "result": {"score": 4.6}})
    assert analysis["situation"]["score"] == 1
    assert analysis["result"]["score"] == 5


def test_industry_knowledge_falls_back_without_ai(client, user_headers):
    knowledge = client.get("/api/coaching/industry/fintech/knowledge", headers=user_headers).json()["data"]
    assert knowledge["industry"] == "fintech"
    assert knowledge["ai_generated"] is False
    assert knowledge["interview_focus"] == ["Relevant experience", "Problem-solving", "Communication"]


def test_industry_knowledge_from_ai_reply(monkeypatch):
    async def fake_generate(messages, **kwargs):
        return AIResponse(
            json.dumps({"overview": "Payments at scale", "keyTerminology": {"KYC": "Know your customer"}}),
            "openai",
            0.5,
            True,
        )

    monkeypatch.setattr(ai_router, "generate_response", fake_generate)
    knowledge = asyncio.run(coaching_service.get_industry_knowledge("Fintech"))
    assert knowledge["overview"] == "Payments at scale"
    assert knowledge["key_terminology"] == {"KYC": "Know your customer"}
    assert knowledge["ai_generated"] is True
    assert knowledge["common_scenarios"]


def test_industry_questions(client, user_headers):
    response = client.get(
        "/api/coaching/industry/fintech/questions",
        params={"stage": "hiring-manager", "experience_level": "senior", "limit": 50},
        headers=user_headers,
    )
    body = response.json()
    assert body["meta"]["industry"] == "fintech"
    assert body["data"]
    for question in body["data"]:
        assert question["interview_stage"] == "hiring-manager"
        assert question["difficulty"] == "advanced"
        assert "fintech" in question["tags"]

    response = client.get(
        "/api/coaching/industry/fintech/questions", params={"stage": "lunch"}, headers=user_headers
    )
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
