import json

from fastapi import status

from p3_academy.services.ai_router import AIResponse, ai_router
from tests.conftest import auth_headers


def _create(client, headers):
    response = client.post(
        "/api/prepare/sessions",
        json={"job_position": "Data Analyst", "company_name": "Grab"},
        headers=headers,
    )
    return response.json()["data"]


def _reply_with(monkeypatch, content, calls):
    async def fake_generate(messages, **kwargs):
        calls.append(kwargs)
        return AIResponse(content, "sealion", 0.2, False)

    monkeypatch.setattr(ai_router, "generate_response", fake_generate)


def test_study_plan_from_template(client, user_headers, other_user):
    session = _create(client, user_headers)

    response = client.post(f"/api/prepare/sessions/{session['id']}/study-plan", json={}, headers=user_headers)
    assert response.status_code == status.HTTP_201_CREATED
    plan = response.json()["data"]
    assert plan["title"] == "Data Analyst Interview Preparation Plan"
    assert plan["description"] == "Template-based study plan for Data Analyst interview preparation at Grab"
    assert plan["ai_generated"] is False
    assert plan["total_weeks"] == 2
    assert plan["daily_time_commitment"] == 60
    assert plan["milestones"][0]["estimatedHours"] == 7.0
    assert "STAR method mastery" in plan["target_skills"]

    fetched = client.get(f"/api/prepare/study-plans/{plan['id']}", headers=user_headers).json()["data"]
    assert fetched["id"] == plan["id"]

    response = client.get(f"/api/prepare/study-plans/{plan['id']}", headers=auth_headers(other_user))
    assert response.status_code == status.HTTP_403_FORBIDDEN
    response = client.get("/api/prepare/study-plans/999", headers=user_headers)
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_study_plan_from_ai_reply(client, user_headers, monkeypatch):
    calls = []
    reply = {
        "totalWeeks": 3,
        "targetSkills": ["SQL", "Storytelling"],
        "milestones": [{"week": 1, "title": "SQL drills", "tasks": ["Window functions"], "estimatedHours": 5}],
        "content": {"overview": "Three focused weeks"},
    }
    _reply_with(monkeypatch, f"```json\n{json.dumps(reply)}\n```", calls)
    session = _create(client, user_headers)

    response = client.post(
        f"/api/prepare/sessions/{session['id']}/study-plan",
        json={"time_available": 90, "focus_areas": ["SQL"]},
        headers=user_headers,
    )
    plan = response.json()["data"]
    assert plan["ai_generated"] is True
    assert plan["total_weeks"] == 3
    assert plan["target_skills"] == ["SQL", "Storytelling"]
    assert plan["daily_time_commitment"] == 90
    assert plan["generated_content"] == {"overview": "Three focused weeks"}
    assert calls[0]["domain"] == "study-plan"


def test_company_research_is_reused_while_fresh(client, user_headers):
    response = client.post("/api/prepare/company-research", json={"company_name": "Grab"}, headers=user_headers)
    assert response.status_code == status.HTTP_200_OK
    research = response.json()["data"]
    assert research["ai_generated"] is False
    assert research["industry"] == "Technology"
    assert research["interview_insights"]["commonQuestions"][0] == "Why do you want to work here?"

    again = client.post("/api/prepare/company-research", json={"company_name": "Grab"}, headers=user_headers).json()["data"]
    assert again["id"] == research["id"]

    fetched = client.get("/api/prepare/company-research", params={"company_name": "Grab"}, headers=user_headers)
    assert fetched.json()["data"]["id"] == research["id"]

    response = client.get("/api/prepare/company-research", params={"company_name": "Sea"}, headers=user_headers)
    assert response.status_code == status.HTTP_404_NOT_FOUND

    response = client.post("/api/prepare/company-research", json={"company_name": ""}, headers=user_headers)
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_company_research_uses_research_prompt(client, user_headers, monkeypatch):
    calls = []
    _reply_with(monkeypatch, json.dumps({"industry": "Ride hailing", "competitors": ["Gojek"]}), calls)

    research = client.post(
        "/api/prepare/company-research",
        json={"company_name": "Grab", "job_position": "Data Analyst"},
        headers=user_headers,
    ).json()["data"]
    assert research["ai_generated"] is True
    assert research["industry"] == "Ride hailing"
    assert research["competitors"] == ["Gojek"]
    assert calls[0]["domain"] == "company-research"


def test_resource_generation_needs_an_ai_provider(client, user_headers):
    response = client.post(
        "/api/prepare/resources/generate",
        json={"topic": "STAR method", "resource_type": "checklist"},
        headers=user_headers,
    )
    assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
    assert response.json()["message"] == "AI services are temporarily unavailable"


def test_generated_resources_are_listed(client, user_headers, monkeypatch):
    calls = []
    _reply_with(monkeypatch, "1. Pick a story\n2. State the result", calls)

    response = client.post(
        "/api/prepare/resources/generate",
        json={"topic": "STAR Method", "resource_type": "checklist", "interview_stage": "phone-screening"},
        headers=user_headers,
    )
    assert response.status_code == status.HTTP_201_CREATED
    resource = response.json()["data"]
    assert resource["title"] == "STAR Method - checklist"
    assert resource["category"] == "star-method"
    assert resource["estimated_read_time"] == 1
    assert resource["tags"] == ["STAR Method", "checklist"]
    assert calls[0]["domain"] == "resource-generation"

    listed = client.get("/api/prepare/resources", params={"category": "star-method"}, headers=user_headers).json()
    assert [r["id"] for r in listed["data"]] == [resource["id"]]
    empty = client.get("/api/prepare/resources", params={"resource_type": "article"}, headers=user_headers).json()
    assert empty["data"] == []

    response = client.post(
        "/api/prepare/resources/generate",
        json={"topic": "STAR Method", "resource_type": "podcast"},
        headers=user_headers,
    )
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
