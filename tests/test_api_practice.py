from fastapi import status

from tests.conftest import auth_headers

ANSWER = (
    "When our checkout service failed, my task was to restore it. I analyzed the logs, "
    "identified the root cause and implemented a fix with the team. As a result we reduced "
    "errors by 40% and improved conversion."
)


def _create_session(client, headers, scenario, **overrides):
    payload = {"scenario_id": scenario.id, "total_questions": 3}
    payload.update(overrides)
    response = client.post("/api/practice/sessions", json=payload, headers=headers)
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()["data"]


def test_create_session_requires_existing_scenario(client, user_headers):
    response = client.post("/api/practice/sessions", json={"scenario_id": 999}, headers=user_headers)
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_practice_interview_flow(client, user_headers, scenario):
    session = _create_session(client, user_headers, scenario)
    assert session["status"] == "setup"
    assert session["module"] == "practice"

    response = client.post(f"/api/practice/sessions/{session['id']}/ai-question", headers=user_headers)
    assert response.status_code == status.HTTP_200_OK
    question = response.json()["data"]
    assert question["question_number"] == 1
    assert question["content"] == (
        "Tell me about yourself and why you're interested in the Data Analyst position "
        "at Regional e-commerce platform."
    )

    response = client.post(
        f"/api/practice/sessions/{session['id']}/user-response",
        json={"content": ANSWER},
        headers=user_headers,
    )
    message = response.json()["data"]
    assert message["message_type"] == "user"
    assert message["feedback"] == "Thank you for your response. Please continue with the next question."

    detail = client.get(f"/api/practice/sessions/{session['id']}", headers=user_headers).json()["data"]
    assert detail["status"] == "in_progress"
    assert detail["current_question"] == 2
    assert [m["message_type"] for m in detail["messages"]] == ["ai", "user"]

    responses = client.get(f"/api/practice/sessions/{session['id']}/responses", headers=user_headers).json()["data"]
    assert responses[0]["question_id"] == "question-1"

    response = client.post(f"/api/practice/sessions/{session['id']}/complete", headers=user_headers)
    assert response.status_code == status.HTTP_200_OK
    completion = response.json()["data"]
    assert completion["session"]["status"] == "completed"
    assert completion["report"]["evaluated_by"] == "rule-based"
    assert completion["report"]["overall_rating"] == "Pass"
    assert completion["report"]["key_insights"][0] == "Completed 1 questions"

    report = client.get(f"/api/practice/sessions/{session['id']}/report", headers=user_headers).json()["data"]
    assert report["id"] == completion["report"]["id"]

    # completing twice returns the stored report
    again = client.post(f"/api/practice/sessions/{session['id']}/complete", headers=user_headers).json()["data"]
    assert again["report"]["id"] == report["id"]

    response = client.post(f"/api/practice/sessions/{session['id']}/ai-question", headers=user_headers)
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_complete_without_answers_is_rejected(client, user_headers, scenario):
    session = _create_session(client, user_headers, scenario)
    response = client.post(f"/api/practice/sessions/{session['id']}/complete", headers=user_headers)
    assert response.status_code == status.HTTP_400_BAD_REQUEST

    response = client.get(f"/api/practice/sessions/{session['id']}/report", headers=user_headers)
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_transcript_download(client, user_headers, scenario):
    session = _create_session(client, user_headers, scenario)
    client.post(f"/api/practice/sessions/{session['id']}/ai-question", headers=user_headers)
    client.post(
        f"/api/practice/sessions/{session['id']}/user-response",
        json={"content": "I enjoy analysing data.", "input_method": "voice"},
        headers=user_headers,
    )

    response = client.get(f"/api/practice/sessions/{session['id']}/transcript", headers=user_headers)
    assert response.status_code == status.HTTP_200_OK
    assert response.headers["content-disposition"] == (
        f"attachment; filename=interview-transcript-{session['id']}.txt"
    )
    blocks = response.text.split("\n\n")
    assert len(blocks) == 2
    assert "] Interviewer: " in blocks[0]
    assert blocks[1].endswith("Candidate: I enjoy analysing data.")


def test_status_transitions(client, user_headers, scenario):
    session = _create_session(client, user_headers, scenario)
    url = f"/api/practice/sessions/{session['id']}/status"

    response = client.patch(url, json={"status": "paused"}, headers=user_headers)
    assert response.json()["data"]["status"] == "paused"

    response = client.patch(url, json={"status": "completed"}, headers=user_headers)
    assert response.json()["data"]["status"] == "completed"
    assert response.json()["data"]["completed_at"] is not None

    response = client.patch(url, json={"status": "in_progress"}, headers=user_headers)
    assert response.status_code == status.HTTP_400_BAD_REQUEST

    response = client.patch(url, json={"status": "archived"}, headers=user_headers)
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_update_and_auto_save(client, user_headers, scenario):
    session = _create_session(client, user_headers, scenario)

    response = client.put(
        f"/api/practice/sessions/{session['id']}",
        json={"current_question": 5},
        headers=user_headers,
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST

    response = client.post(
        f"/api/practice/sessions/{session['id']}/auto-save",
        json={"user_company_name": "Shopee", "current_question": 2},
        headers=user_headers,
    )
    body = response.json()
    assert body["data"]["user_company_name"] == "Shopee"
    assert body["data"]["current_question"] == 2
    assert body["meta"]["auto_saved_at"] is not None


def test_other_users_cannot_access_session(client, db, user_headers, other_user, scenario):
    session = _create_session(client, user_headers, scenario)
    response = client.get(f"/api/practice/sessions/{session['id']}", headers=auth_headers(other_user))
    assert response.status_code == status.HTTP_403_FORBIDDEN

    response = client.get("/api/practice/sessions/12345", headers=user_headers)
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_session_status_extend_and_stats(client, user_headers, scenario):
    session = _create_session(client, user_headers, scenario)

    info = client.get(f"/api/practice/sessions/{session['id']}/status", headers=user_headers).json()["data"]
    assert info["status"] == "active"

    info = client.post(f"/api/practice/sessions/{session['id']}/extend", headers=user_headers).json()["data"]
    assert info["status"] == "active"
    assert info["time_remaining"] >= 29

    recovery = client.post(f"/api/practice/sessions/{session['id']}/recover", headers=user_headers).json()["data"]
    assert recovery["can_recover"] is True

    stats = client.get("/api/practice/stats", headers=user_headers).json()["data"]
    assert stats["total_sessions"] == 1
    assert stats["active_sessions"] == 1


def test_questions_and_overview(client, user_headers, scenario):
    session = _create_session(client, user_headers, scenario, total_questions=17)

    questions = client.get(f"/api/practice/sessions/{session['id']}/questions", headers=user_headers).json()["data"]
    assert len(questions) == 17
    assert questions[0]["id"] == "question-1"
    assert questions[16]["category"] == "teamwork"

    overview = client.get("/api/practice/overview", headers=user_headers).json()["data"]
    assert overview["total_sessions"] == 1
    assert overview["completed_sessions"] == 0
    assert overview["average_score"] is None
    assert overview["recent_sessions"][0]["id"] == session["id"]


def test_flagged_response_is_rejected(client, user_headers, scenario, monkeypatch):
    from p3_academy.services import sealion_service

    async def guard(messages, **kwargs):
        return "unsafe"

    monkeypatch.setattr(sealion_service, "generate_response", guard)
    session = _create_session(client, user_headers, scenario)

    response = client.post(
        f"/api/practice/sessions/{session['id']}/user-response",
        json={"content": "Something harmful"},
        headers=user_headers,
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["detail"] == "Content flagged as potentially harmful"


def test_regional_session_completes_with_text_star_scores(client, user_headers, scenario, monkeypatch):
    import json

    from p3_academy.services.ai_router import AIResponse, ai_router

    reply = {
        "relevanceScore": "4",
        "starStructureScore": "4",
        "outcomeOrientedScore": "3",
        "starScores": {"situation": "4", "task": "4", "action": "3", "result": "3", "overall": "4"},
    }

    async def fake_generate(messages, **kwargs):
        return AIResponse(json.dumps(reply), "sealion", 0.1, False)

    monkeypatch.setattr(ai_router, "generate_response", fake_generate)
    session = _create_session(client, user_headers, scenario, interview_language="ms")
    client.post(
        f"/api/practice/sessions/{session['id']}/user-response",
        json={"content": "Saya membaiki sistem pembayaran bersama pasukan."},
        headers=user_headers,
    )

    response = client.post(f"/api/practice/sessions/{session['id']}/complete", headers=user_headers)
    assert response.status_code == status.HTTP_200_OK
    report = response.json()["data"]["report"]
    assert report["evaluated_by"] == "sealion"
    assert report["situation_score"] == 4.0
    assert report["result_score"] == 3.0


def test_no_questions_after_all_answers_are_in(client, user_headers, scenario):
    session = _create_session(client, user_headers, scenario, total_questions=2)
    for _ in range(2):
        response = client.post(f"/api/practice/sessions/{session['id']}/ai-question", headers=user_headers)
        assert response.status_code == status.HTTP_200_OK
        client.post(
            f"/api/practice/sessions/{session['id']}/user-response",
            json={"content": ANSWER},
            headers=user_headers,
        )

    detail = client.get(f"/api/practice/sessions/{session['id']}", headers=user_headers).json()["data"]
    assert detail["current_question"] == 2

    response = client.post(f"/api/practice/sessions/{session['id']}/ai-question", headers=user_headers)
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["detail"] == "Maximum questions reached. Complete the session to get evaluation"
