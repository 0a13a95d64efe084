from fastapi import status

from tests.conftest import auth_headers

ANSWER = (
    "When our checkout service failed, my task was to restore it. I analyzed the logs, "
    "identified the root cause and implemented a fix with the team. As a result we reduced "
    "errors by 40% and improved conversion."
)


def _create(client, headers, **overrides):
    payload = {"job_position": "Data Analyst", "company_name": "Grab"}
    payload.update(overrides)
    response = client.post("/api/prepare/sessions", json=payload, headers=headers)
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()["data"]


def test_create_session_defaults(client, user_headers):
    session = _create(client, user_headers)

    assert session["status"] == "active"
    assert session["difficulty_level"] == "adaptive"
    assert session["focus_areas"] == ["behavioral", "situational"]
    assert session["questions_answered"] == 0


def test_question_answer_and_progress(client, user_headers):
    session = _create(client, user_headers)

    response = client.post(f"/api/prepare/sessions/{session['id']}/question", headers=user_headers)
    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    question = body["data"]
    assert body["meta"]["generated_by"] == "fallback"
    assert question["question_number"] == 1
    assert question["question_category"] == "situational"
    assert question["expected_answer_time"] == 180
    assert question["star_method_relevant"] is False

    response = client.post(
        f"/api/prepare/sessions/{session['id']}/respond",
        json={"question_id": question["id"], "response_text": ANSWER, "time_taken": 95},
        headers=user_headers,
    )
    assert response.status_code == status.HTTP_200_OK
    answer = response.json()["data"]
    assert answer["evaluated_by"] == "rule-based"
    assert answer["word_count"] == 37
    assert answer["time_taken"] == 95
    assert answer["star_scores"]["overall"] >= 4
    assert answer["model_answer"]

    progress = client.get(f"/api/prepare/sessions/{session['id']}/progress", headers=user_headers).json()["data"]
    assert progress == {
        "session_id": session["id"],
        "total_questions": 1,
        "questions_answered": 1,
        "average_star_score": progress["average_star_score"],
        "completion_percentage": 5.0,
        "current_question_number": 2,
        "time_spent": 95,
    }
    assert progress["average_star_score"] >= 4

    detail = client.get(f"/api/prepare/sessions/{session['id']}", headers=user_headers).json()["data"]
    assert detail["questions_answered"] == 1
    assert len(detail["questions"]) == 1
    assert len(detail["responses"]) == 1


def test_answering_unknown_question(client, user_headers):
    session = _create(client, user_headers)
    response = client.post(
        f"/api/prepare/sessions/{session['id']}/respond",
        json={"question_id": 42, "response_text": "Something"},
        headers=user_headers,
    )
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_list_status_and_delete(client, user_headers):
    first = _create(client, user_headers)
    _create(client, user_headers, job_position="Product Manager")

    response = client.get("/api/prepare/sessions", params={"limit": 1}, headers=user_headers)
    assert len(response.json()["data"]) == 1

    response = client.patch(
        f"/api/prepare/sessions/{first['id']}/status",
        json={"status": "completed"},
        headers=user_headers,
    )
    data = response.json()["data"]
    assert data["status"] == "completed"
    assert data["completed_at"] is not None

    response = client.delete(f"/api/prepare/sessions/{first['id']}", headers=user_headers)
    assert response.status_code == status.HTTP_200_OK
    response = client.get(f"/api/prepare/sessions/{first['id']}", headers=user_headers)
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_other_users_are_rejected(client, user_headers, other_user):
    session = _create(client, user_headers)
    response = client.post(f"/api/prepare/sessions/{session['id']}/question", headers=auth_headers(other_user))
    assert response.status_code == status.HTTP_403_FORBIDDEN
