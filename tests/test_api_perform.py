from fastapi import status

from p3_academy.models.interview_session import InterviewMessage
from tests.conftest import auth_headers

ANSWER = (
    "When our checkout service failed, my task was to restore it. I analyzed the logs, "
    "identified the root cause and implemented a fix with the team. As a result we reduced "
    "errors by 40% and improved conversion."
)


def _start_interview(client, headers):
    response = client.post(
        "/api/perform/sessions",
        json={"job_position": "Data Analyst", "company_name": "Grab"},
        headers=headers,
    )
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()["data"]


def test_session_opens_with_greeting(client, user_headers):
    session = _start_interview(client, user_headers)

    assert session["module"] == "perform"
    assert session["status"] == "in_progress"
    assert len(session["messages"]) == 1
    greeting = session["messages"][0]
    assert greeting["message_type"] == "ai"
    assert greeting["content"] == (
        "Tell me about yourself and why you're interested in the Data Analyst position at Grab."
    )


def test_unknown_language_falls_back_to_english(client, user_headers):
    response = client.post(
        "/api/perform/sessions",
        json={"job_position": "Designer", "company_name": "Sea", "interview_language": "xx"},
        headers=user_headers,
    )
    assert response.json()["data"]["interview_language"] == "en"


def test_interview_and_evaluation(client, user_headers):
    session = _start_interview(client, user_headers)
    session_id = session["id"]

    response = client.get(f"/api/perform/sessions/{session_id}/evaluation", headers=user_headers)
    assert response.status_code == status.HTTP_404_NOT_FOUND

    response = client.post(
        f"/api/perform/sessions/{session_id}/messages",
        json={"content": ANSWER},
        headers=user_headers,
    )
    assert response.json()["data"]["question_number"] == 1

    response = client.post(f"/api/perform/sessions/{session_id}/ai-response", headers=user_headers)
    body = response.json()
    assert body["message"] == "Question generated"
    assert body["data"]["question_number"] == 2
    assert body["data"]["is_completed"] is False
    assert body["data"]["message"]

    messages = client.get(f"/api/perform/sessions/{session_id}/messages", headers=user_headers).json()["data"]
    assert [m["message_type"] for m in messages] == ["ai", "user", "ai"]

    response = client.post(f"/api/perform/sessions/{session_id}/complete", headers=user_headers)
    evaluation = response.json()["data"]
    assert evaluation["overall_score"] == 7.5
    assert evaluation["badge_earned"] == "Strong Candidate"
    assert evaluation["points_earned"] == 75
    assert evaluation["overall_rating"] == "Good Performance"
    assert evaluation["strengths"] == ["Clear communication", "Problem-solving ability", "Cultural adaptability"]
    assert evaluation["cultural_context"] == "SEA"

    shared = client.post(f"/api/perform/sessions/{session_id}/share", headers=user_headers).json()["data"]
    assert shared["id"] == evaluation["id"]
    assert shared["shared_at"] is not None

    detail = client.get(f"/api/perform/sessions/{session_id}", headers=user_headers).json()["data"]
    assert detail["status"] == "completed"
    assert detail["overall_score"] == 7.5

    response = client.post(
        f"/api/perform/sessions/{session_id}/messages",
        json={"content": "One more thing"},
        headers=user_headers,
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_assessment_overview_and_drills(client, user_headers):
    session = _start_interview(client, user_headers)
    client.post(f"/api/perform/sessions/{session['id']}/messages", json={"content": ANSWER}, headers=user_headers)

    response = client.post("/api/perform/assessment", json={"session_id": session["id"]}, headers=user_headers)
    assert response.status_code == status.HTTP_201_CREATED
    assessment = response.json()["data"]
    assert assessment["communication_score"] == 3.0
    assert assessment["empathy_score"] == 4.0
    assert assessment["problem_solving_score"] == 5.0
    assert assessment["cultural_alignment_score"] == 3.5
    assert assessment["overall_rating"] == "Developing"
    assert assessment["performance_badge"] == "Competent Candidate"
    assert assessment["progress_level"] == 3
    assert {d["drill_type"] for d in assessment["drills"]} == {"star_method", "communication", "cultural_fit"}

    listed = client.get("/api/perform/assessment", headers=user_headers).json()["data"]
    assert [a["id"] for a in listed] == [assessment["id"]]

    overview = client.get("/api/perform/overview", headers=user_headers).json()["data"]
    assert overview["total_assessments"] == 1
    assert overview["strongest_indicator"] == "Problem Solving"
    assert overview["weakest_indicator"] == "Communication Clarity"
    assert overview["recent_trend"] == "stable"
    assert overview["available_drills"] == 3
    assert overview["completed_drills"] == 0

    drills = client.get("/api/perform/drills", headers=user_headers).json()["data"]
    response = client.post(f"/api/perform/drills/{drills[0]['id']}/complete", headers=user_headers)
    assert response.json()["data"]["completed"] is True

    overview = client.get("/api/perform/overview", headers=user_headers).json()["data"]
    assert overview["completed_drills"] == 1


def test_assessment_requires_answers(client, user_headers):
    session = _start_interview(client, user_headers)
    response = client.post("/api/perform/assessment", json={"session_id": session["id"]}, headers=user_headers)
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_overview_without_assessments(client, user_headers):
    response = client.get("/api/perform/overview", headers=user_headers)
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_other_users_cannot_complete_drills_or_sessions(client, user_headers, other_user):
    session = _start_interview(client, user_headers)
    headers = auth_headers(other_user)

    response = client.get(f"/api/perform/sessions/{session['id']}", headers=headers)
    assert response.status_code == status.HTTP_403_FORBIDDEN

    response = client.post("/api/perform/drills/1/complete", headers=headers)
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_interview_closes_itself_after_eight_exchanges(client, db, user_headers):
    session = _start_interview(client, user_headers)
    for number in range(1, 16):
        db.add(InterviewMessage(
            session_id=session["id"],
            message_type="user" if number % 2 else "ai",
            content=ANSWER if number % 2 else f"Question {number // 2 + 1}",
        ))
    db.commit()

    response = client.post(f"/api/perform/sessions/{session['id']}/ai-response", headers=user_headers)
    body = response.json()
    assert body["message"] == "Interview completed"
    assert body["data"]["is_completed"] is True
    assert body["data"]["question_number"] is None
    assert body["data"]["message"].startswith("Thank you for this comprehensive interview!")
    assert "Data Analyst role at Grab" in body["data"]["message"]

    messages = client.get(f"/api/perform/sessions/{session['id']}/messages", headers=user_headers).json()["data"]
    assert len(messages) == 17
    assert messages[-1]["content"] == body["data"]["message"]

    evaluation = client.get(f"/api/perform/sessions/{session['id']}/evaluation", headers=user_headers).json()["data"]
    assert evaluation["overall_score"] == 7.5
    detail = client.get(f"/api/perform/sessions/{session['id']}", headers=user_headers).json()["data"]
    assert detail["status"] == "completed"

    response = client.post(f"/api/perform/sessions/{session['id']}/ai-response", headers=user_headers)
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_repeated_assessment_returns_the_stored_one(client, user_headers):
    session = _start_interview(client, user_headers)
    client.post(f"/api/perform/sessions/{session['id']}/messages", json={"content": ANSWER}, headers=user_headers)

    first = client.post("/api/perform/assessment", json={"session_id": session["id"]}, headers=user_headers).json()["data"]
    second = client.post("/api/perform/assessment", json={"session_id": session["id"]}, headers=user_headers).json()["data"]
    assert second["id"] == first["id"]

    assert len(client.get("/api/perform/assessment", headers=user_headers).json()["data"]) == 1
    assert len(client.get("/api/perform/drills", headers=user_headers).json()["data"]) == 3
