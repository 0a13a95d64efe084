import asyncio
import json

import pytest

from p3_academy.services.ai_router import AIResponse, AIServiceUnavailable, ai_router
from p3_academy.services.evaluation_service import (
    CRITERIA_WEIGHTS,
    EvaluationRequest,
    evaluation_service,
    rating_for_score,
    round_half_up,
    weighted_score,
)

STRONG_ANSWER = (
    "When our checkout service failed, my task was to restore it. I analyzed the logs, "
    "identified the root cause and implemented a fix with the team. As a result we reduced "
    "errors by 40% and improved conversion."
)


def _request(text, language="en", job="Backend Engineer"):
    return EvaluationRequest(
        question_text="Tell me about a checkout outage you handled",
        response_text=text,
        job_position=job,
        response_language=language,
    )


def test_weights_sum_to_one():
    assert sum(CRITERIA_WEIGHTS.values()) == pytest.approx(1.0)


def test_weighted_score_of_uniform_scores():
    assert weighted_score({criterion: 5 for criterion in CRITERIA_WEIGHTS}) == pytest.approx(5.0)
    assert weighted_score({criterion: 3 for criterion in CRITERIA_WEIGHTS}) == pytest.approx(3.0)


def test_round_half_up():
    assert round_half_up(2.25) == 2.3
    assert round_half_up(2.35) == 2.4
    assert round_half_up(0.5, 0) == 1.0
    assert round_half_up(4.44) == 4.4


@pytest.mark.parametrize(
    "score,rating",
    [(4.2, "Pass"), (3.5, "Pass"), (3.4, "Borderline"), (3.0, "Borderline"), (2.9, "Needs Improvement")],
)
def test_rating_thresholds(score, rating):
    assert rating_for_score(score) == rating


def test_rules_reward_structured_answer_with_metrics():
    result = evaluation_service.evaluate_with_rules(_request(STRONG_ANSWER))
    rubric = result["rubric_scores"]

    assert rubric["star_structure"] == 5
    assert rubric["specific_evidence"] == 5
    assert rubric["outcome_oriented"] == 5
    assert rubric["problem_solving"] == 5
    assert rubric["cultural_fit"] == 4
    assert rubric["relevance"] == 4
    assert result["overall_rating"] == "Pass"
    assert result["weighted_overall_score"] >= 4.4
    assert result["star_scores"]["situation"] == 4
    assert result["star_scores"]["result"] == 4
    assert "Good use of structured storytelling" in result["detailed_feedback"]["strengths"]
    assert result["evaluated_by"] == "rule-based"


def test_rules_penalise_short_vague_answer():
    result = evaluation_service.evaluate_with_rules(_request("I did my best."))
    rubric = result["rubric_scores"]

    assert rubric["relevance"] == 2
    assert rubric["star_structure"] == 2
    assert rubric["specific_evidence"] == 2
    assert rubric["communication"] == 2
    assert result["overall_rating"] == "Needs Improvement"
    assert "Response lacks clear structure" in result["detailed_feedback"]["weaknesses"]
    assert "Limited specific evidence provided" in result["detailed_feedback"]["weaknesses"]


def test_role_keywords_raise_alignment():
    result = evaluation_service.evaluate_with_rules(_request(STRONG_ANSWER, job="Checkout Engineer"))
    assert result["rubric_scores"]["role_alignment"] == 4


def test_english_answers_skip_the_llm(monkeypatch):
    async def should_not_run(*args, **kwargs):
        raise AssertionError("LLM called for English answer")

    monkeypatch.setattr(ai_router, "generate_response", should_not_run)
    result = asyncio.run(evaluation_service.evaluate_response(_request(STRONG_ANSWER)))
    assert result["evaluated_by"] == "rule-based"


def test_regional_answers_use_llm_scores(monkeypatch):
    reply = {
        "relevanceScore": 5,
        "starStructureScore": 4,
        "specificEvidenceScore": 4,
        "roleAlignmentScore": 4,
        "outcomeOrientedScore": 4,
        "communicationScore": 4,
        "problemSolvingScore": 4,
        "culturalFitScore": 5,
        "learningAgilityScore": 4,
        "detailedFeedback": {
            "strengths": ["Jelas"],
            "weaknesses": ["Kurang metrik"],
            "suggestions": ["Tambahkan angka"],
            "culturalRelevance": "Menunjukkan gotong royong",
        },
        "modelAnswer": "Gunakan STAR.",
        "completenessScore": 4,
    }

    async def fake_generate(messages, **kwargs):
        return AIResponse(f"```json\n{json.dumps(reply)}\n```", "sealion", 0.1, False)

    monkeypatch.setattr(ai_router, "generate_response", fake_generate)
    result = asyncio.run(evaluation_service.evaluate_response(_request("Saya memimpin tim.", language="id")))

    assert result["evaluated_by"] == "sealion"
    assert result["rubric_scores"]["relevance"] == 5.0
    assert result["detailed_feedback"]["cultural_relevance"] == "Menunjukkan gotong royong"
    assert result["overall_rating"] == "Pass"
    assert result["model_answer"] == "Gunakan STAR."


def test_llm_scores_are_clamped(monkeypatch):
    reply = {key: 9 for key in (
        "relevanceScore", "starStructureScore", "specificEvidenceScore", "roleAlignmentScore",
        "outcomeOrientedScore", "communicationScore", "problemSolvingScore", "culturalFitScore",
        "learningAgilityScore",
    )}

    async def fake_generate(messages, **kwargs):
        return AIResponse(json.dumps(reply), "openai", 0.1, True)

    monkeypatch.setattr(ai_router, "generate_response", fake_generate)
    result = asyncio.run(evaluation_service.evaluate_response(_request("Saya memimpin tim.", language="ms")))
    assert all(score == 5.0 for score in result["rubric_scores"].values())


def test_llm_failure_falls_back_to_rules(monkeypatch):
    async def unavailable(messages, **kwargs):
        raise AIServiceUnavailable("No AI services available")

    monkeypatch.setattr(ai_router, "generate_response", unavailable)
    result = asyncio.run(evaluation_service.evaluate_response(_request(STRONG_ANSWER, language="th")))
    assert result["evaluated_by"] == "rule-based"


def test_session_evaluation_aggregates_responses():
    responses = [
        {"question_text": "Tell me about a checkout outage you handled", "response_text": STRONG_ANSWER},
        {"question_text": "Tell me about a failure", "response_text": "I did my best."},
    ]
    result = asyncio.run(evaluation_service.evaluate_session_responses(responses, job_position="Senior Engineer"))

    summary = result["session_summary"]
    assert summary["total_responses"] == 2
    assert len(result["response_evaluations"]) == 2
    assert summary["average_scores"]["star_structure"] == 3.5
    assert "Focus on leadership and strategic thinking examples in your responses" in summary["next_steps"]
    assert len(summary["next_steps"]) <= 5


def test_session_evaluation_requires_responses():
    with pytest.raises(ValueError):
        asyncio.run(evaluation_service.evaluate_session_responses([], job_position="Engineer"))


def test_llm_star_scores_are_coerced_and_clamped():
    parsed = {
        "starStructureScore": 4,
        "outcomeOrientedScore": 2,
        "starScores": {"situation": "4", "task": "9", "action": "strong", "overall": 0},
        "completenessScore": "mostly",
    }
    result = evaluation_service._build_llm_result(parsed, "sealion")

    assert result["star_scores"] == {
        "situation": 4.0,
        "task": 5.0,
        "action": 4,
        "result": 2,
        "overall": 1.0,
    }
    assert result["completeness_score"] == result["weighted_overall_score"]


def test_llm_star_scores_that_are_not_an_object_are_derived():
    result = evaluation_service._build_llm_result(
        {"starStructureScore": 5, "outcomeOrientedScore": 3, "starScores": "4/5"}, "sealion"
    )
    assert result["star_scores"]["situation"] == 5
    assert result["star_scores"]["result"] == 3
