import asyncio
import json
from types import SimpleNamespace

import pytest

from p3_academy.services import sealion_service
from p3_academy.services.ai_service import (
    ai_service,
    badge_for_score as star_badge,
    normalize_overall_score,
    rubric_indicator,
)
from p3_academy.services.perform_service import (
    badge_for_score,
    calculate_performance_rating,
    calculate_trend,
    map_indicators,
)


@pytest.mark.parametrize(
    "score,rating",
    [(4.8, "Outstanding"), (4.5, "Outstanding"), (4.2, "Competent"), (3.0, "Developing"),
     (2.4, "Needs Practice"), (1.2, "Emerging"), (0.4, "Emerging")],
)
def test_performance_rating_bands(score, rating):
    assert calculate_performance_rating(score) == rating


def test_trend_compares_last_three_with_previous_three():
    assert calculate_trend([3.0, 3.0, 3.0, 4.0, 4.0, 4.0]) == "improving"
    assert calculate_trend([4.0, 4.0, 4.0, 3.0, 3.0, 3.0]) == "declining"
    assert calculate_trend([3.0, 3.1, 3.0, 3.2, 3.1, 3.0]) == "stable"


def test_trend_without_history_is_stable():
    assert calculate_trend([]) == "stable"
    assert calculate_trend([3.0]) == "stable"
    assert calculate_trend([2.0, 4.0, 4.5]) == "stable"


@pytest.mark.parametrize(
    "score,badge",
    [(4.6, "Interview Excellence"), (4.0, "Strong Performer"), (3.6, "Competent Candidate"), (2.0, "Developing Skills")],
)
def test_assessment_badges(score, badge):
    assert badge_for_score(score) == badge


def test_map_indicators():
    rubric = {
        "communication": 4.0,
        "problem_solving": 3.5,
        "cultural_fit": 3.0,
        "learning_agility": 4.0,
    }
    assert map_indicators(rubric) == {
        "communication": 4.0,
        "empathy": 3.0,
        "problem_solving": 3.5,
        "cultural_alignment": 3.5,
    }


def test_overall_score_normalisation():
    assert normalize_overall_score(75) == 7.5
    assert normalize_overall_score("8.2") == 8.2
    assert normalize_overall_score(None) == 7.5
    assert normalize_overall_score("n/a") == 7.5


@pytest.mark.parametrize("score,badge", [(8.5, "Interview Excellence"), (7.0, "Strong Candidate"), (6.9, "Interview Participant")])
def test_interview_badges(score, badge):
    assert star_badge(score) == badge


def test_completion_after_eight_exchanges():
    assert ai_service.should_complete_interview(15) is False
    assert ai_service.should_complete_interview(16) is True


def test_final_message_uses_language_and_defaults():
    message = ai_service.final_message("en", None, "Grab")
    assert "Software Engineer" in message
    assert "Grab" in message


def test_fallback_evaluation_shape():
    evaluation = ai_service.fallback_evaluation()
    assert evaluation["overall_score"] == 7.0
    assert evaluation["points_earned"] == 70
    assert evaluation["badge_earned"] == "Interview Participant"


def _perform_session(language="en"):
    return SimpleNamespace(
        id=1,
        interview_language=language,
        user_job_position="Data Analyst",
        user_company_name="Grab",
    )


def _transcript():
    return [
        SimpleNamespace(message_type="ai", content="Tell me about yourself."),
        SimpleNamespace(message_type="user", content="I like data."),
    ]


def test_evaluation_uses_rubric_reply(monkeypatch):
    reply = {
        "rubricScores": {
            "relevanceScore": 1,
            "starStructureScore": 1,
            "specificEvidenceScore": 1,
            "roleAlignmentScore": 1,
            "outcomeOrientedScore": 1,
            "communicationScore": 1,
            "problemSolvingScore": 2,
            "culturalFitScore": 1,
            "learningAgilityScore": 3,
        },
        "weightedOverallScore": 1.4,
        "overallRating": "Fail",
        "keyStrengths": ["Punctual"],
        "areasForImprovement": ["Use the STAR method", "Quantify results"],
        "actionableInsights": ["Prepare three stories with metrics"],
        "summary": "Answers lacked structure and evidence.",
    }

    async def fake_generate(messages, **kwargs):
        return json.dumps(reply)

    monkeypatch.setattr(sealion_service, "generate_response", fake_generate)
    result = asyncio.run(ai_service.generate_comprehensive_evaluation(_perform_session(), _transcript()))

    assert result["overall_score"] == pytest.approx(2.8)
    assert result["overall_rating"] == "Fail"
    assert result["badge_earned"] == "Interview Participant"
    assert result["points_earned"] == 28
    assert result["communication_score"] == 2.0
    assert result["empathy_score"] == 2.0
    assert result["problem_solving_score"] == 4.0
    assert result["cultural_alignment_score"] == 4.0
    assert result["strengths"] == ["Punctual"]
    assert result["improvement_areas"] == ["Use the STAR method", "Quantify results"]
    assert result["actionable_insights"] == ["Prepare three stories with metrics"]
    assert result["qualitative_observations"] == "Answers lacked structure and evidence."


def test_evaluation_of_fallback_assessment(monkeypatch):
    async def unavailable(messages, **kwargs):
        raise RuntimeError("SeaLion down")

    monkeypatch.setattr(sealion_service, "generate_response", unavailable)
    result = asyncio.run(ai_service.generate_comprehensive_evaluation(_perform_session(), _transcript()))

    assert result["overall_score"] == 7.5
    assert result["badge_earned"] == "Strong Candidate"
    assert result["communication_score"] == 7.5
    assert result["strengths"] == ["Clear communication", "Problem-solving ability", "Cultural adaptability"]


def test_rubric_indicator_clamps_and_ignores_bad_entries():
    assert rubric_indicator({"communicationScore": 9}, "communicationScore") == 10.0
    assert rubric_indicator({"communicationScore": "n/a"}, "communicationScore") == 7.5
    assert rubric_indicator(None, "communicationScore") == 7.5
    assert rubric_indicator({"culturalFitScore": 4, "learningAgilityScore": "x"}, "culturalFitScore", "learningAgilityScore") == 8.0


def test_trend_with_short_history_uses_available_earlier_scores():
    assert calculate_trend([3.0, 3.0, 4.0, 4.0, 4.0]) == "improving"
    assert calculate_trend([4.5, 3.0, 3.0, 3.0]) == "declining"
    assert calculate_trend([3.2, 3.0, 3.1, 3.3]) == "stable"
