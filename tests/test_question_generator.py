import asyncio
import json

from p3_academy.services import openai_service, sealion_service
from p3_academy.services.question_generator import (
    QuestionRequest,
    extract_clean_question,
    get_adaptive_context,
    get_expected_time,
    question_generator,
    translate_question,
)


def _request(**overrides):
    values = dict(job_position="Data Analyst", question_number=3, focus_areas=["leadership"])
    values.update(overrides)
    return QuestionRequest(**values)


def test_template_fallback_when_no_provider_is_configured():
    question = asyncio.run(question_generator.generate_question(_request(difficulty_level="advanced")))

    assert question["generated_by"] == "fallback"
    assert question["question_category"] == "leadership"
    assert question["question_text"] == (
        "Tell me about a time when you had to lead a team through a difficult project for Data Analyst."
    )
    assert question["star_method_relevant"] is True
    assert question["expected_answer_time"] == 234


def test_template_without_focus_areas_cycles_default_categories():
    question = question_generator.generate_from_template(_request(focus_areas=[], question_number=9))
    assert question["question_category"] == "problem-solving"
    assert "Data Analyst" in question["question_text"]


def test_openai_reply_is_parsed(monkeypatch):
    reply = {
        "questionText": "Describe a dashboard that changed a business decision.",
        "questionCategory": "technical",
        "questionType": "situational",
        "difficultyLevel": "intermediate",
        "expectedAnswerTime": 150,
        "starMethodRelevant": False,
    }

    async def fake_generate(messages, **kwargs):
        return json.dumps(reply)

    monkeypatch.setattr(openai_service, "generate_response", fake_generate)
    question = asyncio.run(question_generator.generate_question(_request()))

    assert question["generated_by"] == "openai"
    assert question["question_text"] == reply["questionText"]
    assert question["question_type"] == "situational"
    assert question["expected_answer_time"] == 150
    assert question["star_method_relevant"] is False


def test_sealion_used_when_openai_fails(monkeypatch):
    async def openai_down(messages, **kwargs):
        raise Exception("OpenAI API key is not configured")

    async def sealion_text(messages, **kwargs):
        return "<think>plan</think>\nHow would you explain churn to a non-technical manager?"

    monkeypatch.setattr(openai_service, "generate_response", openai_down)
    monkeypatch.setattr(sealion_service, "generate_response", sealion_text)
    question = asyncio.run(question_generator.generate_question(_request(preferred_language="id")))

    assert question["generated_by"] == "sealion"
    assert question["question_text"] == "How would you explain churn to a non-technical manager?"


def test_sealion_skipped_for_unsupported_language(monkeypatch):
    async def fail(messages, **kwargs):
        raise Exception("down")

    async def must_not_run(messages, **kwargs):
        raise AssertionError("SeaLion should not be used")

    monkeypatch.setattr(openai_service, "generate_response", fail)
    monkeypatch.setattr(sealion_service, "generate_response", must_not_run)
    question = asyncio.run(question_generator.generate_question(_request(preferred_language="zh-sg")))
    assert question["generated_by"] == "fallback"


def test_extract_clean_question_prefers_quoted_question():
    reply = '<think>They want leadership.</think>\nHere is one: "How did you handle a tight deadline?"'
    assert extract_clean_question(reply) == "How did you handle a tight deadline?"


def test_extract_clean_question_drops_trailing_commentary():
    reply = "Tell me about a project you led. This question tests leadership."
    assert extract_clean_question(reply) == "Tell me about a project you led."


def test_translate_question():
    text = "Tell me about a time when you had to lead a team through a difficult project for QA."
    assert translate_question(text, "en") == text
    assert translate_question(text, "id").startswith("Ceritakan tentang saat Anda harus memimpin")
    assert translate_question("Walk me through your approach.", "vi").endswith("[Terjemahan ke vi tersedia]")


def test_expected_time_by_difficulty():
    assert get_expected_time("beginner") == 144
    assert get_expected_time("intermediate") == 180
    assert get_expected_time("adaptive") == 180


def test_adaptive_context():
    assert get_adaptive_context(_request()) == ""
    strong = _request(previous_responses=[{"star_scores": {"overall": 5}}])
    weak = _request(previous_responses=[{"star_scores": {"overall": 2}}])
    assert "more challenging" in get_adaptive_context(strong)
    assert "supportive" in get_adaptive_context(weak)
    assert get_adaptive_context(_request(adaptive_difficulty=False, previous_responses=[{"star_scores": {"overall": 5}}])) == ""
